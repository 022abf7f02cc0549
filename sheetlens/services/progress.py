from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display for project exports (tqdm, TTY only).

A single tqdm bar counts exported screens. In non-TTY environments (CI,
redirected output) no bar is created, so the log stays free of ANSI
control sequences.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """Screen-level progress bar.

    Usage:
        with ProgressTracker(len(screens)) as progress:
            for screen in screens:
                progress.start_screen(screen.name)
                ...
                progress.finish_screen()
    """

    def __init__(self, total_screens: int, *, description: str = "Exporting screens") -> None:
        self.total_screens = total_screens
        self.description = description

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_screens,
                desc=description,
                unit="screen",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def start_screen(self, screen_name: str) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({screen_name})")

    def finish_screen(self, rows: int = 0) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_postfix(rows=rows)
            self.pbar.set_description(self.description)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
