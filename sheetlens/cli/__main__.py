from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from sheetlens.config.loader import WorkspaceError, dump_workspace, load_workspace
from sheetlens.config.settings import load_env_file, resolve_settings
from sheetlens.engine.projector import SortState
from sheetlens.logging.init import log_summary, set_debug, setup_logging
from sheetlens.services.export import export_project, format_screen_text
from sheetlens.services.screen_service import render_screen
from sheetlens.services.summary import render_export_summary, render_screen_summary
from sheetlens.store.memory import InMemoryStore, NotFoundError

"""CLI entrypoint.

    python -m sheetlens.cli --list
    python -m sheetlens.cli --screen 3 --search ann --sort Age --sort Age
    python -m sheetlens.cli --toggle-rule 7
    python -m sheetlens.cli --export 1 --out ./exports

Exit codes: 0 success, 1 fatal (workspace / lookup error), 2 partial export failure.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

_SUMMARY_PREFIX = "SUMMARY "


def _coerce_id(raw: str) -> Any:
    # YAML 上の数値 id と一致させるため数字のみなら int
    return int(raw) if raw.isdigit() else raw


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sheetlens", description="Render spreadsheet screens with rules")
    p.add_argument("--workspace", help="Workspace YAML (default: $SHEETLENS_WORKSPACE or config/workspace.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    action = p.add_mutually_exclusive_group()
    action.add_argument("--list", action="store_true", help="List projects, sheets, screens and rules")
    action.add_argument("--screen", type=_coerce_id, help="Render one screen as text")
    action.add_argument("--toggle-rule", type=_coerce_id, help="Flip a rule's active flag and save the workspace")
    action.add_argument("--export", type=_coerce_id, metavar="PROJECT_ID", help="Export every screen of a project")
    p.add_argument("--search", default="", help="Case-insensitive search over visible columns")
    p.add_argument(
        "--sort",
        action="append",
        default=[],
        metavar="COLUMN",
        help="Sort by column; repeating the same column toggles direction",
    )
    p.add_argument("--out", help="Export directory (default: $SHEETLENS_EXPORT_DIR or ./exports)")
    return p.parse_args(argv)


def _list_workspace(store: InMemoryStore) -> int:
    for project in store.list_projects():
        print(f"PROJECT {project.id}: {project.name}")
    for sheet in store.list_sheets():
        print(f"SHEET {sheet.id}: {sheet.name} cols={len(sheet.columns)} rows={sheet.row_count}")
    for screen in store.list_screens():
        print(f"SCREEN {screen.id}: {screen.name} type={screen.type.value} sheet={screen.sheet_id}")
    for rule in store.list_rules():
        state = "on" if rule.active else "off"
        op = rule.config.operator or "-"
        print(f"RULE {rule.id}: {rule.name} [{state}] {rule.type.value} {rule.column} {op} {rule.config.value or ''}".rstrip())
    return EXIT_SUCCESS


def _render_one(store: InMemoryStore, args: argparse.Namespace) -> int:
    logger = setup_logging()
    try:
        screen = store.get_screen(args.screen)
    except NotFoundError as e:
        logger.error(str(e))
        return EXIT_FATAL
    sort = SortState.from_config(screen.config)
    for col in args.sort:
        sort = sort.toggle(col)
    render = render_screen(store, screen.id, search_query=args.search, sort=sort)
    if render.sheet_missing:
        logger.warning(f"sheet {screen.sheet_id} not found for screen {screen.id}")
    print(format_screen_text(render), end="")
    log_summary(render_screen_summary(render)[len(_SUMMARY_PREFIX):])
    return EXIT_SUCCESS


def _toggle_rule(store: InMemoryStore, rule_id: Any, workspace_path: Path) -> int:
    logger = setup_logging()
    try:
        rule = store.get_rule(rule_id)
    except NotFoundError as e:
        logger.error(str(e))
        return EXIT_FATAL
    updated = store.set_rule_active(rule.id, not rule.active)
    dump_workspace(store, workspace_path)
    logger.info(f"rule {updated.id} ({updated.name}) active={str(updated.active).lower()}")
    return EXIT_SUCCESS


def _export(store: InMemoryStore, project_id: Any, out_dir: Path) -> int:
    logger = setup_logging()
    logger.info(f"Exporting project {project_id} to: {out_dir}")
    result = export_project(store, project_id, out_dir)
    log_summary(render_export_summary(result)[len(_SUMMARY_PREFIX):])
    if result.failed_screens > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみ sys.argv を読む ([] はテストからの明示指定)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    load_env_file(Path(".env"), override=True)
    settings = resolve_settings(workspace=args.workspace, export_dir=args.out)

    if args.debug:
        set_debug(True)
        logger.debug("debug mode enabled")

    try:
        store = load_workspace(settings.workspace_path)
    except WorkspaceError as e:
        logger.error(f"workspace: {e}")
        return EXIT_FATAL
    logger.debug(f"workspace loaded: {settings.workspace_path}")

    if args.screen is not None:
        return _render_one(store, args)
    if args.toggle_rule is not None:
        return _toggle_rule(store, args.toggle_rule, settings.workspace_path)
    if args.export is not None:
        return _export(store, args.export, settings.export_dir)
    return _list_workspace(store)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
