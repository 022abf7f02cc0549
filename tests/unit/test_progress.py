from __future__ import annotations

from unittest.mock import Mock, patch

from sheetlens.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    """Test that is_tty_enabled returns sys.stdout.isatty()."""
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True

    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


class TestProgressTracker:
    """Test cases for ProgressTracker class."""

    def test_init_with_tty_enabled(self):
        with patch('sheetlens.services.progress.is_tty_enabled', return_value=True), \
             patch('sheetlens.services.progress.tqdm') as mock_tqdm:

            tracker = ProgressTracker(5, description="Test screens")

            assert tracker.total_screens == 5
            assert tracker.description == "Test screens"
            assert tracker.enabled is True

            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Test screens",
                unit="screen",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch('sheetlens.services.progress.is_tty_enabled', return_value=False):
            tracker = ProgressTracker(5)

            assert tracker.description == "Exporting screens"
            assert tracker.enabled is False
            assert tracker.pbar is None

    def test_start_and_finish_screen_with_tty_enabled(self):
        mock_pbar = Mock()

        with patch('sheetlens.services.progress.is_tty_enabled', return_value=True), \
             patch('sheetlens.services.progress.tqdm', return_value=mock_pbar):

            tracker = ProgressTracker(2)
            tracker.start_screen("People table")

            mock_pbar.set_description.assert_called_with("Exporting screens (People table)")

            tracker.finish_screen(rows=12)

            mock_pbar.update.assert_called_once_with(1)
            mock_pbar.set_postfix.assert_called_once_with(rows=12)
            mock_pbar.set_description.assert_called_with("Exporting screens")

    def test_methods_are_noops_without_tty(self):
        with patch('sheetlens.services.progress.is_tty_enabled', return_value=False):
            tracker = ProgressTracker(1)
            tracker.start_screen("x")
            tracker.finish_screen(3)
            tracker.close()

            assert tracker.pbar is None

    def test_context_manager_closes_bar(self):
        mock_pbar = Mock()

        with patch('sheetlens.services.progress.is_tty_enabled', return_value=True), \
             patch('sheetlens.services.progress.tqdm', return_value=mock_pbar):

            with ProgressTracker(1) as tracker:
                assert tracker.pbar is mock_pbar

            mock_pbar.close.assert_called_once()
            assert tracker.pbar is None
