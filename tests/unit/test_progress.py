from __future__ import annotations

from unittest.mock import Mock, patch

from csv_crossref.models.upload import UploadedFile
from csv_crossref.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True
    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


def test_init_with_tty_enabled():
    with patch('csv_crossref.services.progress.is_tty_enabled', return_value=True), \
         patch('csv_crossref.services.progress.tqdm') as mock_tqdm:
        tracker = ProgressTracker(3)
        assert tracker.enabled is True
        mock_tqdm.assert_called_once_with(
            total=3,
            desc="Indexing files",
            unit="file",
            disable=False,
            leave=True,
            position=0,
            ncols=80,
            ascii=True,
        )


def test_init_with_tty_disabled():
    with patch('csv_crossref.services.progress.is_tty_enabled', return_value=False):
        tracker = ProgressTracker(3)
        assert tracker.enabled is False
        assert tracker.pbar is None


def test_track_yields_uploads_and_updates_bar():
    mock_pbar = Mock()
    uploads = [UploadedFile("a.csv", ""), UploadedFile("b.csv", "")]
    with patch('csv_crossref.services.progress.is_tty_enabled', return_value=True), \
         patch('csv_crossref.services.progress.tqdm', return_value=mock_pbar):
        with ProgressTracker(2) as tracker:
            seen = list(tracker.track(uploads))
        assert seen == uploads
        assert tracker.current_file == 2
        assert mock_pbar.update.call_count == 2
        mock_pbar.set_description.assert_any_call("Indexing files (a.csv)")
        mock_pbar.close.assert_called_once()
        assert tracker.pbar is None


def test_track_without_tty_is_passthrough():
    uploads = [UploadedFile("a.csv", "")]
    with patch('csv_crossref.services.progress.is_tty_enabled', return_value=False):
        tracker = ProgressTracker(1)
        assert list(tracker.track(uploads)) == uploads
        tracker.close()
