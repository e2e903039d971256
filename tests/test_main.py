"""Tests for the command line entry point."""

import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from rss_notes.main import Main, main
from rss_notes.models import AppConfig


class TestMain(unittest.TestCase):
    """Test component wiring and command dispatch."""

    def setUp(self):
        self.config = AppConfig(
            vault_dir="/vault",
            root_folder="Feeds",
            refresh_minutes=15,
            request_timeout=3.0,
        )

    @patch("rss_notes.main.FeedSynchronizer")
    @patch("rss_notes.main.RequestsFeedFetcher")
    @patch("rss_notes.main.FileSystemVault")
    def test_components_are_built_from_config(self, mock_vault, mock_fetcher, mock_synchronizer):
        Main(config=self.config)

        mock_vault.assert_called_once_with("/vault")
        mock_fetcher.assert_called_once_with(timeout=3.0)
        mock_synchronizer.assert_called_once_with(
            vault=mock_vault.return_value,
            fetcher=mock_fetcher.return_value,
            root_folder="Feeds",
        )

    @patch("rss_notes.main.FeedScheduler")
    @patch("rss_notes.main.FeedSynchronizer")
    def test_watch_runs_scheduler(self, mock_synchronizer, mock_scheduler):
        self.assertEqual(Main(config=self.config).watch(), 0)

        mock_scheduler.assert_called_once_with(
            synchronizer=mock_synchronizer.return_value,
            refresh_minutes=15,
        )
        mock_scheduler.return_value.run.assert_called_once()

    @patch("rss_notes.main.logging.basicConfig")
    @patch("rss_notes.main.load_config")
    @patch("rss_notes.main.Main")
    def test_main_dispatches_commands(self, mock_main, mock_load_config, mock_basic_config):
        mock_load_config.return_value = self.config
        app = MagicMock()
        app.update.return_value = 0
        app.watch.return_value = 0
        app.add.return_value = 0
        mock_main.return_value = app

        self.assertEqual(main(["update"]), 0)
        app.update.assert_called_once()

        self.assertEqual(main(["watch"]), 0)
        app.watch.assert_called_once()

        self.assertEqual(main(["add", "https://example.com/feed"]), 0)
        app.add.assert_called_once_with("https://example.com/feed")

        mock_main.assert_called_with(config=self.config)
        mock_basic_config.assert_called_with(
            level="INFO",
            format="%(asctime)s %(levelname)s %(message)s",
        )

    @patch("rss_notes.main.Main")
    @patch("rss_notes.main.load_config")
    def test_main_config_error(self, mock_load_config, mock_main):
        mock_load_config.side_effect = ValueError("No vault directory provided.")

        with patch("sys.stderr") as mock_stderr:
            self.assertEqual(main(["update"]), 2)

        mock_main.assert_not_called()
        written = "".join(call.args[0] for call in mock_stderr.write.call_args_list)
        self.assertIn("Configuration error: No vault directory provided.", written)

    @patch("rss_notes.main.Main")
    @patch("rss_notes.config.load_dotenv")
    def test_main_unknown_log_level_is_config_error(self, mock_load_dotenv, mock_main):
        with tempfile.TemporaryDirectory() as vault_dir, patch.dict(os.environ, {}, clear=True), patch("sys.stderr") as mock_stderr:
            self.assertEqual(main(["-v", vault_dir, "-l", "chatty", "update"]), 2)

        mock_main.assert_not_called()
        written = "".join(call.args[0] for call in mock_stderr.write.call_args_list)
        self.assertIn("Unknown log level", written)


if __name__ == "__main__":
    unittest.main()
