import logging
import sys
from typing import List, Optional

from rss_notes.config import load_config, parse_cli_arguments
from rss_notes.fetch_feed import RequestsFeedFetcher
from rss_notes.models import AppConfig
from rss_notes.scheduler import FeedScheduler
from rss_notes.synchronizer import FeedSynchronizer
from rss_notes.vault import FileSystemVault


class Main:
    """
    Main class for the RSS Notes application.
    """
    def __init__(
            self,
            config: AppConfig,
            ):
        self.config = config
        self.synchronizer = FeedSynchronizer(
            vault=FileSystemVault(config.vault_dir),
            fetcher=RequestsFeedFetcher(timeout=config.request_timeout),
            root_folder=config.root_folder,
        )

    def update(self) -> int:
        """
        Update all feeds once.
        """
        self.synchronizer.reload_feeds()
        return 0

    def watch(self) -> int:
        """
        Update all feeds now and then on every refresh interval until interrupted.
        """
        FeedScheduler(
            synchronizer=self.synchronizer,
            refresh_minutes=self.config.refresh_minutes,
        ).run()
        return 0

    def add(self, url: str) -> int:
        """
        Register a feed and update it.
        """
        self.synchronizer.subscribe(url)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    cli_args = parse_cli_arguments(argv)
    try:
        config = load_config(cli_args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    app = Main(config=config)
    if cli_args.command == "update":
        return app.update()
    if cli_args.command == "watch":
        return app.watch()
    return app.add(cli_args.url)


if __name__ == "__main__":
    sys.exit(main())
