import logging
from datetime import datetime, timezone
from typing import Optional

from apscheduler.schedulers.base import BaseScheduler
from apscheduler.schedulers.blocking import BlockingScheduler

from rss_notes.synchronizer import FeedSynchronizer

UPDATE_JOB_ID = "update-feeds"


class FeedScheduler:
    """
    Runs a synchronization pass immediately and then on a fixed interval.
    """
    def __init__(
            self,
            synchronizer: FeedSynchronizer,
            refresh_minutes: int = 60,
            scheduler: Optional[BaseScheduler] = None,
            ):
        self.synchronizer = synchronizer
        self.refresh_minutes = refresh_minutes
        self.scheduler = scheduler or BlockingScheduler(timezone=timezone.utc)

    def schedule(self):
        """
        Register the recurring update job. Passes never overlap: a pass that
        comes due while the previous one is still running is dropped.
        """
        self.scheduler.add_job(
            self.synchronizer.reload_feeds,
            "interval",
            minutes=self.refresh_minutes,
            id=UPDATE_JOB_ID,
            next_run_time=datetime.now(timezone.utc),
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        logging.info(f"Feeds will be updated every {self.refresh_minutes} minutes.")

    def run(self):
        """
        Schedule the update job and block until interrupted.
        """
        self.schedule()
        try:
            self.scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logging.info("Stopping feed updates.")
            if self.scheduler.running:
                self.scheduler.shutdown(wait=False)
