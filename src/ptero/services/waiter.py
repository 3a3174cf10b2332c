"""
Backup completion polling.

A backup is pending while the panel reports no ``completed_at`` and completed
once it does. ``wait_for_backup`` re-reads the backup at a fixed interval
until it is completed. There is no attempt limit, no overall timeout and no
backoff; a failed read aborts the wait.
"""

from __future__ import annotations

import time
from typing import Callable

from ptero.logging import get_logger
from ptero.models.backup import Backup

logger = get_logger(__name__)


def wait_for_backup(
    fetch: Callable[[], Backup],
    poll_interval: float,
    sleep: Callable[[float], None] = time.sleep,
) -> Backup:
    """
    Poll a backup until the panel marks it completed.

    Args:
        fetch: Reads the current backup record
        poll_interval: Seconds to sleep between reads
        sleep: Sleep function

    Returns:
        The first record read with ``completed_at`` set
    """
    polls = 0
    while True:
        backup = fetch()
        polls += 1
        if backup.is_completed:
            logger.debug(f"Backup {backup.uuid} completed after {polls} poll(s)")
            return backup

        logger.debug(f"Waiting for backup {backup.uuid} ({poll_interval:.1f}s)...")
        sleep(poll_interval)


__all__ = ["wait_for_backup"]
