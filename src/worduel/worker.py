# Area: Service
"""
worduel.worker — Periodic sweeper
=================================

Optional background thread that calls ``WorduelService.sweep()`` every
``cleanup_interval`` seconds. Hosts with their own scheduler can call
``sweep()`` directly instead.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .service import WorduelService

logger = logging.getLogger("worduel.worker")


class CleanupWorker:
    """Daemon thread sweeping a service on a fixed interval."""

    def __init__(self, service: WorduelService, interval: Optional[float] = None):
        self.service = service
        self.interval = interval if interval is not None else service.settings.cleanup_interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="worduel-cleanup", daemon=True)
        self._thread.start()
        logger.info("Cleanup worker started (every %ss)", self.interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Cleanup worker stopped")

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.service.sweep()
            except Exception:
                logger.exception("Sweep failed")
