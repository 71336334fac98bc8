"""
Frame Schedulers
================
The animation never drives itself: a scheduler calls ``callback(frame_index)``
once per frame, with indices 0, 1, 2, ...

Classes:
    FrameScheduler: Protocol implemented by both schedulers.
    QtFrameScheduler: QTimer based, used by the application.
    ManualScheduler: Advanced explicitly, used for deterministic runs.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, QTimer

from solarsystem import config

logger = logging.getLogger(__name__)

FrameCallback = Callable[[int], None]


class FrameScheduler(Protocol):
    @property
    def running(self) -> bool: ...
    def start(self, callback: FrameCallback) -> None: ...
    def stop(self) -> None: ...


class ManualScheduler:
    def __init__(self) -> None:
        self.frame_index: int = 0
        self._callback: Optional[FrameCallback] = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: FrameCallback) -> None:
        if self.running:
            raise RuntimeError("Scheduler is already running.")
        self._callback = callback

    def stop(self) -> None:
        self._callback = None

    def advance(self, frames: int = 1) -> None:
        """Run ``frames`` frames back to back."""
        if self._callback is None:
            raise RuntimeError("Scheduler is not running.")
        for _ in range(frames):
            index = self.frame_index
            self.frame_index += 1
            self._callback(index)


class QtFrameScheduler(QObject):
    def __init__(self, interval_ms: int = config.FRAME_INTERVAL_MS, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.frame_index: int = 0
        self._callback: Optional[FrameCallback] = None

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def running(self) -> bool:
        return self._timer.isActive()

    def start(self, callback: FrameCallback) -> None:
        if self.running:
            raise RuntimeError("Scheduler is already running.")
        self._callback = callback
        self._timer.start()
        logger.info(f"Animation started ({self._timer.interval()} ms per frame).")

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            logger.info(f"Animation stopped after {self.frame_index} frames.")
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is None:
            return
        index = self.frame_index
        self.frame_index += 1
        self._callback(index)
