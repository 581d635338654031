"""Base worker class with standard signals for background operations."""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal


class BaseWorker(QObject):
    """Base class for background workers using moveToThread pattern.

    Usage:
        worker = SomeWorker(args)
        thread = QThread()
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        thread.finished.connect(thread.deleteLater)
        thread.start()

    A worker that is never moved runs inline: ``worker.run()`` then delivers
    its signals synchronously to receivers on the calling thread.
    """

    started = Signal()
    finished = Signal(object)           # result data
    error = Signal(str)                 # error message

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)

    def run(self) -> None:
        """Override in subclass. Called when thread starts."""
        raise NotImplementedError
