"""Process-wide logging state.

One ``LoggingState`` exists per process. It owns the record queue and
the listener thread that drains it into the console and file handlers.
"""

import contextlib
import queue
import threading
import time
from dataclasses import dataclass, field
from logging.handlers import QueueListener


@dataclass
class LoggingState:
    """Listener, queue and levels of the installer's root logger.

    Attributes:
        lock: Guards one-time root logger setup
        root_initialized: Whether handlers are attached
        queue_listener: Thread writing queued records to the handlers
        log_queue: Queue shared by the QueueHandler and the listener
        levels: Console and file level names currently in effect

    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None
    levels: tuple[str, str] | None = None

    def drain(self, timeout: float = 5.0) -> None:
        """Wait for queued records to be written, then flush handlers."""
        if self.queue_listener is None or self.log_queue is None:
            return

        deadline = time.monotonic() + timeout
        while not self.log_queue.empty() and time.monotonic() < deadline:
            time.sleep(0.01)
        # the listener may still hold the last record it dequeued
        time.sleep(0.1)

        for handler in self.queue_listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()

    def stop(self) -> None:
        """Drain and stop the listener, forgetting the queue."""
        if self.queue_listener is not None:
            self.drain()
            self.queue_listener.stop()
        self.queue_listener = None
        self.log_queue = None
        self.root_initialized = False
        self.levels = None


_state = LoggingState()


def get_state() -> LoggingState:
    """Return the process-wide logging state."""
    return _state
