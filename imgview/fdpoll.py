"""File descriptor poller with wakeup events and timers."""

from __future__ import annotations

import math
import os
import selectors
import time
from collections.abc import Callable
from typing import Protocol, Union

Callback = Callable[[], None]


class _HasFileno(Protocol):
    def fileno(self) -> int: ...


FileLike = Union[int, _HasFileno]


class Event:
    """A wakeup notification that stays readable until it is reset."""

    def __init__(self) -> None:
        if hasattr(os, "eventfd"):
            fd = os.eventfd(0, os.EFD_NONBLOCK | os.EFD_CLOEXEC)
            self._read_fd = self._write_fd = fd
        else:
            self._read_fd, self._write_fd = os.pipe()
            os.set_blocking(self._read_fd, False)
            os.set_blocking(self._write_fd, False)
        self._closed = False

    def fileno(self) -> int:
        """Descriptor that becomes readable when the event is set."""
        return self._read_fd

    def set(self) -> None:
        """Raise the notification."""
        try:
            if self._read_fd == self._write_fd:
                os.eventfd_write(self._write_fd, 1)
            else:
                os.write(self._write_fd, b"\x01")
        except BlockingIOError:
            pass  # already signalled as much as it can be

    def reset(self) -> None:
        """Clear the notification."""
        try:
            if self._read_fd == self._write_fd:
                os.eventfd_read(self._read_fd)
            else:
                while os.read(self._read_fd, 4096):
                    pass
        except BlockingIOError:
            pass

    def close(self) -> None:
        """Close the underlying descriptors."""
        if self._closed:
            return
        self._closed = True
        os.close(self._read_fd)
        if self._write_fd != self._read_fd:
            os.close(self._write_fd)


class Timer:
    """One-shot or periodic timer driven by a Poller; times are in ms."""

    def __init__(self, callback: Callback) -> None:
        self.callback = callback
        self._deadline: float | None = None
        self._interval = 0.0

    @property
    def armed(self) -> bool:
        """Whether the timer is going to fire."""
        return self._deadline is not None

    def reset(self, delay: int, interval: int = 0) -> None:
        """Fire after ``delay`` ms, then every ``interval`` ms; delay 0 stops it."""
        if delay < 0 or interval < 0:
            raise ValueError("timer delay and interval must not be negative")
        self._interval = interval / 1000
        self._deadline = time.monotonic() + delay / 1000 if delay else None

    def remaining(self) -> int:
        """Milliseconds until the timer fires, 0 if it is stopped."""
        if self._deadline is None:
            return 0
        left = self._deadline - time.monotonic()
        return max(0, int(left * 1000))

    def _time_left(self, now: float) -> float | None:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - now)

    def _expire(self, now: float) -> bool:
        if self._deadline is None or self._deadline > now:
            return False
        if self._interval:
            missed = math.floor((now - self._deadline) / self._interval) + 1
            self._deadline += missed * self._interval
        else:
            self._deadline = None
        return True


class Poller:
    """Waits on descriptors and timers and calls their handlers."""

    def __init__(self) -> None:
        self._selector = selectors.DefaultSelector()
        self._count = 0
        self._owned_fds: list[int] = []
        self._events: list[Event] = []
        self._timers: list[Timer] = []
        self._closed = False

    def __enter__(self) -> Poller:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _register(self, fd: FileLike, callback: Callback) -> None:
        if self._closed:
            raise ValueError("poller is closed")
        self._selector.register(fd, selectors.EVENT_READ, (self._count, callback))
        self._count += 1

    def add(self, fd: FileLike, callback: Callback) -> None:
        """Watch a descriptor for input; the poller closes it on close()."""
        self._register(fd, callback)
        self._owned_fds.append(fd if isinstance(fd, int) else fd.fileno())

    def add_event(self, callback: Callback) -> Event:
        """Create a wakeup event whose handler runs while it is set."""
        event = Event()
        self._register(event.fileno(), callback)
        self._events.append(event)
        return event

    def add_timer(self, callback: Callback) -> Timer:
        """Create a stopped timer whose handler runs when it expires."""
        if self._closed:
            raise ValueError("poller is closed")
        timer = Timer(callback)
        self._timers.append(timer)
        return timer

    def next(self, timeout: float | None = None) -> int:
        """Wait for activity (at most ``timeout`` seconds) and run handlers.

        Returns the number of handlers called.
        """
        if self._closed:
            raise ValueError("poller is closed")

        now = time.monotonic()
        wait = timeout
        for timer in self._timers:
            left = timer._time_left(now)
            if left is not None:
                wait = left if wait is None else min(wait, left)
        if wait is None and not self._selector.get_map():
            raise RuntimeError("nothing to wait for")

        ready = self._selector.select(wait)
        handlers = sorted((key.data for key, _ in ready), key=lambda item: item[0])
        for _, callback in handlers:
            callback()

        fired = 0
        now = time.monotonic()
        for timer in list(self._timers):
            if timer._expire(now):
                timer.callback()
                fired += 1

        return len(handlers) + fired

    def close(self) -> None:
        """Stop polling and close every descriptor."""
        if self._closed:
            return
        self._closed = True
        self._selector.close()
        for fd in self._owned_fds:
            try:
                os.close(fd)
            except OSError:
                pass
        for event in self._events:
            event.close()
        self._owned_fds.clear()
        self._events.clear()
        self._timers.clear()