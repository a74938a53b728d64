"""Image cache that limits how many images keep their frames loaded."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable
from typing import Any, Protocol


class CachedImage(Protocol):
    """What the cache needs from an image: its unique source."""

    source: str


class ImageCache:
    """Bounded queue of images whose frames stay in memory.

    When the queue is full, putting a new image evicts the oldest one and
    hands it to ``release`` so its frames can be freed. ``is_loaded`` tells
    whether an image taken back out of the cache still holds its frames;
    without it every cached image counts as loaded.
    """

    def __init__(
        self,
        capacity: int,
        release: Callable[[Any], None] | None = None,
        is_loaded: Callable[[Any], bool] | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"cache capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._release = release
        self._is_loaded = is_loaded
        # Oldest entry first, newest last.
        self._queue: OrderedDict[str, Any] = OrderedDict()

    @property
    def capacity(self) -> int:
        """Max number of images held at once."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, source: object) -> bool:
        return source in self._queue

    def _evict(self, image: Any) -> None:
        if self._release is not None:
            self._release(image)

    def put(self, image: CachedImage) -> None:
        """Add an image, evicting the oldest one if the cache is full."""
        if image.source in self._queue:
            raise ValueError(f"image {image.source!r} is already cached")
        if len(self._queue) >= self._capacity:
            _, oldest = self._queue.popitem(last=False)
            self._evict(oldest)
        self._queue[image.source] = image

    def out(self, image: CachedImage) -> bool:
        """Take an image out of the cache without releasing it.

        Returns True if the image was cached and still has its frames.
        """
        cached = self._queue.pop(image.source, None)
        if cached is None:
            return False
        if self._is_loaded is None:
            return True
        return bool(self._is_loaded(cached))

    def trim(self, size: int) -> None:
        """Keep only the ``size`` most recently added images, releasing the rest."""
        if size < 0:
            raise ValueError(f"cache size must not be negative, got {size}")
        excess = len(self._queue) - size
        if excess <= 0:
            return
        for source in reversed(list(self._queue)[:excess]):
            self._evict(self._queue.pop(source))

    def clear(self) -> None:
        """Release every cached image."""
        self.trim(0)