"""Image viewer building blocks: actions, configuration, image cache and polling."""

__version__ = "0.1.0"
__all__ = ["action", "cache", "config", "defaults", "fdpoll", "strings"]