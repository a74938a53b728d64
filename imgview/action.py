"""Actions: the set of predefined commands the viewer executes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .strings import WHITESPACE, split

# Max number of actions in one sequence; the rest are dropped.
MAX_SEQUENCE = 32


class ActionError(ValueError):
    """Raised when an action description cannot be parsed."""


class ActionType(Enum):
    """Supported actions, valued by their names in configuration."""

    NONE = "none"
    HELP = "help"
    FIRST_FILE = "first_file"
    LAST_FILE = "last_file"
    PREV_DIR = "prev_dir"
    NEXT_DIR = "next_dir"
    PREV_FILE = "prev_file"
    NEXT_FILE = "next_file"
    RAND_FILE = "rand_file"
    SKIP_FILE = "skip_file"
    PREV_FRAME = "prev_frame"
    NEXT_FRAME = "next_frame"
    ANIMATION = "animation"
    FULLSCREEN = "fullscreen"
    MODE = "mode"
    STEP_LEFT = "step_left"
    STEP_RIGHT = "step_right"
    STEP_UP = "step_up"
    STEP_DOWN = "step_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ZOOM = "zoom"
    THUMB = "thumb"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    FLIP_VERTICAL = "flip_vertical"
    FLIP_HORIZONTAL = "flip_horizontal"
    RELOAD = "reload"
    REDRAW = "redraw"
    DRAG = "drag"
    ANTIALIASING = "antialiasing"
    INFO = "info"
    EXEC = "exec"
    EXPORT = "export"
    PAUSE = "pause"
    STATUS = "status"
    EXIT = "exit"


_BY_NAME = {member.value: member for member in ActionType}


@dataclass(frozen=True)
class Action:
    """A single action with its free-form parameters."""

    type: ActionType
    params: str = ""

    @property
    def name(self) -> str:
        """The action's name as written in configuration."""
        return self.type.value

    @classmethod
    def parse(cls, text: str) -> Action:
        """Parse one action: a name optionally followed by parameters."""
        text = text.strip(WHITESPACE)

        end = 0
        while end < len(text) and text[end] not in WHITESPACE:
            end += 1
        name = text[:end]

        action_type = _BY_NAME.get(name)
        if action_type is None:
            raise ActionError(f"unknown action: {name!r}")

        return cls(action_type, text[end:].lstrip(WHITESPACE))


def parse_actions(text: str) -> list[Action]:
    """Parse a ';'-separated sequence of actions.

    At most MAX_SEQUENCE actions are kept. Raises ActionError if the text
    holds no actions or any of them is invalid.
    """
    parts = split(text, ";")
    if not parts:
        raise ActionError("empty action sequence")
    return [Action.parse(part) for part in parts[:MAX_SEQUENCE]]