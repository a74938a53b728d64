"""Built-in configuration: section and key names, default values, parsers."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Name of the default config file to load
DEFAULT_FILE = "config"

# Section names
GENERAL = "general"
VIEWER = "viewer"
SLIDESHOW = "slideshow"
GALLERY = "gallery"
LIST = "list"
FONT = "font"
INFO = "info"
INFO_VIEWER = f"{INFO}.{VIEWER}"
INFO_SLIDESHOW = f"{INFO}.{SLIDESHOW}"
INFO_GALLERY = f"{INFO}.{GALLERY}"
KEYS = "keys"
KEYS_VIEWER = f"{KEYS}.{VIEWER}"
KEYS_SLIDESHOW = f"{KEYS}.{SLIDESHOW}"
KEYS_GALLERY = f"{KEYS}.{GALLERY}"

# Sections that accept keys beyond the built-in ones (key bindings)
KEY_SECTIONS = frozenset({KEYS_VIEWER, KEYS_SLIDESHOW, KEYS_GALLERY})

# Configuration parameters
GNRL_MODE = "mode"
GNRL_SIZE = "size"
GNRL_POSITION = "position"
GNRL_OVERLAY = "overlay"
GNRL_DECOR = "decoration"
GNRL_SIGUSR1 = "sigusr1"
GNRL_SIGUSR2 = "sigusr2"
GNRL_IPC = "ipc"
GNRL_APP_ID = "app_id"
VIEW_WINDOW = "window"
VIEW_TRANSP = "transparency"
VIEW_SCALE = "scale"
VIEW_POSITION = "position"
VIEW_AA = "antialiasing"
VIEW_LOOP = "loop"
VIEW_HISTORY = "history"
VIEW_PRELOAD = "preload"
VIEW_SSHOW_TM = "time"
GLRY_SIZE = "size"
GLRY_CACHE = "cache"
GLRY_PRELOAD = "preload"
GLRY_PSTORE = "pstore"
GLRY_FILL = "fill"
GLRY_AA = "antialiasing"
GLRY_WINDOW = "window"
GLRY_BKG = "background"
GLRY_SELECT = "select"
GLRY_BORDER = "border"
GLRY_SHADOW = "shadow"
LIST_FROMFILE = "from_file"
LIST_ORDER = "order"
LIST_REVERSE = "reverse"
LIST_RECURSIVE = "recursive"
LIST_ALL = "all"
LIST_FSMON = "fsmon"
FONT_NAME = "name"
FONT_SIZE = "size"
FONT_COLOR = "color"
FONT_BKG = "background"
FONT_SHADOW = "shadow"
INFO_SHOW = "show"
INFO_PADDING = "padding"
INFO_ITIMEOUT = "info_timeout"
INFO_STIMEOUT = "status_timeout"
INFO_TL = "top_left"
INFO_TR = "top_right"
INFO_BL = "bottom_left"
INFO_BR = "bottom_right"

# Some configuration values
YES = "yes"
NO = "no"
AUTO = "auto"
FROM_IMAGE = "image"
FULLSCREEN = "fullscreen"

_REMOVE_CMD = "exec rm '%' && echo \"File removed: %\""

_GENERAL = {
    GNRL_MODE: VIEWER,
    GNRL_SIZE: "1280,720",
    GNRL_POSITION: AUTO,
    GNRL_OVERLAY: YES,
    GNRL_DECOR: NO,
    GNRL_SIGUSR1: "reload",
    GNRL_SIGUSR2: "next_file",
    GNRL_IPC: "",
    GNRL_APP_ID: "swayimg",
}

_VIEWER = {
    VIEW_WINDOW: "#00000000",
    VIEW_TRANSP: "grid",
    VIEW_SCALE: "optimal",
    VIEW_POSITION: "center",
    VIEW_AA: "mks13",
    VIEW_LOOP: YES,
    VIEW_HISTORY: "1",
    VIEW_PRELOAD: "1",
}

_SLIDESHOW = {
    VIEW_SSHOW_TM: "3",
    VIEW_WINDOW: "auto",
    VIEW_TRANSP: "#000000ff",
    VIEW_SCALE: "fit",
    VIEW_POSITION: "center",
    VIEW_AA: "mks13",
}

_GALLERY = {
    GLRY_SIZE: "200",
    GLRY_CACHE: "100",
    GLRY_PRELOAD: NO,
    GLRY_PSTORE: NO,
    GLRY_FILL: YES,
    GLRY_AA: "mks13",
    GLRY_WINDOW: "#00000000",
    GLRY_BKG: "#202020ff",
    GLRY_SELECT: "#404040ff",
    GLRY_BORDER: "#000000ff",
    GLRY_SHADOW: "#000000ff",
}

_LIST = {
    LIST_FROMFILE: NO,
    LIST_ORDER: "alpha",
    LIST_REVERSE: NO,
    LIST_RECURSIVE: NO,
    LIST_ALL: NO,
    LIST_FSMON: YES,
}

_FONT = {
    FONT_NAME: "monospace",
    FONT_SIZE: "14",
    FONT_COLOR: "#ccccccff",
    FONT_SHADOW: "#000000d0",
    FONT_BKG: "#00000000",
}

_INFO = {
    INFO_SHOW: YES,
    INFO_PADDING: "10",
    INFO_ITIMEOUT: "5",
    INFO_STIMEOUT: "3",
}

_INFO_VIEWER = {
    INFO_TL: "+name,+format,+filesize,+imagesize,+exif",
    INFO_TR: "index",
    INFO_BL: "scale,frame",
    INFO_BR: "status",
}

_INFO_GALLERY = {
    INFO_TL: "none",
    INFO_TR: "index",
    INFO_BL: "none",
    INFO_BR: "name,status",
}

_INFO_SLIDESHOW = {
    INFO_TL: "none",
    INFO_TR: "none",
    INFO_BL: "none",
    INFO_BR: "dir,status",
}

_KEYS_VIEWER = {
    "F1": "help",
    "Home": "first_file",
    "End": "last_file",
    "Prior": "prev_file",
    "Next": "next_file",
    "Space": "next_file",
    "Shift+r": "rand_file",
    "Shift+d": "prev_dir",
    "d": "next_dir",
    "Shift+o": "prev_frame",
    "o": "next_frame",
    "c": "skip_file",
    "n": "animation",
    "f": "fullscreen",
    "s": "mode slideshow",
    "Return": "mode gallery",
    "Left": "step_left 10",
    "Right": "step_right 10",
    "Up": "step_up 10",
    "Down": "step_down 10",
    "Equal": "zoom +10",
    "Plus": "zoom +10",
    "Minus": "zoom -10",
    "w": "zoom width",
    "Shift+w": "zoom height",
    "z": "zoom fit",
    "Shift+z": "zoom fill",
    "0": "zoom real",
    "BackSpace": "zoom optimal",
    "k": "zoom keep",
    "Alt+s": "zoom",
    "bracketleft": "rotate_left",
    "bracketright": "rotate_right",
    "m": "flip_vertical",
    "Shift+m": "flip_horizontal",
    "a": "antialiasing",
    "r": "reload",
    "i": "info",
    "Shift+Delete": _REMOVE_CMD,
    "Escape": "exit",
    "q": "exit",
    "ScrollLeft": "step_right 5",
    "ScrollRight": "step_left 5",
    "ScrollUp": "step_up 5",
    "ScrollDown": "step_down 5",
    "Ctrl+ScrollUp": "zoom +10",
    "Ctrl+ScrollDown": "zoom -10",
    "Shift+ScrollUp": "prev_file",
    "Shift+ScrollDown": "next_file",
    "Alt+ScrollUp": "prev_frame",
    "Alt+ScrollDown": "next_frame",
    "MouseLeft": "drag",
    "MouseSide": "prev_file",
    "MouseExtra": "next_file",
}

_KEYS_SLIDESHOW = {
    "F1": "help",
    "Home": "first_file",
    "End": "last_file",
    "Prior": "prev_file",
    "Next": "next_file",
    "Shift+r": "rand_file",
    "Shift+d": "prev_dir",
    "d": "next_dir",
    "Space": "pause",
    "i": "info",
    "f": "fullscreen",
    "Return": "mode",
    "Escape": "exit",
    "q": "exit",
}

_KEYS_GALLERY = {
    "F1": "help",
    "Home": "first_file",
    "End": "last_file",
    "Left": "step_left",
    "Right": "step_right",
    "Up": "step_up",
    "Down": "step_down",
    "Prior": "page_up",
    "Next": "page_down",
    "c": "skip_file",
    "f": "fullscreen",
    "s": "mode slideshow",
    "Return": "mode viewer",
    "a": "antialiasing",
    "r": "reload",
    "i": "info",
    "Equal": "thumb +20",
    "Plus": "thumb +20",
    "Minus": "thumb -20",
    "Shift+Delete": _REMOVE_CMD,
    "Escape": "exit",
    "q": "exit",
    "ScrollLeft": "step_right",
    "ScrollRight": "step_left",
    "ScrollUp": "step_up",
    "ScrollDown": "step_down",
    "Ctrl+ScrollUp": "thumb +20",
    "Ctrl+ScrollDown": "thumb -20",
    "MouseLeft": "mode viewer",
}

DEFAULTS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        name: MappingProxyType(params)
        for name, params in (
            (GENERAL, _GENERAL),
            (VIEWER, _VIEWER),
            (SLIDESHOW, _SLIDESHOW),
            (GALLERY, _GALLERY),
            (LIST, _LIST),
            (FONT, _FONT),
            (INFO, _INFO),
            (INFO_VIEWER, _INFO_VIEWER),
            (INFO_SLIDESHOW, _INFO_SLIDESHOW),
            (INFO_GALLERY, _INFO_GALLERY),
            (KEYS_VIEWER, _KEYS_VIEWER),
            (KEYS_SLIDESHOW, _KEYS_SLIDESHOW),
            (KEYS_GALLERY, _KEYS_GALLERY),
        )
    }
)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_UINT64_MAX = 2**64 - 1


def default_value(section: str, key: str) -> str:
    """Return the built-in value of a key; KeyError if there is none."""
    try:
        return DEFAULTS[section][key]
    except KeyError:
        raise KeyError(
            f'default value for key "{key}" in section "{section}" not found'
        ) from None


def parse_bool(text: str) -> bool:
    """Parse "yes" or "no"; ValueError for anything else."""
    if text == YES:
        return True
    if text == NO:
        return False
    raise ValueError(f'expected "{YES}" or "{NO}", got {text!r}')


def parse_color(text: str) -> int:
    """Parse an RGB or RGBA hex color into an ARGB integer.

    Leading '#' and whitespace are ignored. Values longer than six digits
    carry alpha in the last byte (RRGGBBAA); shorter ones are opaque.
    """
    start = 0
    while start < len(text) and (text[start] == "#" or text[start].isspace()):
        start += 1
    body = text[start:]

    digits = body
    if digits[:2].lower() == "0x" and len(digits) > 2 and digits[2] in _HEX_DIGITS:
        digits = digits[2:]
    if any(char not in _HEX_DIGITS for char in digits):
        raise ValueError(f"invalid color: {text!r}")

    value = int(digits, 16) if digits else 0
    if value > _UINT64_MAX:
        raise ValueError(f"color out of range: {text!r}")

    color = value & 0xFFFFFFFF
    if len(body) > 6:
        color = (color >> 8) | ((color & 0xFF) << 24)
    else:
        color |= 0xFF000000
    return color & 0xFFFFFFFF