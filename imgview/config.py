"""Program configuration: sections of key/value parameters with defaults."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .defaults import (
    DEFAULTS,
    KEY_SECTIONS,
    default_value,
    parse_bool,
    parse_color,
)
from .strings import WHITESPACE, search_index, split, to_num

log = logging.getLogger(__name__)

_APP_DIR = "swayimg"

# Environment variable (or None for a fixed path) and directory to search
# for configuration files given by a bare name.
_CONFIG_DIRS: tuple[tuple[str | None, str], ...] = (
    ("XDG_CONFIG_HOME", _APP_DIR),
    ("HOME", f".config/{_APP_DIR}"),
    ("XDG_CONFIG_DIRS", _APP_DIR),
    (None, f"/etc/xdg/{_APP_DIR}"),
)

_DIRECT_PREFIXES = ("/", "./", "../")
_INCLUDE = "include"

# Section and key names given on the command line are cut to this length.
_ARG_NAME_MAX = 31


class ConfigError(ValueError):
    """Raised when a configuration parameter cannot be set."""


def _fallback_default(section: str, key: str) -> str:
    try:
        return default_value(section, key)
    except KeyError:
        log.warning(
            'Default value for key "%s" in section "%s" not found', key, section
        )
        return ""


@dataclass
class Section:
    """A named configuration section holding key/value parameters."""

    name: str
    params: dict[str, str] = field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.params

    def get(self, key: str) -> str:
        """Return a parameter value, or "" (with a warning) if it is absent."""
        try:
            return self.params[key]
        except KeyError:
            log.warning(
                'Value for key "%s" in section "%s" not found', key, self.name
            )
            return ""

    def get_oneof(self, key: str, choices: Sequence[str]) -> int:
        """Return the index of the value in choices, falling back to the default."""
        value = self.get(key)
        index = search_index(choices, value)
        if index is None:
            default = _fallback_default(self.name, key)
            log.warning(
                'Invalid config value "%s = %s" in section "%s": '
                'expected one of: %s; the default value "%s" will be used',
                key,
                value,
                self.name,
                ", ".join(choices),
                default,
            )
            index = search_index(choices, default)
        return index if index is not None else 0

    def get_bool(self, key: str) -> bool:
        """Return a yes/no parameter, falling back to the default."""
        value = self.get(key)
        try:
            return parse_bool(value)
        except ValueError:
            pass
        try:
            result = parse_bool(_fallback_default(self.name, key))
        except ValueError:
            result = False
        log.warning(
            'Invalid config value "%s = %s" in section "%s": '
            'expected "yes" or "no", the default value "%s" will be used',
            key,
            value,
            self.name,
            "yes" if result else "no",
        )
        return result

    def get_num(self, key: str, min_val: int, max_val: int) -> int:
        """Return an integer parameter in [min_val, max_val], else the default."""
        value = self.get(key)
        num = 0
        try:
            num = to_num(value)
        except ValueError:
            pass
        else:
            if min_val <= num <= max_val:
                return num
        try:
            num = to_num(_fallback_default(self.name, key))
        except ValueError:
            pass
        log.warning(
            'Invalid config value "%s = %s" in section "%s": '
            "expected integer in range %d-%d, the default value %d will be used",
            key,
            value,
            self.name,
            min_val,
            max_val,
            num,
        )
        return num

    def get_color(self, key: str) -> int:
        """Return an ARGB color parameter, falling back to the default."""
        value = self.get(key)
        try:
            return parse_color(value)
        except ValueError:
            pass
        try:
            color = parse_color(_fallback_default(self.name, key))
        except ValueError:
            color = 0
        log.warning(
            'Invalid color value "%s = %s" in section "%s": '
            "expected RGB(A) format (e.g. #11223344), "
            "the default value #%08x will be used",
            key,
            value,
            self.name,
            color,
        )
        return color


def _search_paths(name: str) -> list[Path]:
    paths = []
    for env, directory in _CONFIG_DIRS:
        if env is None:
            base = directory
        else:
            env_value = os.environ.get(env, "")
            base = env_value.split(":", 1)[0]
            if not base:
                continue
            base = f"{base.rstrip('/')}/{directory}"
        paths.append(Path(base) / name.lstrip("/"))
    return paths


class Config:
    """Configuration: every built-in section, filled with default values."""

    def __init__(self) -> None:
        self._sections: dict[str, Section] = {
            name: Section(name, dict(params)) for name, params in DEFAULTS.items()
        }

    def __iter__(self):
        return iter(self._sections.values())

    def section(self, name: str) -> Section:
        """Return a section by name; KeyError if there is no such section."""
        try:
            return self._sections[name]
        except KeyError:
            raise KeyError(f'unknown config section "{name}"') from None

    def set(self, section: str, key: str, value: str) -> None:
        """Set a parameter; ConfigError for an empty value or unknown name.

        Only key binding sections accept keys that are not built in.
        """
        if not value:
            raise ConfigError(
                f'empty config value for key "{key}" in section "{section}" '
                "is not allowed"
            )
        target = self._sections.get(section)
        if target is None:
            raise ConfigError(f'unknown config section "{section}"')
        if key not in target.params and section not in KEY_SECTIONS:
            raise ConfigError(
                f'unknown config key "{key}" in section "{section}"'
            )
        target.params[key] = value

    def set_arg(self, arg: str) -> None:
        """Set a parameter from a "section.key=value" argument."""
        parts = split(arg, "=")
        if len(parts) <= 1:
            raise ConfigError(f'invalid config argument format: "{arg}"')

        name = parts[0]
        dot = name.rfind(".")
        if dot < 0:
            raise ConfigError(f'invalid config argument format: "{arg}"')
        section = name[:dot][:_ARG_NAME_MAX]
        key = name[dot + 1 :][:_ARG_NAME_MAX]

        value = arg[arg.index("=") + 1 :].lstrip(WHITESPACE)
        if value.startswith("="):
            value = ""

        self.set(section, key, value)

    def load(self, name: str) -> Path:
        """Load a config file by path or by name from the standard locations.

        Returns the path of the loaded file. Raises ConfigError for an empty
        name and FileNotFoundError if no file could be read.
        """
        if not name:
            raise ConfigError("empty config file name")

        if name.startswith(_DIRECT_PREFIXES):
            path = Path(name)
            self._load_file(path)
            return path

        for path in _search_paths(name):
            try:
                self._load_file(path)
            except OSError:
                continue
            return path

        raise FileNotFoundError(f'config file "{name}" not found')

    def _load_file(self, path: Path) -> None:
        with open(path, encoding="utf-8", errors="surrogateescape") as stream:
            lines = stream.readlines()

        section = ""
        for line_num, raw in enumerate(lines, start=1):
            line = raw.strip(WHITESPACE)
            if not line or line.startswith("#"):
                continue

            if line.startswith(_INCLUDE):
                include = line[len(_INCLUDE) :].lstrip(WHITESPACE)
                try:
                    self.load(include)
                except (OSError, ConfigError):
                    log.warning('Unable to load config file "%s"', include)
                section = ""
                continue

            if line.startswith("["):
                end = line.find("]", 1)
                if end > 1:
                    section = line[1:end]
                else:
                    log.warning("Invalid config line in %s:%d", path, line_num)
                continue

            if not section:
                log.warning(
                    "Config parameter without section in %s:%d", path, line_num
                )
                continue

            key, sep, value = line.partition("=")
            if not sep:
                log.warning("Invalid config line in %s:%d", path, line_num)
                continue

            try:
                self.set(section, key.rstrip(WHITESPACE), value.lstrip(WHITESPACE))
            except ConfigError as err:
                log.warning("%s", err)