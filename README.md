# imgview

Building blocks of a keyboard-driven image viewer, usable on their own.

## Modules

- `imgview.strings` – text helpers:
  - `split(text, delimiter)` splits and trims each part; a trailing
    delimiter adds no empty part, and `""` gives `[]`.
  - `to_num(text, length=0, base=0)` parses a signed 64-bit integer
    (base 0 picks hex for `0x`, octal for a leading zero, decimal otherwise);
    raises `ValueError` if the whole text is not a number.
  - `search_index(choices, value, length=0)` returns the index of `value`
    in `choices`, or `None`.
- `imgview.action` – `ActionType` (an enum valued by action names such as
  `"next_file"` or `"exec"`), the frozen dataclass `Action` with `type`,
  `params` and `name`, `Action.parse(text)` for one action and
  `parse_actions(text)` for a `;`-separated sequence (at most 32 actions are
  kept). Unknown or empty input raises `ActionError`, a `ValueError`.
- `imgview.defaults` – section and key name constants, the read-only
  `DEFAULTS` mapping of built-in values, `default_value(section, key)`
  (raises `KeyError` if there is none), `parse_bool` for `yes`/`no` and
  `parse_color`, which turns `#RRGGBB` or `#RRGGBBAA` into an ARGB integer.
- `imgview.config` – `Config`, holding every built-in section filled with
  its defaults:
  - `section(name)` returns a `Section` (`KeyError` for an unknown name);
  - `set(section, key, value)` raises `ConfigError` for an empty value, an
    unknown section, or an unknown key outside the `keys.*` binding sections;
  - `set_arg("section.key=value")` does the same from a command-line style
    argument;
  - `load(name)` reads a file given by a path starting with `/`, `./` or
    `../`, or else by name from `$XDG_CONFIG_HOME/swayimg`,
    `$HOME/.config/swayimg`, the first entry of `$XDG_CONFIG_DIRS` plus
    `/swayimg`, and `/etc/xdg/swayimg`. It returns the path read and raises
    `FileNotFoundError` if no file could be read. Files are INI-like, with
    `[section]` headers, `key = value` lines, `#` comments and
    `include <name>` lines; bad lines are logged as warnings and skipped.

  `Section.get(key)` returns the value or `""`; `get_oneof`, `get_bool`,
  `get_num` and `get_color` return typed values and fall back to the built-in
  default (logging a warning) when the stored value is invalid.
- `imgview.cache` – `ImageCache(capacity, release=None, is_loaded=None)`, a
  bounded queue of images keyed by their `source`. `put` evicts the oldest
  image through `release` when full, `out` removes an image without releasing
  it, `trim(size)` keeps only the newest `size` images and `clear` releases
  all of them.
- `imgview.fdpoll` – `Poller`, a context manager that watches descriptors
  (`add`), wakeup events (`add_event`, returning an `Event` with `set` and
  `reset`) and timers (`add_timer`, returning a `Timer` with
  `reset(delay, interval)` and `remaining()` in milliseconds). `next(timeout)`
  waits, runs the ready handlers and returns how many ran; `close` closes
  every descriptor it owns.

## Example

```python
from imgview.action import parse_actions, ActionType
from imgview.config import Config

actions = parse_actions("exec cmd; reload")
assert actions[0].type is ActionType.EXEC
assert actions[0].params == "cmd"

config = Config()
config.set_arg("general.app_id=viewer")
print(config.section("general").get("app_id"))           # viewer
print(hex(config.section("viewer").get_color("window")))  # 0x0
```

## What it does not do

This package has no viewer of its own: it decodes no images, opens no
window, renders nothing and provides no command to run. It supplies the
configuration, action parsing, caching and event-loop pieces such a
program would be built from.

## Installation and tests

```
pip install .[test]
pytest
```