import logging

import pytest

from imgview import defaults as d
from imgview.config import Config, ConfigError, Section


@pytest.fixture
def config():
    return Config()


def _warned(caplog):
    return any(r.levelno >= logging.WARNING for r in caplog.records)


def test_load(tmp_path, caplog):
    cfg_file = tmp_path / "config"
    cfg_file.write_text(
        "# comment\n"
        "\n"
        "mode = orphan\n"
        "[general]\n"
        "  mode   =   s p a c e s  \n"
        "app_id=my_ap_id\n"
        "invalid line\n"
        "unknown = value\n"
        "[]\n"
    )
    config = Config()
    with caplog.at_level(logging.WARNING):
        loaded = config.load(str(cfg_file))
    assert loaded == cfg_file
    general = config.section(d.GENERAL)
    assert general.get(d.GNRL_MODE) == "s p a c e s"
    assert general.get(d.GNRL_APP_ID) == "my_ap_id"
    assert _warned(caplog)


def test_load_include_resets_section(tmp_path, caplog):
    inner = tmp_path / "inner"
    inner.write_text("[font]\nname = inner_font\n")
    outer = tmp_path / "outer"
    outer.write_text(
        f"[general]\ninclude {inner}\napp_id = lost\n[general]\nmode = gallery\n"
    )
    config = Config()
    with caplog.at_level(logging.WARNING):
        config.load(str(outer))
    assert config.section(d.FONT).get(d.FONT_NAME) == "inner_font"
    assert config.section(d.GENERAL).get(d.GNRL_APP_ID) == "swayimg"
    assert config.section(d.GENERAL).get(d.GNRL_MODE) == "gallery"
    assert _warned(caplog)


def test_load_from_xdg_dir(tmp_path, monkeypatch):
    app_dir = tmp_path / "swayimg"
    app_dir.mkdir()
    (app_dir / "config").write_text("[general]\napp_id = from_xdg\n")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    config = Config()
    path = config.load("config")
    assert path == app_dir / "config"
    assert config.section(d.GENERAL).get(d.GNRL_APP_ID) == "from_xdg"


def test_load_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_DIRS", raising=False)
    config = Config()
    with pytest.raises(FileNotFoundError):
        config.load("no_such_config_file_here")
    with pytest.raises(FileNotFoundError):
        config.load(str(tmp_path / "absent"))
    with pytest.raises(ConfigError):
        config.load("")


def test_defaults(config):
    general = config.section(d.GENERAL)
    assert d.default_value(d.GENERAL, d.GNRL_APP_ID) == "swayimg"
    assert general.get(d.GNRL_APP_ID) == "swayimg"


def test_unknown_section(config):
    with pytest.raises(KeyError):
        config.section("unknown")


def test_set(config):
    general = config.section(d.GENERAL)
    config.set(d.GENERAL, d.GNRL_APP_ID, "test123")
    assert general.get(d.GNRL_APP_ID) == "test123"

    with pytest.raises(ConfigError):
        config.set(d.GENERAL, d.GNRL_APP_ID, "")
    with pytest.raises(ConfigError):
        config.set(d.GENERAL, "unknown", "test123")
    with pytest.raises(ConfigError):
        config.set("unknown", "unknown", "test123")
    assert general.get(d.GNRL_APP_ID) == "test123"


def test_set_arg(config):
    general = config.section(d.GENERAL)
    config.set_arg("general.app_id=test123")
    assert general.get(d.GNRL_APP_ID) == "test123"

    config.set_arg("\t\ngeneral.app_id  = \ttest321")
    assert general.get(d.GNRL_APP_ID) == "test321"


@pytest.mark.parametrize("arg", ["", "abc=1", "abc.def", "abc.def="])
def test_set_arg_invalid(config, arg):
    with pytest.raises(ConfigError):
        config.set_arg(arg)


def test_set_arg_value_keeps_rest(config):
    config.set_arg("keys.viewer.F5=exec a=b")
    assert config.section(d.KEYS_VIEWER).get("F5") == "exec a=b"


def test_add(config, caplog):
    section = config.section(d.KEYS_VIEWER)
    with caplog.at_level(logging.WARNING):
        assert section.get("F12") == ""
    assert _warned(caplog)

    config.set(d.KEYS_VIEWER, "F12", "quit")
    assert section.get("F12") == "quit"
    assert "F12" in section


def test_replace(config):
    section = config.section(d.KEYS_VIEWER)
    assert section.get("F1") == "help"
    config.set(d.KEYS_VIEWER, "F1", "quit")
    assert section.get("F1") == "quit"


def test_get_default_unchanged_by_set(config):
    config.set(d.GENERAL, d.GNRL_APP_ID, "test123")
    assert d.default_value(d.GENERAL, d.GNRL_APP_ID) == "swayimg"


def test_get(config, caplog):
    section = config.section(d.GENERAL)
    assert section.get(d.GNRL_APP_ID) == "swayimg"
    with caplog.at_level(logging.WARNING):
        assert section.get("unknown") == ""
    assert _warned(caplog)


def test_get_oneof(config, caplog):
    section = config.section(d.LIST)
    possible = ["one", "two", "three"]

    config.set(d.LIST, d.LIST_ORDER, "two")
    assert section.get_oneof(d.LIST_ORDER, possible) == 1

    config.set(d.LIST, d.LIST_ORDER, "four")
    with caplog.at_level(logging.WARNING):
        assert section.get_oneof(d.LIST_ORDER, possible) == 0
    assert _warned(caplog)


def test_get_oneof_falls_back_to_default_index(config):
    section = config.section(d.LIST)
    config.set(d.LIST, d.LIST_ORDER, "bogus")
    assert section.get_oneof(d.LIST_ORDER, ["none", "alpha"]) == 1


def test_get_bool(config):
    section = config.section(d.GALLERY)
    config.set(d.GALLERY, d.GLRY_FILL, d.YES)
    assert section.get_bool(d.GLRY_FILL) is True
    config.set(d.GALLERY, d.GLRY_FILL, d.NO)
    assert section.get_bool(d.GLRY_FILL) is False


def test_get_bool_invalid_uses_default(config, caplog):
    section = config.section(d.GALLERY)
    config.set(d.GALLERY, d.GLRY_PRELOAD, "maybe")
    with caplog.at_level(logging.WARNING):
        assert section.get_bool(d.GLRY_PRELOAD) is False
    assert _warned(caplog)


def test_get_num(config, caplog):
    section = config.section(d.FONT)
    config.set(d.FONT, d.FONT_SIZE, "123")
    assert section.get_num(d.FONT_SIZE, 0, 1024) == 123

    with caplog.at_level(logging.WARNING):
        assert section.get_num(d.FONT_SIZE, 0, -1) == 14
        assert section.get_num(d.FONT_SIZE, 0, 1) == 14
        assert section.get_num(d.FONT_SIZE, -1, 0) == 14
    assert _warned(caplog)


def test_get_num_not_a_number(config):
    section = config.section(d.FONT)
    config.set(d.FONT, d.FONT_SIZE, "big")
    assert section.get_num(d.FONT_SIZE, 1, 256) == 14


def test_get_color(config, caplog):
    section = config.section(d.VIEWER)

    config.set(d.VIEWER, d.VIEW_WINDOW, "#010203")
    assert section.get_color(d.VIEW_WINDOW) == 0xFF010203

    config.set(d.VIEWER, d.VIEW_WINDOW, "#010203aa")
    assert section.get_color(d.VIEW_WINDOW) == 0xAA010203

    config.set(d.VIEWER, d.VIEW_WINDOW, "010203aa")
    assert section.get_color(d.VIEW_WINDOW) == 0xAA010203

    config.set(d.VIEWER, d.VIEW_WINDOW, "# 010203aa")
    assert section.get_color(d.VIEW_WINDOW) == 0xAA010203

    config.set(d.VIEWER, d.VIEW_WINDOW, "invalid")
    with caplog.at_level(logging.WARNING):
        assert section.get_color(d.VIEW_WINDOW) == 0x00000000
    assert _warned(caplog)


def test_configs_are_independent():
    first = Config()
    second = Config()
    first.set(d.GENERAL, d.GNRL_APP_ID, "changed")
    assert second.section(d.GENERAL).get(d.GNRL_APP_ID) == "swayimg"
    assert d.DEFAULTS[d.GENERAL][d.GNRL_APP_ID] == "swayimg"