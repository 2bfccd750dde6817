# tests/test_config.py
import json

import pytest

from charmarkov.utils.config_manager import Config, ConfigError, DEFAULTS, check_window_length


def test_defaults_without_file():
    cfg = Config()
    assert cfg.data == DEFAULTS
    cfg.save()  # no path -> nothing written


def test_missing_file_is_not_created(tmp_path):
    p = tmp_path / "cfg.json"
    Config(str(p))
    assert not p.exists()


def test_load_merges_over_defaults(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"window_length": 5, "seed": 7}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("window_length") == 5
    assert cfg.get("seed") == 7
    assert cfg.get("length") == DEFAULTS["length"]


@pytest.mark.parametrize("payload", [
    {"window_length": 0},
    {"window_length": "3"},
    {"length": -1},
    {"seed": 1.5},
    {"log_level": "LOUD"},
    {"colour": "blue"},
])
def test_load_rejects_bad_values(tmp_path, payload):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps(payload), encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(p))


def test_load_rejects_broken_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("{not json", encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(p))


def test_set_coerces_and_saves(tmp_path):
    p = tmp_path / "cfg.json"
    cfg = Config(str(p))
    cfg.set("window_length", "4")
    cfg.set("seed", "none")
    cfg.set("log_level", "debug")
    saved = json.loads(p.read_text(encoding="utf8"))
    assert saved["window_length"] == 4
    assert saved["seed"] is None
    assert saved["log_level"] == "DEBUG"


def test_set_unknown_or_invalid(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    with pytest.raises(ConfigError):
        cfg.set("nope", 1)
    with pytest.raises(ConfigError):
        cfg.set("window_length", "abc")
    with pytest.raises(ConfigError):
        cfg.get("nope")


def test_show_lists_every_key():
    lines = Config().show()
    assert len(lines) == len(DEFAULTS)
    assert any(line.startswith("window_length") for line in lines)


def test_check_window_length():
    assert check_window_length(1) == 1
    with pytest.raises(ConfigError):
        check_window_length(False)
    # ConfigError is a ValueError
    with pytest.raises(ValueError):
        check_window_length(-2)


def test_override_validates_without_saving(tmp_path):
    p = tmp_path / "cfg.json"
    cfg = Config(str(p))
    cfg.override("length", 5)
    assert cfg.get("length") == 5
    assert not p.exists()
    with pytest.raises(ConfigError):
        cfg.override("length", -1)
    with pytest.raises(ConfigError):
        cfg.override("encoding", "nope-enc")
