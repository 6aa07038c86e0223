import json

import pytest

from Calculator import config_manager
from Calculator import error as E


def test_missing_file_gives_defaults(tmp_path):
    settings = config_manager.load_setting_value("all", path=tmp_path / "missing.json")
    assert settings == config_manager.DEFAULT_SETTINGS
    assert settings is not config_manager.DEFAULT_SETTINGS


def test_corrupt_file_gives_defaults(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("darkmode", path=config_file) is False


def test_undecodable_file_gives_defaults(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_bytes(b'{"darkmode": "\xff"}')
    assert config_manager.load_setting_value("all", path=config_file) == config_manager.DEFAULT_SETTINGS


def test_values_of_the_wrong_type_are_dropped(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps({"decimal_places": "4", "font_size": 24, "darkmode": 1, "show_equation": False}),
        encoding="utf-8")

    settings = config_manager.load_setting_value("all", path=config_file)
    assert settings["decimal_places"] == config_manager.DEFAULT_SETTINGS["decimal_places"]
    assert settings["darkmode"] is False
    assert settings["font_size"] == 24
    assert settings["show_equation"] is False


def test_stored_values_override_defaults(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"darkmode": True, "font_size": 32}), encoding="utf-8")

    settings = config_manager.load_setting_value("all", path=config_file)
    assert settings["darkmode"] is True
    assert settings["font_size"] == 32
    assert settings["decimal_places"] == config_manager.DEFAULT_SETTINGS["decimal_places"]


def test_unknown_key_returns_zero(tmp_path):
    assert config_manager.load_setting_value("no_such_setting", path=tmp_path / "missing.json") == 0


def test_save_and_reload(tmp_path):
    config_file = tmp_path / "config.json"
    settings = config_manager.load_setting_value("all", path=config_file)
    settings["darkmode"] = True
    settings["decimal_places"] = 4

    assert config_manager.save_setting(settings, path=config_file) == settings
    assert config_manager.load_setting_value("darkmode", path=config_file) is True
    assert config_manager.load_setting_value("decimal_places", path=config_file) == 4


def test_save_failure_raises(tmp_path):
    with pytest.raises(E.ConfigurationError) as excinfo:
        config_manager.save_setting({"darkmode": True}, path=tmp_path / "no_dir" / "config.json")
    assert excinfo.value.code == "5001"


def test_descriptions(tmp_path):
    strings_file = tmp_path / "ui_strings.json"
    strings_file.write_text(json.dumps({"darkmode": "Dark mode"}), encoding="utf-8")

    assert config_manager.load_setting_description("darkmode", path=strings_file) == "Dark mode"
    assert config_manager.load_setting_description("all", path=strings_file) == {"darkmode": "Dark mode"}
    assert config_manager.load_setting_description("font_size", path=strings_file) == ""


def test_shipped_files_are_in_sync():
    values = config_manager.load_setting_value("all")
    descriptions = config_manager.load_setting_description("all")
    assert set(values) == set(descriptions)
    assert set(config_manager.DEFAULT_SETTINGS) == set(descriptions)
