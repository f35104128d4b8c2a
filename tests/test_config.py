import pytest

from shapematch.config import Settings, load_config, parse_config
from shapematch.errors import ConfigError


def test_defaults():
    assert parse_config("") == Settings()
    assert Settings().log_level == "WARNING"


def test_parse_config():
    settings = parse_config('log_level = "DEBUG"\n\n[shapes]\nperson = "people:PERSON"\n')
    assert settings.log_level == "DEBUG"
    assert settings.shapes == {"person": "people:PERSON"}


def test_rejects_unknown_log_level():
    with pytest.raises(ConfigError) as info:
        parse_config('log_level = "LOUD"', "shapematch.toml")
    assert "shapematch.toml" in info.value.message
    assert "at log_level to be one of the specified types" in info.value.message


def test_rejects_non_string_aliases():
    with pytest.raises(ConfigError) as info:
        parse_config("[shapes]\nperson = 3\n")
    assert "at shapes['person'] to be a string" in info.value.message


def test_rejects_shapes_that_are_not_a_table():
    with pytest.raises(ConfigError):
        parse_config('shapes = ["a:b"]')


def test_rejects_invalid_toml():
    with pytest.raises(ConfigError) as info:
        parse_config("log_level = ", "broken.toml")
    assert info.value.message.startswith("Invalid TOML in broken.toml")


def test_load_config_without_files(tmp_path):
    assert load_config(tmp_path) == Settings()


def test_load_config_from_pyproject(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.shapematch]\nlog_level = "INFO"\n', encoding="utf-8"
    )
    assert load_config(tmp_path).log_level == "INFO"


def test_pyproject_without_section_gives_defaults(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert load_config(tmp_path) == Settings()


def test_shapematch_toml_wins(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.shapematch]\nlog_level = "INFO"\n', encoding="utf-8")
    (tmp_path / "shapematch.toml").write_text('log_level = "ERROR"\n', encoding="utf-8")
    assert load_config(tmp_path).log_level == "ERROR"


def test_log_level_is_case_insensitive():
    assert parse_config('log_level = "info"').log_level == "INFO"
