# tests/core/config/test_sources.py
"""
Testes das fontes de configuração (arquivo, string e valor).

Os testes asseguram que:
- o formato é inferido pela extensão do arquivo
- texto vazio produz um mapa vazio, `null` explícito produz Unit
- falhas de leitura e parse são tipadas
- fontes opcionais ausentes devolvem `MISSING`
"""

from pathlib import Path

import pytest

from atlas_config.core.errors import (
    ConfigParseError,
    ConfigSourceError,
    ConfigSourceNotFoundError,
    UnsupportedConfigFormatError,
)
from atlas_config.core.sources import (
    ConfigSource,
    FileConfigSource,
    StringConfigSource,
    ValueConfigSource,
    parse_text,
    read_file,
)
from atlas_config.core.tree import MISSING


def test_parse_yaml_and_json():
    assert parse_text("foo: bar\n") == {"foo": "bar"}
    assert parse_text('{"foo": [1, 2, 3]}', "json") == {"foo": [1, 2, 3]}


def test_parse_format_is_case_insensitive():
    assert parse_text('{"a": 1}', "JSON") == {"a": 1}


def test_empty_text_is_empty_map_but_explicit_null_is_unit():
    assert parse_text("") == {}
    assert parse_text("   \n") == {}
    assert parse_text("~") is None
    assert parse_text("null", "json") is None


def test_parse_errors_are_typed():
    with pytest.raises(ConfigParseError):
        parse_text("foo: [1, 2\n")
    with pytest.raises(ConfigParseError):
        parse_text("{not json}", "json")


def test_impossible_yaml_date_is_parse_error():
    with pytest.raises(ConfigParseError):
        parse_text("when: 2001-13-01")
    with pytest.raises(ConfigSourceError):
        StringConfigSource("when: 2001-02-30").get_value()


def test_unknown_format_rejected():
    with pytest.raises(UnsupportedConfigFormatError):
        parse_text("a = 1", "toml")


def test_parse_error_is_a_source_error():
    assert issubclass(ConfigParseError, ConfigSourceError)
    assert issubclass(UnsupportedConfigFormatError, ConfigSourceError)


@pytest.mark.parametrize("name", ["app.yaml", "app.yml", "app.YAML"])
def test_read_file_infers_yaml(tmp_path: Path, name):
    p = tmp_path / name
    p.write_text("server:\n  port: 8080\n", encoding="utf-8")
    assert read_file(p) == {"server": {"port": 8080}}


def test_read_file_explicit_format_overrides_suffix(tmp_path: Path):
    p = tmp_path / "app.conf"
    p.write_text('{"a": 1}', encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        read_file(p)
    assert read_file(p, "json") == {"a": 1}


def test_read_file_missing_raises(tmp_path: Path):
    with pytest.raises(ConfigSourceNotFoundError):
        read_file(tmp_path / "nope.yaml")


def test_read_directory_is_source_error(tmp_path: Path):
    d = tmp_path / "dir.yaml"
    d.mkdir()
    with pytest.raises(ConfigSourceError):
        read_file(d)


def test_optional_file_source_missing_returns_missing(tmp_path: Path):
    src = FileConfigSource(tmp_path / "local.yaml", optional=True)
    assert src.get_value() is MISSING


def test_required_file_source_missing_raises(tmp_path: Path):
    src = FileConfigSource(str(tmp_path / "local.yaml"))
    assert isinstance(src.path, Path)
    with pytest.raises(ConfigSourceNotFoundError):
        src.get_value()


def test_string_source():
    assert StringConfigSource("foo: 1").get_value() == {"foo": 1}
    assert StringConfigSource("[1, 2]", format="json").get_value() == [1, 2]


def test_value_source_returns_independent_copies():
    tree = {"a": {"b": [1]}}
    src = ValueConfigSource(tree)
    first = src.get_value()
    first["a"]["b"].append(2)
    assert src.get_value() == {"a": {"b": [1]}}
    assert tree == {"a": {"b": [1]}}


def test_sources_satisfy_protocol(tmp_path: Path):
    for src in (
        FileConfigSource(tmp_path / "x.yaml"),
        StringConfigSource(""),
        ValueConfigSource({}),
    ):
        assert isinstance(src, ConfigSource)
