"""
DorisReadConfig 測試
"""

import pytest

from doris_schema import DorisConfigurationError, DorisReadConfig
from doris_schema.utils import NullLogger


def test_defaults():
    config = DorisReadConfig()
    assert config.read_field_list is None
    assert config.user == "root"
    assert config.request_retries == 3
    assert config.log_level == "INFO"


def test_from_dict_accepts_aliases():
    config = DorisReadConfig.from_dict({
        "doris.fenodes": "fe1:8030, fe2:8030",
        "doris.table.identifier": "demo.orders",
        "doris.request.auth.user": "reader",
        "read-field-list": "id,amount",
        "unknown.key": "ignored",
    })
    assert config.fe_nodes == ["fe1:8030", "fe2:8030"]
    assert (config.database, config.table) == ("demo", "orders")
    assert config.user == "reader"
    assert config.read_field_list == "id,amount"


def test_connector_read_field_key():
    config = DorisReadConfig.from_dict({"doris.read.field": "k1"})
    assert config.read_field_list == "k1"


def test_invalid_log_level():
    with pytest.raises(DorisConfigurationError):
        DorisReadConfig(log_level="LOUD")


def test_negative_retries():
    with pytest.raises(DorisConfigurationError) as exc_info:
        DorisReadConfig(request_retries=-1)
    assert exc_info.value.config_key == "request_retries"


def test_log_level_normalized():
    assert DorisReadConfig(log_level="debug").log_level == "DEBUG"


def test_password_hidden_from_repr_and_dict():
    config = DorisReadConfig(password="secret")
    assert "secret" not in repr(config)
    assert "password" not in config.to_dict()


def test_copy_keeps_password_and_logger():
    logger = NullLogger()
    config = DorisReadConfig(password="secret", logger=logger)
    copied = config.copy(read_field_list="a")
    assert copied.password == "secret"
    assert copied.logger is logger
    assert copied.read_field_list == "a"
    assert config.read_field_list is None


def test_from_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[doris]\n'
        'fenodes = "fe1:8030"\n'
        'table_identifier = "demo.orders"\n'
        '"read-field-list" = "id"\n',
        encoding="utf-8",
    )
    config = DorisReadConfig.from_toml(path)
    assert config.read_field_list == "id"
    assert config.table == "orders"


def test_from_toml_missing_section(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[other]\nx = 1\n', encoding="utf-8")
    with pytest.raises(KeyError):
        DorisReadConfig.from_toml(path)


def test_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "doris:\n"
        "  doris.fenodes: fe1:8030\n"
        "  doris.table.identifier: demo.orders\n"
        "  doris.request.retries: 5\n",
        encoding="utf-8",
    )
    config = DorisReadConfig.from_yaml(path)
    assert config.request_retries == 5
    assert config.fe_nodes == ["fe1:8030"]


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DorisReadConfig.from_yaml(tmp_path / "missing.yaml")


@pytest.mark.parametrize("key", ["request_retries", "connect_timeout_ms", "read_timeout_ms"])
def test_non_numeric_value(key):
    with pytest.raises(DorisConfigurationError) as exc_info:
        DorisReadConfig.from_dict({key: "three"})
    assert exc_info.value.config_key == key


def test_numeric_strings_are_converted():
    assert DorisReadConfig.from_dict({"doris.request.retries": "5"}).request_retries == 5
