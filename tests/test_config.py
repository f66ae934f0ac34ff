"""Config loading tests"""

import pytest

from designernews.config import Config, get_config
from designernews.errors import ConfigException


def test_defaults_when_file_missing(tmp_path):
    config = get_config(str(tmp_path / "config.json"))

    assert config == Config()
    assert config.api_token is None
    assert config.request_timeout == 30.0


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"api_token": "abc", "proxy": "http://proxy:3128", "request_timeout": 10}')

    config = get_config(str(path))

    assert config.api_token == "abc"
    assert config.proxy == "http://proxy:3128"
    assert config.request_timeout == 10
    assert config.base_url == "https://www.designernews.co"


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("\n")

    assert get_config(str(path)) == Config()


def test_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigException):
        get_config(str(path))


def test_invalid_value(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"request_timeout": "soon"}')

    with pytest.raises(ConfigException) as exc_info:
        get_config(str(path))

    assert "request_timeout" in str(exc_info.value)
