"""pytest tests for configuration loading."""

import pytest

from sla.app import main
from sla.config import ConfigError, load_config


def test_port_from_env():
    cfg = load_config(environ={"PORT": "9000"})
    assert cfg == {
        "host": "0.0.0.0",
        "port": 9000,
        "version": "",
        "branch": "",
        "dependency_timeout": 30.0,
    }


def test_missing_port_is_an_error():
    with pytest.raises(ConfigError):
        load_config(environ={})


@pytest.mark.parametrize("port", ["http", "0", "70000"])
def test_bad_port(port):
    with pytest.raises(ConfigError):
        load_config(environ={"PORT": port})


def test_yaml_file_overridden_by_env(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("port: 8081\nversion: v1\nbranch: main\ndependency_timeout: 2.5\n")
    cfg = load_config(str(path), environ={"VERSION": "v2"})
    assert cfg["port"] == 8081
    assert cfg["version"] == "v2"
    assert cfg["branch"] == "main"
    assert cfg["dependency_timeout"] == 2.5


def test_yaml_must_be_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_config(str(path), environ={"PORT": "1"})


@pytest.mark.parametrize("timeout", ["soon", "0", "-1"])
def test_bad_timeout(timeout):
    with pytest.raises(ConfigError):
        load_config(environ={"PORT": "8080", "DEP_TIMEOUT": timeout})


def test_main_exits_without_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2
