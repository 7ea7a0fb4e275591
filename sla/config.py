"""
Service configuration: an optional YAML file, overridden by the environment.

  port                PORT         required
  host                HOST         default 0.0.0.0
  version             VERSION      build label, default ""
  branch              BRANCH       build label, default ""
  dependency_timeout  DEP_TIMEOUT  seconds per dependency call, default 30
"""

import os

import yaml

from sla.dependency import DEFAULT_TIMEOUT

ENV_KEYS = {
    "port": "PORT",
    "host": "HOST",
    "version": "VERSION",
    "branch": "BRANCH",
    "dependency_timeout": "DEP_TIMEOUT",
}


class ConfigError(Exception):
    pass


def load_config(path=None, environ=None):
    environ = os.environ if environ is None else environ
    cfg = {}
    if path:
        with open(path) as fh:
            cfg = yaml.safe_load(fh) or {}
        if not isinstance(cfg, dict):
            raise ConfigError(f"{path}: expected a mapping at the top level")

    for key, env in ENV_KEYS.items():
        if environ.get(env):
            cfg[key] = environ[env]

    if cfg.get("port") in (None, ""):
        raise ConfigError("no port configured; set PORT or 'port' in the config file")
    try:
        port = int(cfg["port"])
    except (TypeError, ValueError):
        raise ConfigError(f"invalid port {cfg['port']!r}")
    if not 0 < port < 65536:
        raise ConfigError(f"port {port} out of range")

    try:
        timeout = float(cfg.get("dependency_timeout", DEFAULT_TIMEOUT))
    except (TypeError, ValueError):
        raise ConfigError(f"invalid dependency_timeout {cfg['dependency_timeout']!r}")
    if timeout <= 0:
        raise ConfigError(f"dependency_timeout must be positive, got {timeout}")

    return {
        "host": str(cfg.get("host", "0.0.0.0")),
        "port": port,
        "version": str(cfg.get("version", "")),
        "branch": str(cfg.get("branch", "")),
        "dependency_timeout": timeout,
    }
