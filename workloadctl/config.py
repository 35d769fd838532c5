"""Layered configuration lookup: config file, then ``.env``, then the process environment."""

import json
import os
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

import yaml
from dotenv import dotenv_values

from .errors import InvalidConfiguration, MissingConfiguration
from .loader import load_resource
from .utils import LOG


class ConfigResolver:
    def __init__(self, file_values: Optional[Mapping[str, Any]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.file_values = dict(file_values or {})
        self.environ = dict(environ or {})

    def get(self, key: str) -> Optional[str]:
        value = self.file_values.get(key)
        if value is not None:
            return str(value)
        return self.environ.get(key)

    def require(self, key: str) -> str:
        value = self.get(key)
        if value is None or not value.strip():
            raise MissingConfiguration(key)
        return value

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None,
                         dotenv_path: str = ".env") -> "ConfigResolver":
        env = dict(os.environ if environ is None else environ)
        # .env wins over the real environment on duplicates
        env.update({k: v for k, v in dotenv_values(dotenv_path).items() if v is not None})
        return cls(load_config_file(env.get("CONFIG_JSON")), env)


def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    if path is None or not path.strip():
        return {}
    raw = load_resource(path)
    suffix = urlparse(path).path if "://" in path else path
    try:
        if suffix.endswith((".yaml", ".yml")):
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (yaml.YAMLError, ValueError) as e:
        raise InvalidConfiguration(f"cannot parse config file {path}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"config file {path} must contain a mapping")
    LOG.info("loaded %d config keys from %s", len(data), path)
    return data
