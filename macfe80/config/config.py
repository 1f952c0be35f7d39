"""Configuration handling class."""

import dataclasses
import logging
import os
import sys
from typing import Any, Dict, Optional

import voluptuous as vol
import yaml


class Error(Exception):
    """Base Exception handling class."""


class ConfigFileNotFoundError(Error):
    """File could not be found on disk."""


MACFE80_CONFIG_OS_ENV = "MACFE80_CONFIG_FILE"
MACFE80_CONFIG_DEFAULT_LOCATION = "/etc/macfe80.yaml"

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional("listen"): {
            vol.Optional("host"): str,
            vol.Optional("port"): vol.All(int, vol.Range(min=1, max=65535)),
        },
        vol.Optional("ipv6_default"): bool,
        vol.Optional("logging_config"): dict,
    }
)


@dataclasses.dataclass
class Listen:
    """A representation of the 'listen' key in the configuration file.

    Attributes:
        host: The address the HTTP service binds to.
        port: The port the HTTP service binds to.
    """

    host: str = "::"
    port: int = 5000

    @classmethod
    def from_dict(cls, listen_cfg: Dict[str, Any]) -> "Listen":
        return cls(
            host=listen_cfg.get("host", cls.host),
            port=int(listen_cfg.get("port", cls.port)),
        )


@dataclasses.dataclass
class Config:
    """A representation of the configuration file.

    Attributes:
        listen: Where the HTTP service listens.
        ipv6_default: Whether conversions default to the modified EUI-64 form.
        logging_config: An optional logging.config.dictConfig dictionary.
    """

    raw: Dict[str, Any]
    listen: Listen
    ipv6_default: bool
    logging_config: Optional[Dict[str, Any]]

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "Config":
        """Creates a Config object from a configuration file.
        Arguments:
            cfg: The configuration file as a dict.
        Raises:
            voluptuous.MultipleInvalid: If the dict does not match CONFIG_SCHEMA.
        Returns:
            A Config object.
        """
        cfg = CONFIG_SCHEMA(cfg)
        return cls(
            raw=cfg,
            listen=Listen.from_dict(cfg.get("listen", {})),
            ipv6_default=bool(cfg.get("ipv6_default", False)),
            logging_config=cfg.get("logging_config"),
        )

    def get(self, key: str) -> Any:
        """Get the value of key from the raw dict representation of the config file"""
        return self.raw.get(key)


_parsed_config: Optional[Config] = None


def get_config() -> Config:
    """Returns a parsed Config object.

    Raises:
        ConfigFileNotFoundError: If we could not find the configuration file on disk.
    Returns:
        The Config representation of the config file
    """
    global _parsed_config
    if _parsed_config is None:
        cfg_contents = fetch_config_from_disk()
        try:
            config = yaml.safe_load(cfg_contents)
        except yaml.YAMLError as e:
            print("Failed to load YAML file: %s" % e)
            sys.exit(1)
        try:
            config = Config.from_dict(config if config is not None else {})
        except vol.MultipleInvalid as e:
            print("Failed to lint file: %s" % e)
            sys.exit(2)
        _parsed_config = config
    return _parsed_config


def fetch_config_from_disk() -> str:
    """Fetches config file from disk and returns as string.

    Raises:
        ConfigFileNotFoundError: If we could not find the configuration file on disk.
    Returns:
        The file contents as string.
    """
    config_file = os.environ.get(MACFE80_CONFIG_OS_ENV, MACFE80_CONFIG_DEFAULT_LOCATION)
    logging.debug("getting config_file: %s", repr(config_file))
    try:
        with open(config_file, "r") as stream:
            return stream.read()
    except FileNotFoundError as e:
        raise ConfigFileNotFoundError(
            f"Could not locate configuration file in {config_file}"
        ) from e
