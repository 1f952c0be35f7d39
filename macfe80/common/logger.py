from logging import info as info
from logging import warning as warning
from logging import error as error
from logging import critical as critical
from logging import debug as debug
from logging import config
import yaml
import os.path
from macfe80.config.config import MACFE80_CONFIG_DEFAULT_LOCATION
from macfe80.config.config import MACFE80_CONFIG_OS_ENV

_LOGGING_DEFAULT_CONFIG = {
    "version": 1,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    },
    "formatters": {
        "standard": {
            "format": "%(asctime)s,%(msecs)d %(levelname)-8s [%(filename)s:%(lineno)d] %(message)s"
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
}


def fetch_logging_configuration():
    """Fetches logging configuration from disk, if exists.

    The configuration file is looked up the same way the config module does it. If the
    file exists and carries a 'logging_config' key, that dictionary is returned.
    Otherwise, we return the default configuration (_LOGGING_DEFAULT_CONFIG).

    Returns:
        Logging configuration.
    """
    config_file = os.environ.get(MACFE80_CONFIG_OS_ENV, MACFE80_CONFIG_DEFAULT_LOCATION)
    logging_cfg = dict()
    if os.path.isfile(config_file):
        with open(config_file) as cfg_file:
            logging_cfg = yaml.safe_load(cfg_file.read()) or dict()
    if isinstance(logging_cfg, dict) and logging_cfg.get("logging_config"):
        return logging_cfg.get("logging_config")
    return _LOGGING_DEFAULT_CONFIG


cfg = fetch_logging_configuration()
config.dictConfig(cfg)
debug("Initialised logger, using configuration: %s", cfg)
