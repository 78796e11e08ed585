import copy
import logging
import pathlib
from typing import Any

import yaml

from langkeys.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "validation": {
        "workers": 4,
        "strict": False,
    },
    "recent": {
        "file": "recent.yml",
        "max_items": 5,
    },
}


def load_config(config_folder: str) -> dict[str, Any]:
    """Read ``config.yml`` from ``config_folder`` on top of the defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_file_path = pathlib.Path(config_folder) / "config.yml"
    try:
        loaded = yaml.safe_load(config_file_path.read_text("utf-8"))
    except FileNotFoundError:
        logger.warning(f"{config_file_path} not found, using defaults")
        return config
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid configuration in {config_file_path}: {exc}") from exc

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ConfigError(f"{config_file_path} must contain a mapping")

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def setup_logging(config: dict[str, Any]) -> None:
    logging.basicConfig(
        level=logging.getLevelName(str(config["logging"]["level"]).upper()),
        format=config["logging"]["format"],
        datefmt=config["logging"]["datefmt"],
    )
