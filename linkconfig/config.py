import toml
import os
from .cli_logger import logger
from .pkg_config import DEFAULT_SEARCH_PATH_ENV, DEFAULT_TOOL
from .search_paths import SYSTEM_PREFIXES

CONFIG_FILE = "linkconfig.toml"

DEFAULT_SETTINGS = {
    "tool": DEFAULT_TOOL,
    "search_path_env": DEFAULT_SEARCH_PATH_ENV,
    "search_dirs": [],
    "system_prefixes": list(SYSTEM_PREFIXES),
}

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def get_settings(conf):
    """Returns the [linkconfig] table merged over the defaults."""
    settings = {key: (list(value) if isinstance(value, list) else value)
                for key, value in DEFAULT_SETTINGS.items()}
    settings.update(conf.get("linkconfig", {}))
    return settings

def get_packages(conf):
    """Returns the [packages] table as a list of (name, modifiers)."""
    packages = conf.get("packages", {})
    return [(name, modifiers) for name, modifiers in packages.items()]
