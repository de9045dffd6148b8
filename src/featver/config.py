"""Configuration management for featver."""

import os
import json


CONFIG_DIR = os.path.expanduser("~/.featver")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")

DEFAULT_CONFIG = {"default_package_path": "."}


def ensure_config_exists():
    """Ensure the configuration directory and file exist."""
    if not os.path.exists(CONFIG_DIR):
        os.makedirs(CONFIG_DIR)

    if not os.path.exists(CONFIG_FILE):
        with open(CONFIG_FILE, "w") as f:
            json.dump(DEFAULT_CONFIG, f)


def get_config():
    """Get the current configuration without creating the config file.

    Returns:
        dict: Saved settings layered over the defaults.
    """
    config = dict(DEFAULT_CONFIG)
    if os.path.exists(CONFIG_FILE):
        with open(CONFIG_FILE, "r") as f:
            config.update(json.load(f))
    return config


def update_config(updates):
    """Update the configuration with new values.

    Args:
        updates (dict): Dictionary of configuration values to update.
    """
    ensure_config_exists()
    config = get_config()
    config.update(updates)

    with open(CONFIG_FILE, "w") as f:
        json.dump(config, f, indent=2)


def get_default_package_path():
    """Get the package path used when a command is given none.

    Returns:
        str: Default package directory.
    """
    return get_config()["default_package_path"]


def set_default_package_path(pkg_path):
    """Set the package path used when a command is given none.

    The path is stored absolute so later commands find the package from
    any working directory.

    Args:
        pkg_path (str): Package directory to use by default.
    """
    update_config({"default_package_path": os.path.abspath(pkg_path)})
