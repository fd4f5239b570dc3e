"""XDG-compliant path management for treeops.

XDG defaults:
- Config: ~/.config/treeops/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "treeops"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/treeops/ (or XDG_CONFIG_HOME/treeops/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/treeops/config.toml.
    """
    return get_config_dir() / "config.toml"
