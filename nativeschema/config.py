"""
Generator configuration.

Looked up in order: an explicit path, `rnschema.json` in the working
directory, then `~/.rnschema/config.json`. Defaults apply when none exists.
"""

import json
import os
from typing import Optional

from pydantic import BaseModel

CONFIG_FILE = "rnschema.json"
USER_CONFIG_FILE = os.path.join("~", ".rnschema", "config.json")


class GeneratorConfig(BaseModel):
    """Settings shared by the build and combine commands."""
    include: str = "*NativeComponent*.json"
    indent: int = 2
    platform: Optional[str] = None


def find_config_file(path=None):
    """Path of the config file to use, or None."""
    if path:
        return path
    for candidate in (CONFIG_FILE, os.path.expanduser(USER_CONFIG_FILE)):
        if os.path.exists(candidate):
            return candidate
    return None


def load_config(path=None):
    """Load the generator config; a file that exists but is invalid raises."""
    config_path = find_config_file(path)
    if config_path is None:
        return GeneratorConfig()
    with open(config_path, "r") as f:
        return GeneratorConfig.model_validate(json.load(f))
