# NLP_DepNode/utils/config.py
from typing import Dict, Optional, Union
from pathlib import Path
from importlib.resources import files
import yaml
from omegaconf import DictConfig, OmegaConf

DEFAULT_CONFIG_NAME = 'default_node_config.yaml'

def load_config(override: Optional[Union[str, Path, Dict]] = None,
                verbosity: Optional[str] = None) -> DictConfig:
    """
    Load the packaged defaults and merge user overrides on top.

    Args:
        override: Path to a yaml file or a dict with the same sections
            as the defaults. Sections are updated key by key.
        verbosity: 'quiet', 'normal' or 'debug'; replaces the 'verbose' entry
    """
    config_dir = Path(files('NLP_DepNode').joinpath('configs'))

    with open(config_dir / DEFAULT_CONFIG_NAME) as f:
        config = yaml.safe_load(f)

    if override:
        if isinstance(override, (str, Path)):
            with open(override) as f:
                override = yaml.safe_load(f) or {}
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key].update(value)
            else:
                config[key] = value

    if verbosity:
        config['verbose'] = verbosity

    return OmegaConf.create(config)
