"""
Experiment configuration loaded from YAML.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Union

from .primes import InvalidArgument, validate_bound

REQUIRED_KEYS = ('bound', 'step', 'nth_targets')


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read and check an experiment config.

    Parameters
    ----------
    path : str or Path
        YAML file with keys bound, step and nth_targets.

    Returns
    -------
    dict
        Parsed config.

    Raises
    ------
    KeyError
        If a required key is missing.
    InvalidArgument
        If the file is not a mapping, nth_targets is not a list, or a
        value is not a valid non-negative integer (step and targets
        must also be positive).
    """
    with open(path) as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise InvalidArgument(f"config {path} must be a mapping, got {type(config).__name__}")

    for key in REQUIRED_KEYS:
        if key not in config:
            raise KeyError(f"config {path} is missing '{key}'")

    config['bound'] = validate_bound(config['bound'])
    config['step'] = validate_bound(config['step'])
    if config['step'] == 0:
        raise InvalidArgument("config step must be positive")

    if not isinstance(config['nth_targets'], list):
        raise InvalidArgument(f"nth_targets must be a list, got {config['nth_targets']!r}")
    targets = [validate_bound(k) for k in config['nth_targets']]
    if any(k < 1 for k in targets):
        raise InvalidArgument(f"nth_targets are 1-based, got {targets}")
    config['nth_targets'] = targets

    return config
