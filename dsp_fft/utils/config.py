import random
from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np
import yaml


def load_config(config_path: Union[str, Path]) -> Dict:
    """Load configuration from YAML file."""
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)
    return config if config is not None else {}


def set_seed(seed: int) -> None:
    random.seed(seed)
    np.random.seed(seed)


def get_seed_from_config(config: dict) -> Optional[int]:
    if not isinstance(config, dict):
        return None
    seed = config.get('seed', None)
    if seed is not None:
        return int(seed)
    benchmark = config.get('benchmark', {})
    if isinstance(benchmark, dict) and benchmark.get('seed', None) is not None:
        return int(benchmark['seed'])
    return None
