"""
Utility modules.
"""

from .logging import setup_logging, get_logger, log_section
from .config import load_config, set_seed, get_seed_from_config

__all__ = ['setup_logging', 'get_logger', 'log_section', 'load_config', 'set_seed', 'get_seed_from_config']
