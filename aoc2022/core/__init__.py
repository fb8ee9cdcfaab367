"""
Configuration and logging shared by the CLIs.
"""

from .env import load_env, data_dir, log_level
from .logging_utils import setup_logging

__all__ = [
    "load_env",
    "data_dir",
    "log_level",
    "setup_logging",
]
