"""
Utilities for EC2 Hello Service
"""

from .config_manager import ConfigManager, config
from .logger import get_logger, ServiceLogger

__all__ = [
    'ConfigManager',
    'config',
    'get_logger',
    'ServiceLogger'
]
