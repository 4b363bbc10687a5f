"""
Logging utilities for EC2 Hello Service
Console logging on standard output with optional file rotation
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler
from .config_manager import config


class ServiceLogger:
    """Custom logger for the service components"""
    
    def __init__(self, name: str, level: Optional[str] = None):
        self.name = name
        self.level = level or config.get('logging.level', 'INFO')
        self.format = config.get('logging.format', '%(message)s')
        log_dir = config.get('logging.log_dir')
        self.log_dir = Path(log_dir) if log_dir else None
        self.max_file_size = config.get('logging.max_file_size', '10MB')
        self.backup_count = config.get('logging.backup_count', 5)
        
        self.logger = self._setup_logger()
    
    def _setup_logger(self) -> logging.Logger:
        """Setup logger with console and (optionally) file handlers"""
        logger = logging.getLogger(self.name)
        logger.setLevel(getattr(logging, str(self.level).upper()))
        
        # Close and clear existing handlers
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        
        formatter = logging.Formatter(self.format)
        
        # Console handler, stdout is where operators read request lines
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
        
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"{self.name}_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=parse_file_size(self.max_file_size),
                backupCount=self.backup_count
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            logger.addHandler(file_handler)
        
        return logger
    
    def info(self, message: str) -> None:
        """Log info message"""
        self.logger.info(message)
    
    def warning(self, message: str) -> None:
        """Log warning message"""
        self.logger.warning(message)
    
    def error(self, message: str) -> None:
        """Log error message"""
        self.logger.error(message)
    
    def debug(self, message: str) -> None:
        """Log debug message"""
        self.logger.debug(message)


def parse_file_size(size) -> int:
    """Parse file size string to bytes"""
    size_str = str(size).strip().upper()
    if size_str.endswith('KB'):
        return int(size_str[:-2]) * 1024
    elif size_str.endswith('MB'):
        return int(size_str[:-2]) * 1024 * 1024
    elif size_str.endswith('GB'):
        return int(size_str[:-2]) * 1024 * 1024 * 1024
    else:
        return int(size_str)


def get_logger(name: str) -> ServiceLogger:
    """Get logger instance for specific component"""
    return ServiceLogger(name)
