"""
Configuration Manager for EC2 Hello Service
Handles loading ambient settings (logging, server log level) from YAML files
"""

import yaml
import os
from typing import Dict, Any, Optional
from pathlib import Path


DEFAULT_CONFIG_PATH = "config/config.yaml"
CONFIG_ENV_VAR = "HELLO_SERVICE_CONFIG"


class ConfigManager:
    """Manages application configuration"""
    
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))
        self._config: Optional[Dict[str, Any]] = None
        self.load_config()
    
    def load_config(self) -> None:
        """Load configuration from YAML file, falling back to defaults when absent"""
        if not self.config_path.exists():
            self._config = {}
            return
        
        try:
            with open(self.config_path, 'r', encoding='utf-8') as file:
                self._config = yaml.safe_load(file) or {}
        except Exception as e:
            raise RuntimeError(f"Failed to load configuration: {e}")
        
        if not isinstance(self._config, dict):
            raise RuntimeError(f"Failed to load configuration: {self.config_path} is not a mapping")
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)"""
        if self._config is None:
            return default
        
        keys = key.split('.')
        value = self._config
        
        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default
    
    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration"""
        return self.get('logging', {})
    
    def get_server_config(self) -> Dict[str, Any]:
        """Get server configuration"""
        return self.get('server', {})
    
    def get_server_log_level(self) -> str:
        """Get the log level handed to uvicorn"""
        return str(self.get('server.log_level', 'warning')).lower()
    
    def reload_config(self) -> None:
        """Reload configuration from file"""
        self.load_config()


# Global configuration instance
config = ConfigManager()
