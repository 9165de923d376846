import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)

# config.yaml 이 없을 때 사용하는 기본값
DEFAULT_CONFIG = {
    'server': {
        'host': '0.0.0.0',
        'port': 8080,
    },
    'api': {
        'title': 'Project Tracking API',
        'description': 'In-memory project tracking API',
        'version': '1.0.0',
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'file': 'project_tracker.log',
        'max_bytes': 10 * 1024 * 1024,  # 10MB
        'backup_count': 5,
    },
}


class Config:
    _instance = None
    _config = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self, config_path=None):
        """Load configuration from config.yaml or fall back to defaults."""
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path is None:
            project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            config_path = os.path.join(project_root, 'config.yaml')

        if os.path.exists(config_path):
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    user_config = yaml.safe_load(f)
                    if user_config:
                        self._merge_config(self._config, user_config)
                logger.info(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError) as e:
                logger.error(f"Failed to load config.yaml: {e}. Using defaults.")
        else:
            logger.info("config.yaml not found. Using default configuration.")

    def reload(self, config_path=None):
        """설정을 다시 읽어들임 (테스트 및 운영 중 변경 반영용)"""
        self._load_config(config_path)

    def _merge_config(self, default, user):
        """Recursively merge dictionary user_config into default_config."""
        for key, value in user.items():
            if isinstance(value, dict) and key in default and isinstance(default[key], dict):
                self._merge_config(default[key], value)
            else:
                default[key] = value

    def get(self, section, key=None, default=None):
        """
        Get a configuration value.
        Usage: config.get('server', 'port') or config.get('logging')
        """
        if section not in self._config:
            return default

        if key is None:
            return self._config[section]

        return self._config[section].get(key, default)

# Global accessor
config = Config()
