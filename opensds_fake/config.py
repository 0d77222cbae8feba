"""
OpenSDS fake configuration module
Supports loading from:
1. INI config file (/etc/opensds-fake/fake.conf)
2. Environment variables (override config file)
3. Default values (fallback)
"""

import logging
import os
from configparser import ConfigParser
from typing import Any, Dict, Optional

from opensds_fake.utils.exceptions import ConfigurationException
from opensds_fake.utils.logger import DEFAULT_LOG_FORMAT

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class FakeConfig:
    """Fake API layer configuration manager"""

    CONFIG_FILE = '/etc/opensds-fake/fake.conf'

    # Default values
    DEFAULT_LOG_LEVEL = 'INFO'
    DEFAULT_LOG_FORMAT = DEFAULT_LOG_FORMAT
    DEFAULT_JSON_LOGS = False
    DEFAULT_SHARE_RESOURCE_TYPE = 'manila'
    DEFAULT_VOLUME_RESOURCE_TYPE = 'cinder'

    # Class attributes (loaded values)
    LOG_LEVEL = DEFAULT_LOG_LEVEL
    LOG_FORMAT = DEFAULT_LOG_FORMAT
    JSON_LOGS = DEFAULT_JSON_LOGS
    SHARE_RESOURCE_TYPE = DEFAULT_SHARE_RESOURCE_TYPE
    VOLUME_RESOURCE_TYPE = DEFAULT_VOLUME_RESOURCE_TYPE

    _loaded = False
    _config_file = None

    @classmethod
    def load_config(cls, config_file: Optional[str] = None, force: bool = False,
                    strict: bool = True):
        """
        Load configuration from file and environment variables.

        Args:
            config_file: Path to config file (optional)
            force: Reload even if a configuration was already loaded
            strict: Raise on an invalid log level instead of using the default

        Raises:
            ConfigurationException: Invalid log level in strict mode
        """
        config_file = config_file or os.environ.get('OPENSDS_FAKE_CONFIG', cls.CONFIG_FILE)

        if cls._loaded and not force and config_file == cls._config_file:
            logger.debug(f"Configuration already loaded from {config_file}, skipping reload")
            return

        config_data = cls._load_ini_file(config_file)
        cls._config_file = config_file

        # Priority: env var > config file > default
        log_level = os.environ.get(
            'OPENSDS_FAKE_LOG_LEVEL',
            config_data.get('log_level', cls.DEFAULT_LOG_LEVEL)
        ).upper()
        if log_level not in VALID_LOG_LEVELS:
            message = f"Invalid log level: {log_level}. Must be one of {', '.join(VALID_LOG_LEVELS)}"
            if strict:
                raise ConfigurationException(message)
            logger.warning(f"{message}, using {cls.DEFAULT_LOG_LEVEL}")
            log_level = cls.DEFAULT_LOG_LEVEL
        cls.LOG_LEVEL = log_level

        cls.LOG_FORMAT = os.environ.get(
            'OPENSDS_FAKE_LOG_FORMAT',
            config_data.get('log_format', cls.DEFAULT_LOG_FORMAT)
        )

        cls.JSON_LOGS = cls._to_bool(os.environ.get(
            'OPENSDS_FAKE_JSON_LOGS',
            config_data.get('json_logs', cls.DEFAULT_JSON_LOGS)
        ))

        cls.SHARE_RESOURCE_TYPE = os.environ.get(
            'OPENSDS_FAKE_SHARE_RESOURCE_TYPE',
            config_data.get('share_resource_type', cls.DEFAULT_SHARE_RESOURCE_TYPE)
        )

        cls.VOLUME_RESOURCE_TYPE = os.environ.get(
            'OPENSDS_FAKE_VOLUME_RESOURCE_TYPE',
            config_data.get('volume_resource_type', cls.DEFAULT_VOLUME_RESOURCE_TYPE)
        )

        cls._loaded = True
        logger.debug(f"Configuration loaded from: {config_file}")

    @classmethod
    def _load_ini_file(cls, config_file: str) -> Dict[str, Any]:
        """
        Load configuration from INI file.

        Expected format:
        [fake]
        log_level = DEBUG
        json_logs = true
        share_resource_type = manila
        volume_resource_type = cinder
        """
        config_data = {}

        if not os.path.exists(config_file):
            logger.debug(f"Config file not found: {config_file}, using defaults")
            return config_data

        # Interpolation off so %(asctime)s style log formats survive
        parser = ConfigParser(interpolation=None)
        parser.read(config_file)

        for section in ['fake', 'DEFAULT']:
            if parser.has_section(section) or section == 'DEFAULT':
                for key, value in parser.items(section):
                    if key not in config_data:
                        config_data[key] = value

        logger.debug(f"Loaded {len(config_data)} config parameters from {config_file}")
        return config_data

    @staticmethod
    def _to_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in ('1', 'true', 'yes', 'on')

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """
        Get configuration as dictionary.

        Returns:
            Dictionary with the loaded configuration
        """
        if not cls._loaded:
            cls.load_config(strict=False)

        return {
            'log_level': cls.LOG_LEVEL,
            'log_format': cls.LOG_FORMAT,
            'json_logs': cls.JSON_LOGS,
            'share_resource_type': cls.SHARE_RESOURCE_TYPE,
            'volume_resource_type': cls.VOLUME_RESOURCE_TYPE,
        }

    @classmethod
    def reload(cls, config_file: Optional[str] = None):
        """Reload configuration (useful for testing)."""
        cls._loaded = False
        cls.load_config(config_file, force=True)
