import os
import json
import logging
from typing import Any

from dotenv import load_dotenv

logger = logging.getLogger("bookshelf-lambda")

TRUTHY_VALUES = ("true", "1", "yes")


class AppConfig:
    """Application configuration management"""

    # Default configuration values
    _defaults = {
        "log_level": "INFO",
        "demo_mode": False,
        "ai_summary_enabled": False,
        "aws_region": "ap-northeast-1",
        "bedrock_model_id": "anthropic.claude-3-5-sonnet-20240620-v1:0",
        "summary_max_tokens": 300,
        "summary_temperature": 0.7,
        "database_url_ssm_param": None,
    }

    # Cache for config values
    _config_cache = None

    @classmethod
    def get_value(cls, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        Checks environment variables first, then config file, then defaults.
        """
        if cls._config_cache is None:
            cls._load_config()

        # Check environment variables (with BOOKSHELF_ prefix)
        env_key = f"BOOKSHELF_{key.upper()}"
        if env_key in os.environ:
            return os.environ[env_key]

        if key in cls._config_cache:
            return cls._config_cache[key]

        if key in cls._defaults:
            return cls._defaults[key]

        return default

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        value = cls.get_value(key, default)
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() in TRUTHY_VALUES

    @classmethod
    def reset(cls) -> None:
        """Drop cached file values so the next lookup reloads them."""
        cls._config_cache = None

    @classmethod
    def _load_config(cls) -> None:
        """Load configuration from .env and the JSON config file"""
        cls._config_cache = {}

        # Local development keeps secrets in .env; in Lambda this is a no-op
        load_dotenv()

        config_path = os.environ.get(
            "BOOKSHELF_CONFIG_PATH",
            "/opt/python/config/app_config.json"
        )

        if not os.path.exists(config_path):
            local_config = "./config.json"
            if os.path.exists(local_config):
                config_path = local_config

        try:
            if os.path.exists(config_path):
                with open(config_path, 'r') as f:
                    cls._config_cache = json.load(f)
                logger.info(f"Loaded configuration from {config_path}")
            else:
                logger.info("No configuration file found, using defaults")
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading configuration: {str(e)}")
            # Continue with empty config and defaults
