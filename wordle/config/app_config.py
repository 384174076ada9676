"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env (next to this module) if present
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG')

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    MAX_ROWS = int(os.getenv('MAX_ROWS', 6))
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', 5))
    STRICT_WORD_CHECK = _env_flag('STRICT_WORD_CHECK')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(name=None):
    """Return the configuration class named by ``name`` or the APP_ENV variable."""
    name = name or os.getenv('APP_ENV', 'default')
    if name not in config:
        raise ValueError(f"Unknown configuration '{name}', expected one of {sorted(config)}")
    return config[name]
