import os
from dotenv import load_dotenv

load_dotenv()


def get_enabled_matchers(value=None):
    """Parse a comma-separated matcher list. Empty means all matchers."""
    if value is None:
        value = os.getenv('ENABLED_MATCHERS', '')
    names = [name.strip() for name in value.split(',') if name.strip()]
    return names or None


class Config:
    """Base configuration."""
    # Application settings
    DEBUG = False
    TESTING = False
    PORT = int(os.getenv('PORT', 8000))
    HOST = os.getenv('HOST', '0.0.0.0')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Response settings
    JSON_SORT_KEYS = False

    # Data source matchers (None enables every registered matcher)
    ENABLED_MATCHERS = get_enabled_matchers()

class ProductionConfig(Config):
    """Production configuration."""
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING').upper()

class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False
    PORT = 8000
    HOST = 'localhost'
    LOG_LEVEL = 'DEBUG'

class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    PORT = 8000
    HOST = 'localhost'
    LOG_LEVEL = 'DEBUG'
    ENABLED_MATCHERS = None

# Dictionary for easy config selection
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
