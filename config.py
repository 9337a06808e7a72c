import os


ADS_TXT_DEFAULT = 'google.com, pub-4599880166858776, DIRECT, f08c47fec0942fa0'


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')

    # JSON Settings
    JSON_AS_ASCII = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Catalog Settings
    # Optional JSON file replacing the built-in catalog at startup
    CATALOG_FILE = os.environ.get('CATALOG_FILE')

    # Page Settings
    HOME_MESSAGE = os.environ.get('HOME_MESSAGE', '포트폴리오 갤러리')
    SUPPORT_MESSAGE = os.environ.get('SUPPORT_MESSAGE', 'Support')
    PRIVACY_MESSAGE = os.environ.get('PRIVACY_MESSAGE', 'Privacy Policy')

    # Ad network verification line served at /app-ads.txt
    ADS_TXT = os.environ.get('ADS_TXT', ADS_TXT_DEFAULT)

    # UI Settings
    DEFAULT_THEME = os.environ.get('DEFAULT_THEME', 'system')  # 'light', 'dark' or 'system'
    ENABLE_ANIMATIONS = os.environ.get('ENABLE_ANIMATIONS', 'true').lower() != 'false'


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing'
    # Tests always run against the built-in catalog and default texts
    CATALOG_FILE = None
    HOME_MESSAGE = '포트폴리오 갤러리'
    SUPPORT_MESSAGE = 'Support'
    PRIVACY_MESSAGE = 'Privacy Policy'
    ADS_TXT = ADS_TXT_DEFAULT


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
