import os

from dotenv import load_dotenv

_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _load_env_files(config_name):
    """Load .env.<config_name>, then a local .env which overrides it."""
    env_file = os.path.join(_ROOT, f'.env.{config_name}')
    if os.path.exists(env_file):
        load_dotenv(env_file)
    dotenv_path = os.path.join(_ROOT, '.env')
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path, override=True)


def _parse_timeout(raw):
    if not raw:
        return None
    value = float(raw)
    return value if value > 0 else None


class BaseConfig:
    """Base configuration shared across all environments.

    Values are read from the environment when the config is instantiated,
    so .env files loaded by get_config() are picked up.
    """

    LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    def __init__(self):
        # Site
        self.BASE_URL = os.environ.get('ATCODER_BASE_URL', 'https://atcoder.jp').rstrip('/')
        self.ARCHIVE_LANG = os.environ.get('ATCODER_ARCHIVE_LANG', 'ja')

        # Transport
        self.USER_AGENT = os.environ.get(
            'ATCODER_USER_AGENT',
            'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36',
        )
        self.REQUEST_TIMEOUT = _parse_timeout(os.environ.get('ATCODER_REQUEST_TIMEOUT', '30'))

        # Logging
        self.LOG_LEVEL = os.environ.get('ATCODER_LOG_LEVEL', 'INFO').upper()
        self.LOG_FILE = os.environ.get('ATCODER_LOG_FILE', '')
        self.LOG_FILE_MAX_BYTES = int(os.environ.get('ATCODER_LOG_FILE_MAX_BYTES', '1048576'))
        self.LOG_FILE_BACKUP_COUNT = int(os.environ.get('ATCODER_LOG_FILE_BACKUP_COUNT', '3'))


class DevelopmentConfig(BaseConfig):
    """Development environment configuration."""

    DEBUG = True

    def __init__(self):
        super().__init__()
        self.LOG_LEVEL = os.environ.get('ATCODER_LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(BaseConfig):
    """Production environment configuration."""

    DEBUG = False


class TestingConfig(BaseConfig):
    """Testing environment configuration."""

    TESTING = True
    DEBUG = True

    def __init__(self):
        super().__init__()
        self.BASE_URL = 'https://atcoder.jp'
        self.LOG_LEVEL = 'WARNING'
        self.LOG_FILE = ''


config_map = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
}


def get_config(config_name=None):
    """Load the .env files for ``config_name`` and return its config.

    Args:
        config_name: 'development', 'production' or 'testing'. Defaults to
                     the ATCODER_ENV environment variable or 'development'.
    """
    if config_name is None:
        config_name = os.environ.get('ATCODER_ENV', 'development')
    _load_env_files(config_name)
    config_class = config_map.get(config_name, config_map['development'])
    return config_class()
