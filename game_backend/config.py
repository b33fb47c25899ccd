# config.py

import os
from urllib.parse import quote_plus
from dotenv import load_dotenv

# Get the base directory of the application
basedir = os.path.abspath(os.path.dirname(__file__))

# Finds the .env file in the repository root and loads it.
load_dotenv(os.path.join(basedir, '..', '.env'))


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _mysql_uri(driver, user, password, host, port, schema):
    return f"{driver}://{quote_plus(user or '')}:{quote_plus(password or '')}@{host}:{port}/{schema}?charset=utf8mb4"


class Config:
    """
    Process-wide settings, read once from the environment at startup.

    The account schema (UserInfo) is the default SQLAlchemy bind and the
    game content schema (Stage, Monster, Card, Level) is the 'game' bind.
    """
    # --- Database Settings ---
    DB_HOST = os.environ.get('DB_HOST')
    DB_USER = os.environ.get('DB_USER')
    DB_PASSWORD = os.environ.get('DB_PASSWORD')
    DB_PORT = int(os.environ.get('DB_PORT') or 3306)
    DB_DRIVER = os.environ.get('DB_DRIVER') or 'mysql+pymysql'
    ACCOUNT_DB_NAME = os.environ.get('ACCOUNT_DB_NAME') or os.environ.get('DB_NAME')
    GAME_DB_NAME = os.environ.get('GAME_DB_NAME')

    REQUIRED_SETTINGS = ('DB_HOST', 'DB_USER', 'DB_PASSWORD', 'ACCOUNT_DB_NAME', 'GAME_DB_NAME')

    SQLALCHEMY_DATABASE_URI = _mysql_uri(DB_DRIVER, DB_USER, DB_PASSWORD, DB_HOST, DB_PORT, ACCOUNT_DB_NAME)
    SQLALCHEMY_BINDS = {
        'game': _mysql_uri(DB_DRIVER, DB_USER, DB_PASSWORD, DB_HOST, DB_PORT, GAME_DB_NAME),
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # MySQL drops idle connections; recycle before wait_timeout and ping on checkout.
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 280,
    }

    # --- Content decoding ---
    # False: unknown Grade/CardType strings decode to the enum's first member (logged).
    # True: they fail the request with a store error.
    STRICT_ENUM_DECODE = _env_flag('STRICT_ENUM_DECODE')

    # --- Logging ---
    LOG_LEVEL = (os.environ.get('LOG_LEVEL') or 'INFO').upper()

    @classmethod
    def missing_settings(cls):
        """Returns the names of required settings that are unset or blank."""
        return [name for name in cls.REQUIRED_SETTINGS if not getattr(cls, name, None)]
