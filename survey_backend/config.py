# survey_backend/config.py

import os
from dataclasses import dataclass, field
from datetime import timedelta

from survey_backend.errors import ConfigError

# Explicit application configuration, handed to create_app() at startup

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


@dataclass(frozen=True)
class AppConfig:
    jwt_secret_key: str
    database_url: str = 'sqlite:///survey.db'
    token_ttl: timedelta = field(default=timedelta(hours=1))
    password_time_cost: int = 3
    password_memory_cost: int = 65536
    password_parallelism: int = 4
    create_tables: bool = True
    trust_proxy: bool = False
    log_level: str = 'INFO'

    def __post_init__(self):
        if not isinstance(self.jwt_secret_key, str) or not self.jwt_secret_key.strip():
            raise ConfigError("JWT secret key must be supplied")
        if self.token_ttl.total_seconds() <= 0:
            raise ConfigError("Token lifetime must be positive")

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from environment variables.

        JWT_SECRET_KEY is mandatory; every other value falls back to the
        dataclass default when unset.
        """
        env = os.environ if environ is None else environ

        secret = env.get('JWT_SECRET_KEY')
        if not secret:
            raise ConfigError("JWT_SECRET_KEY environment variable is not set")

        kwargs = {'jwt_secret_key': secret}
        if env.get('DATABASE_URL'):
            kwargs['database_url'] = env['DATABASE_URL']
        if env.get('TOKEN_TTL_SECONDS'):
            kwargs['token_ttl'] = timedelta(seconds=_parse_int(env, 'TOKEN_TTL_SECONDS'))
        if env.get('PASSWORD_TIME_COST'):
            kwargs['password_time_cost'] = _parse_int(env, 'PASSWORD_TIME_COST')
        if env.get('PASSWORD_MEMORY_COST'):
            kwargs['password_memory_cost'] = _parse_int(env, 'PASSWORD_MEMORY_COST')
        if env.get('PASSWORD_PARALLELISM'):
            kwargs['password_parallelism'] = _parse_int(env, 'PASSWORD_PARALLELISM')
        if 'CREATE_TABLES' in env:
            kwargs['create_tables'] = _parse_bool(env, 'CREATE_TABLES')
        if 'TRUST_PROXY' in env:
            kwargs['trust_proxy'] = _parse_bool(env, 'TRUST_PROXY')
        if env.get('LOG_LEVEL'):
            kwargs['log_level'] = env['LOG_LEVEL'].upper()
        return cls(**kwargs)

    def flask_settings(self) -> dict:
        # Keys understood by Flask-SQLAlchemy and Flask-JWT-Extended
        return {
            'JWT_SECRET_KEY': self.jwt_secret_key,
            'JWT_ACCESS_TOKEN_EXPIRES': self.token_ttl,
            'JWT_TOKEN_LOCATION': ['headers'],
            'SQLALCHEMY_DATABASE_URI': self.database_url,
            'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        }


def _parse_int(env, name: str) -> int:
    try:
        return int(env[name])
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {env[name]!r}")


def _parse_bool(env, name: str) -> bool:
    value = env[name].strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {env[name]!r}")
