# certgateway/config.py
"""
Central configuration.

Two pieces live here:
- Config: the Flask config object (env vars, SQLAlchemy flags)
- Settings: database + Rocketfy credentials, loaded once from config.yml

Settings is frozen. It is built at startup and passed into create_app();
nothing writes to it afterwards.
"""

import os

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError
from sqlalchemy.engine import URL

from .errors import ConfigError

ROCKETFY_PRODUCTS_URL = "https://ms-public-api.rocketfy.com/rocketfy/api/v1/products"


class Config:
    CONFIG_PATH = os.environ.get("CERTGATEWAY_CONFIG", "config.yml")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    PORT = int(os.environ.get("PORT", "8080"))

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}


class DatabaseSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    host: str
    port: int = 5432
    user: str
    password: str
    dbname: str
    sslmode: str = "disable"

    def sqlalchemy_url(self) -> URL:
        """Postgres URL for SQLAlchemy (credentials get escaped by URL.create)."""
        return URL.create(
            "postgresql+psycopg2",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.dbname,
            query={"sslmode": self.sslmode},
        )


class RocketfySettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    x_secret: str
    x_api_key: str
    products_url: str = ROCKETFY_PRODUCTS_URL


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    db: DatabaseSettings
    rocketfy: RocketfySettings


def load_settings(path) -> Settings:
    """
    Read config.yml into a Settings value.

    Raises ConfigError for a missing/unreadable file, bad YAML, or a document
    that doesn't have the expected `db` / `rocketfy` sections.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"config file {path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping at the top level")

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config file {path}: {e}") from e
