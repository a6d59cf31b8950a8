from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING
from os import PathLike, environ
from pathlib import Path
from tomllib import load

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = Path("config.toml")

# Environment variable -> (section, key) in the merged config
ENV_OVERRIDES = {
    "PORT": ("network", "port"),
    "JWT_SECRET": ("auth", "secret"),
}


class General(BaseModel):
    title: str
    name: str = "Catalog API"
    docs_url: str = "/api-docs"


class Database(BaseModel):
    uri: str = "mongodb://localhost:27017"
    name: str = "express-tutorial"


class Logging(BaseModel):
    level: int

    @field_validator("level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value
        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(value.upper(), INFO)


class Paths(BaseModel):
    logs: str


class Auth(BaseModel):
    # Supplied only through the JWT_SECRET environment variable
    secret: str = Field(..., min_length=1)
    algorithm: str = "HS256"
    token_expire_minutes: int = 60


class Network(BaseModel):
    host: str
    port: int
    reload: bool
    cors_origins: list[str] = ["*"]


class Config(BaseModel):
    general: General
    database: Database
    paths: Paths
    logging: Logging
    auth: Auth
    network: Network


def load_config(
    shared_config_file: PathLike = DEFAULT_CONFIG_PATH,
    specific_config_file: PathLike | None = None,
) -> Config:
    """Load and merge configurations from TOML files.

    Values from ``ENV_OVERRIDES`` take precedence over both files. The token
    signing secret is read from ``JWT_SECRET`` only; a value in either file
    is discarded and loading fails when the variable is unset.
    """
    # Load shared config
    with Path(shared_config_file).open("rb") as f:
        config_data = load(f)

    # Load and merge specific config if provided
    if specific_config_file:
        with Path(specific_config_file).open("rb") as f:
            specific_data = load(f)
            for section, values in specific_data.items():
                if isinstance(values, dict):
                    config_data.setdefault(section, {}).update(values)
                else:
                    config_data[section] = values

    config_data.get("auth", {}).pop("secret", None)

    for variable, (section, key) in ENV_OVERRIDES.items():
        if variable in environ:
            config_data.setdefault(section, {})[key] = environ[variable]

    return Config(**config_data)
