from pathlib import Path
from typing import Any, Optional, Union

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Level names understood by loguru's default levels
LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[2] / "config" / "settings.yaml"


class Neo4jSettingsModel(BaseSettings):
    """Connection details for Neo4j database."""

    uri: str = "neo4j://localhost:7687"
    user: str = "neo4j"
    password: str = "password"
    database: Optional[str] = None
    query_timeout: Optional[float] = Field(
        default=None,
        description="Transaction timeout in seconds; None keeps the server default",
    )

    model_config = SettingsConfigDict(env_prefix="NEO4J_", env_file=".env", extra="ignore")

    @field_validator("query_timeout")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError(f"query_timeout must be positive, got {value}")
        return value


class AppSettingsModel(BaseModel):
    """Application settings loaded from YAML and env vars."""

    name: str = "Movie Graph Store"
    version: str = "0.1.0"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class Neo4jFileModel(BaseModel):
    uri: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None
    query_timeout: Optional[float] = None

    model_config = ConfigDict(extra="forbid")


class SettingsFileModel(BaseModel):
    """Schema for validating `settings.yaml`."""

    app: AppSettingsModel = Field(default_factory=AppSettingsModel)
    neo4j: Optional[Neo4jFileModel] = None

    model_config = ConfigDict(extra="forbid")


class RuntimeSettings(BaseSettings):
    """Central runtime settings loaded from YAML and environment."""

    app: AppSettingsModel = Field(
        default_factory=AppSettingsModel,
        description="Application configuration",
    )
    neo4j: Neo4jSettingsModel = Field(
        default_factory=Neo4jSettingsModel,
        description="Neo4j connection options",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", extra="ignore"
    )


def validate_config_schema(config_data: dict) -> bool:
    """Validate settings data against the Pydantic schema."""

    try:
        SettingsFileModel.model_validate(config_data)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc
    return True


def load_runtime_settings(path: Optional[Union[str, Path]] = None) -> RuntimeSettings:
    """
    Load runtime settings from a YAML file and environment variables.

    The YAML file (``config/settings.yaml`` unless ``path`` is given) is
    optional. Its values act as defaults: any ``NEO4J_*`` or ``APP__*``
    environment variable takes precedence over them.

    The default path only exists in a source checkout; an installed package
    should pass ``path`` explicitly or rely on environment variables.
    """

    yaml_path = Path(path) if path else DEFAULT_SETTINGS_PATH
    data: dict[str, Any] = {}
    if yaml_path.exists():
        with open(yaml_path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        validate_config_schema(data)
    else:
        logger.debug(f"Settings file {yaml_path} not found; using defaults and environment.")

    env_settings = RuntimeSettings()
    env_neo4j = Neo4jSettingsModel()

    file_neo4j = {k: v for k, v in (data.get("neo4j") or {}).items() if v is not None}
    neo4j = Neo4jSettingsModel(**{**file_neo4j, **_explicit_values(env_neo4j)})

    file_app = data.get("app") or {}
    app = AppSettingsModel(**{**file_app, **_explicit_values(env_settings.app)})

    return RuntimeSettings(app=app, neo4j=neo4j)


def _explicit_values(model: BaseModel) -> dict[str, Any]:
    """Return only the fields that were set from a source, not defaulted."""
    return {name: getattr(model, name) for name in model.model_fields_set}


runtime_settings = load_runtime_settings()

# Re-export runtime settings for application modules
settings = runtime_settings
