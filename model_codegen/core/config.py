"""Configuration for the model code generator."""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError


class TemplateConfig(BaseModel):
    """Configuration for the emitted class text."""

    namespace: str = "Models"
    usings: list[str] = Field(
        default_factory=lambda: [
            "Leafing.Data.Definition",
            "System",
            "System.Collections.Generic",
            "System.Linq",
            "System.Web",
        ]
    )
    identity_base_type: str = "DbObjectModel"
    plain_base_type: str = "IDbObject"
    legacy_base_type: str = "LinqObjectModel"
    length_limit: int = Field(
        default=32768, description="Columns at or above this size get no [Length]"
    )
    indent: str = "    "
    now_sentinel: str = "DateTime.Now"

    @field_validator("length_limit")
    @classmethod
    def validate_length_limit(cls, v: int) -> int:
        """Validate that the length limit is positive."""
        if v <= 0:
            raise ValueError("Length limit must be a positive integer")
        return v


class FileNamesConfig(BaseModel):
    """Configuration for generated file names."""

    model_suffix: str = ".cs"
    partial_suffix: str = "_Ex.cs"


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_file_not_found: int = 1
    error_generation: int = 2
    error_usage: int = 3
    error_file_system: int = 5


class Config(BaseSettings):
    """Main configuration class for the model code generator."""

    # Source database, only needed when reflecting a live database
    database_url: str | None = Field(
        default=None, description="SQLAlchemy URL of the database to inspect"
    )

    output_dir: Path = Field(
        default=Path("Models"), description="Path for generated model files"
    )
    flavor: Literal["current", "legacy"] = Field(
        default="current", description="Emission flavour of the generated classes"
    )

    # Nested configurations
    template: TemplateConfig = Field(default_factory=TemplateConfig)
    file_names: FileNamesConfig = Field(default_factory=FileNamesConfig)
    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
    }

    def require_database_url(self) -> str:
        """Return the database URL or fail if it is not configured.

        Raises:
            ConfigurationError: If DATABASE_URL is not set
        """
        if not self.database_url:
            raise ConfigurationError(variable_name="DATABASE_URL")
        return self.database_url


# At application import time, populate os.environ from .env (if present).
load_dotenv()
config = Config()
