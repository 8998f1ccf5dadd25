"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _validate_segment(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("path segment must not be empty")
    if "/" in value or "\\" in value or value in {".", ".."}:
        raise ValueError(f"path segment must be a single folder name: {value!r}")
    return value


class RelocationSettings(BaseModel):
    """Layout of the quarantine directory that removed files are moved into."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    temp_folder: str = Field(
        default="temp", description="Folder under the base path that holds temporary data"
    )
    namespace: str = Field(
        default="Keystone", description="Namespace folder inside the temp folder"
    )
    folder_name: str = Field(
        default="FileRemover", description="Folder grouping all FileRemover runs"
    )
    run_id_format: str = Field(
        default="%Y%m%d%H%M%S",
        description="strftime format used to build a run identifier",
    )

    @field_validator("temp_folder", "namespace", "folder_name")
    @classmethod
    def validate_segment(cls, v: str) -> str:
        """Ensure each layout component is a single, non-empty folder name."""
        return _validate_segment(v)

    @field_validator("run_id_format")
    @classmethod
    def validate_run_id_format(cls, v: str) -> str:
        """Ensure the run id format actually contains a date directive."""
        if "%" not in v:
            raise ValueError(f"run_id_format must contain strftime directives: {v!r}")
        return v

    def parts(self) -> tuple[str, str, str]:
        """Path components between the base path and the run folder."""
        return (self.temp_folder, self.namespace, self.folder_name)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class FileRemoverConfig(BaseModel):
    """Main configuration for FileRemover."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    base_path: Path | None = Field(
        default=None,
        description="Root of the deployed application (defaults to the working directory)",
    )

    relocation: RelocationSettings = Field(
        default_factory=RelocationSettings, description="Quarantine layout settings"
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    def resolve_base_path(self) -> Path:
        """Get the configured base path, falling back to the working directory."""
        if self.base_path is not None:
            return self.base_path
        return Path.cwd()
