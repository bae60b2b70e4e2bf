"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    data_dir: Path = Field(
        default=Path(".tasktracker"),
        description="Directory holding the YAML collections",
    )

    host: str = Field(
        default="0.0.0.0",
        description="Interface the API listens on",
    )

    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port the API listens on",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    resequence_on_task_delete: bool = Field(
        default=False,
        description="Close the position gap left in a column when a task is deleted",
    )

    model_config = {
        "env_prefix": "TASKTRACKER_",
    }
