"""Pydantic models describing s3crc configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from s3crc.crc.engine import DEFAULT_CHUNK_SIZE
from s3crc.util.logging import DEFAULT_FORMAT


class RuntimeConfig(BaseModel):
    """How sources are read and how failures affect the exit status."""

    model_config = ConfigDict(extra="forbid")

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1)
    fail_on_error: bool = False


class LoggingConfig(BaseModel):
    """Diagnostic logging settings."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = DEFAULT_FORMAT
    log_path: Optional[Path] = None


class S3CrcConfig(BaseModel):
    """Root configuration object for the s3crc command."""

    model_config = ConfigDict(extra="forbid")

    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = ["LoggingConfig", "RuntimeConfig", "S3CrcConfig"]
