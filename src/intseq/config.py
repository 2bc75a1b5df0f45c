"""Runtime settings for the intseq package."""

import logging
import os

import numpy as np
from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]


class Settings(BaseModel):
    """Package-wide settings.

    Attributes:
        LOG_LEVEL: Level name for the ``intseq`` logger.
        DTYPE: Signed integer dtype used when the package allocates a sequence.
    """

    LOG_LEVEL: str = Field(default="INFO")
    DTYPE: str = Field(default="int64")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @field_validator("DTYPE")
    @classmethod
    def validate_dtype(cls, value: str) -> str:
        try:
            dtype = np.dtype(value)
        except TypeError as e:
            raise ValueError(f"Unknown dtype '{value}'.") from e
        if not np.issubdtype(dtype, np.signedinteger):
            raise ValueError(f"DTYPE must be a signed integer dtype, got '{value}'.")
        return dtype.name

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``INTSEQ_*`` environment variables."""
        values = {}

        log_level = os.getenv("INTSEQ_LOG_LEVEL") or os.getenv("LOG_LEVEL")
        if log_level:
            values["LOG_LEVEL"] = log_level

        dtype = os.getenv("INTSEQ_DTYPE")
        if dtype:
            values["DTYPE"] = dtype

        return cls(**values)


settings = Settings.load()
