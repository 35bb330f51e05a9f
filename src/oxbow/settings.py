"""
Configuration for the message layer.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from oxbow.exceptions import ErrorLevel


class Settings(BaseModel):
    """Validated bot settings that affect how messages are parsed and answered."""

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(
        default="!",
        min_length=1,
        max_length=1,
        description="Character that marks a chat message as a bot command",
    )
    error_level: ErrorLevel = Field(
        default=ErrorLevel.USER,
        description="Detail level of error replies",
    )

    @field_validator("prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if value.isalnum() or value.isspace():
            raise ValueError("prefix must be a punctuation character")
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        """
        Build settings from a plain mapping, such as a loaded config section.

        Raises:
            pydantic.ValidationError: If a value violates its constraints
        """
        return cls.model_validate(dict(data))
