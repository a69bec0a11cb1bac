#!/usr/bin/env python
# -*- coding: utf-8 -*-

from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigurationError

DEFAULT_PREFIX = "git-annex"

class LayoutStrategy(Enum):
    """How keys are sharded into directories on the remote."""
    LOWER = "lower"
    DIRECTORY = "directory"
    NODIR = "nodir"
    MIXED = "mixed"
    FRANKENCASE = "frankencase"

    @classmethod
    def parse(cls, value: str) -> 'LayoutStrategy':
        if not value:
            return cls.LOWER
        try:
            return cls(value.lower())
        except ValueError:
            choices = ", ".join(layout.value for layout in cls)
            raise ValueError(f"invalid layout '{value}', expected one of: {choices}") from None

class RemoteConfig(BaseModel):
    """
    The settings of one rclone special remote.

    Built once per session by INITREMOTE or PREPARE and never modified afterwards.
    """
    model_config = ConfigDict(frozen=True)

    target: str
    prefix: str = DEFAULT_PREFIX
    layout: LayoutStrategy = LayoutStrategy.LOWER

    @field_validator("target", mode="before")
    @classmethod
    def require_target(cls, value: Any) -> Any:
        if not value:
            raise ValueError("the target setting is required, for example target=myremote")
        return value

    @field_validator("prefix", mode="before")
    @classmethod
    def default_prefix(cls, value: Any) -> Any:
        if not value:
            return DEFAULT_PREFIX
        if value == "/":
            raise ValueError("storing files in the root directory ('/') is not supported")
        return value

    @field_validator("layout", mode="before")
    @classmethod
    def parse_layout(cls, value: Any) -> Any:
        if isinstance(value, str):
            return LayoutStrategy.parse(value)
        return value

    @classmethod
    def from_settings(cls, *, target: str, prefix: str, layout: str) -> Self:
        """Build a config from the raw strings git-annex stores, raising ConfigurationError if they are invalid."""
        try:
            return cls(target=target, prefix=prefix, layout=layout)
        except ValidationError as e:
            raise ConfigurationError(describe_validation_error(e)) from e

    @property
    def root(self) -> str:
        """The rclone path of the container every key is stored under."""
        return f"{self.target}:{self.prefix}"

    def settings(self) -> dict[str, str]:
        """The settings as they are persisted in git-annex."""
        return {
            "prefix": self.prefix,
            "target": self.target,
            "layout": self.layout.value,
        }

def describe_validation_error(error: ValidationError) -> str:
    messages = []
    for details in error.errors():
        original = details.get("ctx", {}).get("error")
        messages.append(str(original) if original is not None else details["msg"])
    return "; ".join(messages)
