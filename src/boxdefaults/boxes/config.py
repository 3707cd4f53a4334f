"""Configuration models for the Vagrant box reference table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import UnknownBoxError


BOX_NAMES: tuple[str, ...] = (
    "SERVER",
    "NETNEXT_SERVER",
    "v54_SERVER",
    "v419_SERVER",
    "v49_SERVER",
)

BOX_KEYS: tuple[str, ...] = tuple(
    key for name in BOX_NAMES for key in (f"{name}_BOX", f"{name}_VERSION")
)

DEFAULT_VAGRANT_MIN_VERSION = ">= 2.2.0"


def _coerce_box_value(value):
    # JSON documents and Python callers may give a version such as 234 as an int.
    if isinstance(value, bool):
        raise ValueError("expected a string, got a boolean")
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    if not value.strip():
        raise ValueError("value must not be empty")
    return value


class BoxReference(BaseModel):
    """A single box image together with its published version."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    image: str = Field(min_length=1)
    version: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.image} {self.version}"


class BoxDefaults(BaseModel):
    """Immutable table of box images and versions keyed by their Vagrant names."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    vagrant_min_version: str = DEFAULT_VAGRANT_MIN_VERSION

    SERVER_BOX: str
    SERVER_VERSION: str
    NETNEXT_SERVER_BOX: str
    NETNEXT_SERVER_VERSION: str
    v54_SERVER_BOX: str
    v54_SERVER_VERSION: str
    v419_SERVER_BOX: str
    v419_SERVER_VERSION: str
    v49_SERVER_BOX: str
    v49_SERVER_VERSION: str

    @field_validator(*BOX_KEYS, mode="before")
    @classmethod
    def _validate_box_value(cls, value):
        return _coerce_box_value(value)

    @field_validator("vagrant_min_version", mode="before")
    @classmethod
    def _validate_min_version(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError("vagrant_min_version must be a non-empty string")
        return value

    def as_mapping(self) -> Mapping[str, str]:
        """Return the ten box keys in declaration order as a read-only mapping."""

        return MappingProxyType({key: getattr(self, key) for key in BOX_KEYS})

    def references(self) -> tuple[BoxReference, ...]:
        return tuple(self.reference(name) for name in BOX_NAMES)

    def reference(self, name: str) -> BoxReference:
        if name not in BOX_NAMES:
            raise UnknownBoxError(name)
        return BoxReference(
            name=name,
            image=getattr(self, f"{name}_BOX"),
            version=getattr(self, f"{name}_VERSION"),
        )
