"""Vagrant box references for the development environment."""

from .boxes import (
    BoxDefaults,
    BoxDefaultsError,
    BoxReference,
    MalformedValueError,
    MissingKeyError,
    UnknownBoxError,
    default_box_defaults,
    load_box_defaults,
)

__all__ = [
    "BoxDefaults",
    "BoxDefaultsError",
    "BoxReference",
    "MalformedValueError",
    "MissingKeyError",
    "UnknownBoxError",
    "default_box_defaults",
    "load_box_defaults",
]
