"""Box reference document and loader."""

from .config import BOX_KEYS, BOX_NAMES, BoxDefaults, BoxReference
from .errors import BoxDefaultsError, MalformedValueError, MissingKeyError, UnknownBoxError
from .loader import default_box_defaults, dumps, load_box_defaults, loads, parse_box_defaults

__all__ = [
    "BOX_KEYS",
    "BOX_NAMES",
    "BoxDefaults",
    "BoxReference",
    "BoxDefaultsError",
    "MalformedValueError",
    "MissingKeyError",
    "UnknownBoxError",
    "default_box_defaults",
    "dumps",
    "load_box_defaults",
    "loads",
    "parse_box_defaults",
]
