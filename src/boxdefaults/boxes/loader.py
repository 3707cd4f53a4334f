"""Load and serialize box defaults documents."""

from __future__ import annotations

import json
import shlex
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import ValidationError

from ..common.observability import get_logger
from .config import BOX_KEYS, BoxDefaults
from .errors import BoxDefaultsError, MalformedValueError, MissingKeyError


LOGGER = get_logger("loader")


class _BoxYamlLoader(yaml.SafeLoader):
    """Safe loader that keeps unquoted integers as their source text."""


# 0234 would otherwise resolve as octal 156.
_BoxYamlLoader.add_constructor("tag:yaml.org,2002:int", lambda loader, node: loader.construct_scalar(node))

PACKAGED_DEFAULTS_PATH = Path(__file__).with_name("box_defaults.yaml")
FORMATS = ("yaml", "json", "env")


def parse_box_defaults(data: Any, *, source: Optional[str] = None) -> BoxDefaults:
    """Validate a decoded document into :class:`BoxDefaults`.

    The table may sit at the top level or under a ``boxes`` section, but not
    both: box keys beside a ``boxes`` section are rejected.
    """

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise BoxDefaultsError(
            f"expected a mapping of box keys, got {type(data).__name__}", source=source
        )
    if "boxes" in data and isinstance(data["boxes"], Mapping):
        stray = [key for key in data if key in BoxDefaults.model_fields]
        if stray:
            raise BoxDefaultsError(
                f"box key(s) given beside the boxes section: {', '.join(stray)}", source=source
            )
        data = data["boxes"]

    try:
        return BoxDefaults.model_validate(dict(data))
    except ValidationError as exc:
        errors = exc.errors()
        missing = [str(err["loc"][0]) for err in errors if err["type"] == "missing" and err["loc"]]
        if missing:
            raise MissingKeyError(missing, source=source) from exc
        first = errors[0]
        key = str(first["loc"][0]) if first["loc"] else "<document>"
        raise MalformedValueError(key, first["msg"], source=source) from exc


def _decode(text: str, fmt: str, *, source: Optional[str] = None) -> Any:
    try:
        if fmt == "json":
            return json.loads(text)
        if fmt == "yaml":
            return yaml.load(text, Loader=_BoxYamlLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise BoxDefaultsError(f"failed to parse {fmt} document: {exc}", source=source) from exc
    raise BoxDefaultsError(f"unsupported input format: {fmt}", source=source)


def _format_for(path: Path) -> str:
    return "json" if path.suffix.lower() == ".json" else "yaml"


def load_box_defaults(path: Path | str | None = None) -> BoxDefaults:
    """Read a box defaults document; ``None`` loads the packaged one."""

    config_path = Path(path) if path is not None else PACKAGED_DEFAULTS_PATH
    source = str(config_path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BoxDefaultsError(f"failed to read document: {exc}", source=source) from exc

    defaults = parse_box_defaults(_decode(text, _format_for(config_path), source=source), source=source)
    LOGGER.debug("box_defaults_loaded", path=source, boxes=len(defaults.references()))
    return defaults


@lru_cache(maxsize=1)
def default_box_defaults() -> BoxDefaults:
    """Return the packaged box defaults, read once per process."""

    return load_box_defaults()


def _document(defaults: BoxDefaults) -> dict[str, str]:
    document = {"vagrant_min_version": defaults.vagrant_min_version}
    document.update(defaults.as_mapping())
    return document


def dumps(defaults: BoxDefaults, fmt: str = "yaml") -> str:
    if fmt == "yaml":
        return yaml.safe_dump(_document(defaults), sort_keys=False)
    if fmt == "json":
        return json.dumps(_document(defaults), indent=2) + "\n"
    if fmt == "env":
        mapping = defaults.as_mapping()
        return "".join(f"{key}={shlex.quote(mapping[key])}\n" for key in BOX_KEYS)
    raise BoxDefaultsError(f"unsupported output format: {fmt}")


def loads(text: str, fmt: str = "yaml") -> BoxDefaults:
    return parse_box_defaults(_decode(text, fmt))
