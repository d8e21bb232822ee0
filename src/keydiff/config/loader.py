from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Mapping, Union

_LOGGER = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class DocumentLoadError(Exception):
    def __init__(self, source: str, message: str):
        super().__init__(f"{message}: {source}")
        self.source = source


class DocumentReadError(DocumentLoadError):
    """The source could not be read at all."""


class DocumentParseError(DocumentLoadError):
    """The source was read but is not a usable JSON document."""


class NotAMappingError(DocumentParseError):
    pass


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def parse_json(text: str | bytes, *, source: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DocumentParseError(source, f"Failed to parse JSON ({exc})") from exc


def ensure_mapping(document: Any, *, source: str) -> Dict[str, Any]:
    if not isinstance(document, Mapping):
        raise NotAMappingError(source, f"Expected a JSON object, got {type(document).__name__}")
    return dict(document)


def parse_mapping(text: str, *, source: str = "<string>") -> Dict[str, Any]:
    return ensure_mapping(parse_json(text, source=source), source=source)


def load_json_file(path: PathLike) -> Any:
    source = os.fspath(path)
    try:
        with open(source, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        _LOGGER.warning("Failed to load document from %s: %s", source, exc)
        raise DocumentReadError(source, f"Failed to read file ({exc})") from exc
    except UnicodeDecodeError as exc:
        _LOGGER.warning("Failed to load document from %s: %s", source, exc)
        raise DocumentParseError(source, f"File is not valid UTF-8 ({exc})") from exc

    try:
        return parse_json(text, source=source)
    except DocumentParseError as exc:
        _LOGGER.warning("Failed to load document from %s: %s", source, exc)
        raise


def load_mapping_file(path: PathLike) -> Dict[str, Any]:
    source = os.fspath(path)
    document = load_json_file(source)
    try:
        return ensure_mapping(document, source=source)
    except NotAMappingError as exc:
        _LOGGER.warning("Failed to load document from %s: %s", source, exc)
        raise


__all__ = [
    "DocumentLoadError",
    "DocumentParseError",
    "DocumentReadError",
    "NotAMappingError",
    "ensure_mapping",
    "load_json_file",
    "load_mapping_file",
    "parse_json",
    "parse_mapping",
]
