"""JSON encode/decode helpers with typed decoding into a target class."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Callable, TypeVar

from objtasks.codec.errors import ParseError, SerializationError
from objtasks.config import DEFAULT_CODEC_CONFIG, CodecConfig

__all__ = ["encode", "decode", "decode_structure"]

log = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_default(obj: object) -> Any:
    """Fallback for objects the json module does not know about."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        # Shallow mapping: nested values go back through the encoder so
        # cycles are still detected.
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode(value: Any, config: CodecConfig | None = None) -> str:
    """Serialise *value* to JSON text.

    Mapping keys keep insertion order unless ``config.sort_keys`` is set.
    Dataclass instances are written as the mapping of their fields.
    ``int``, ``float``, ``bool`` and ``None`` keys are written as strings
    (``{1: "a"}`` becomes ``{"1":"a"}``), so they come back as ``str`` keys.

    Raises:
        SerializationError: for functions, arbitrary objects, sets, other
            non-string keys, cyclic references, non-finite floats and
            nesting too deep to encode.
    """
    cfg = config or DEFAULT_CODEC_CONFIG
    separators = (",", ":") if cfg.indent is None else (",", ": ")
    try:
        return json.dumps(
            value,
            indent=cfg.indent,
            separators=separators,
            sort_keys=cfg.sort_keys,
            ensure_ascii=cfg.ensure_ascii,
            allow_nan=False,
            default=_encode_default,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode value: {exc}", cause=exc) from exc
    except RecursionError as exc:
        raise SerializationError("Value nested too deeply", cause=exc) from exc


def _reject_constant(name: str) -> Any:
    raise ParseError(f"Invalid JSON constant: {name}")


def decode_structure(text: str | bytes | bytearray) -> Any:
    """Parse JSON text into plain Python data.

    Raises:
        ParseError: if *text* is not well-formed JSON.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise ParseError(f"Expected JSON text, got {type(text).__name__}")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"{exc.msg} at line {exc.lineno} column {exc.colno}",
            line=exc.lineno,
            column=exc.colno,
            position=exc.pos,
            cause=exc,
        ) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid UTF-8 input: {exc}", cause=exc) from exc
    except RecursionError as exc:
        raise ParseError("Input nested too deeply", cause=exc) from exc


def _adapt(target: Callable[..., T], data: Any) -> T:
    from_dict = getattr(target, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    if isinstance(data, dict):
        if dataclasses.is_dataclass(target):
            names = {f.name for f in dataclasses.fields(target) if f.init}
            return target(**{k: v for k, v in data.items() if k in names})
        return target(**data)
    return target(data)


def decode(target: Callable[..., T], text: str | bytes | bytearray) -> T:
    """Parse *text* and adapt the result into an instance of *target*.

    The target decides how to build itself: a ``from_dict`` classmethod
    wins, then dataclass init fields, then plain keyword arguments. The
    parsed shape is not checked against the target.
    """
    data = decode_structure(text)
    log.debug("Decoding %s into %s", type(data).__name__, getattr(target, "__name__", target))
    return _adapt(target, data)
