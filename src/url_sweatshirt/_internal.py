from __future__ import annotations

import logging
import typing as t
from types import MappingProxyType

_logger: logging.Logger | None = None


class _Missing:
    def __repr__(self) -> str:
        return "no value"

    def __reduce__(self) -> str:
        return "_missing"


_missing = _Missing()


def _has_level_handler(logger: logging.Logger) -> bool:
    """Check if there is a handler in the logging chain that will handle
    the given logger's effective level.
    """
    level = logger.getEffectiveLevel()
    current: logging.Logger | None = logger

    while current:
        if any(handler.level <= level for handler in current.handlers):
            return True

        if not current.propagate:
            break

        current = current.parent

    return False


def _log(type: str, message: str, *args: t.Any, **kwargs: t.Any) -> None:
    """Log a message to the 'url_sweatshirt' logger.

    The logger is created the first time it is needed. If there is no
    level set, it is set to :data:`logging.INFO`. If there is no handler
    for the logger's effective level, a :class:`logging.StreamHandler`
    is added.
    """
    global _logger

    if _logger is None:
        _logger = logging.getLogger("url_sweatshirt")

        if _logger.level == logging.NOTSET:
            _logger.setLevel(logging.INFO)

        if not _has_level_handler(_logger):
            _logger.addHandler(logging.StreamHandler())

    getattr(_logger, type)(message.rstrip(), *args, **kwargs)


def _is_named_params(value: t.Any) -> bool:
    """Is the given value a source of named parameters? Only plain
    records count: dicts (including subclasses such as
    :class:`~collections.OrderedDict`) and read-only dict views. Other
    mappings are user defined values and are used as path values.
    """
    return isinstance(value, (dict, MappingProxyType))


def _to_str(value: t.Any, charset: str = "utf-8", errors: str = "strict") -> str:
    if isinstance(value, str):
        return value

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode(charset, errors)

    return str(value)
