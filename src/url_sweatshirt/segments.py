"""Splitting templates into literal and placeholder segments.

A template such as ``/users/:user_id/posts/:id`` is split on ``/``,
empty segments are dropped, and every segment starting with
:data:`PLACEHOLDER_MARKER` names a parameter::

    >>> parse_template("/users/:user_id/posts/:id")
    (Segment('users'), Segment(':user_id'), Segment('posts'), Segment(':id'))
"""
from __future__ import annotations

import typing as t

from .exceptions import ConfigurationError

PLACEHOLDER_MARKER = ":"


def is_placeholder(segment: str) -> bool:
    return segment[:1] == PLACEHOLDER_MARKER


def placeholder_name(segment: str) -> str | None:
    """Return the parameter name of a placeholder segment, or ``None``
    if the segment is a literal.
    """
    if is_placeholder(segment):
        return segment[len(PLACEHOLDER_MARKER) :]
    return None


class Segment(t.NamedTuple):
    raw: str

    @property
    def is_placeholder(self) -> bool:
        return is_placeholder(self.raw)

    @property
    def name(self) -> str | None:
        return placeholder_name(self.raw)

    def __repr__(self) -> str:
        return f"Segment({self.raw!r})"


def parse_template(template: str) -> tuple[Segment, ...]:
    """Compile a template into its segments.

    Raises :exc:`ConfigurationError` if a placeholder has no name or if
    the same name is used twice.
    """
    segments = tuple(Segment(raw) for raw in template.split("/") if raw)
    used_names: set[str] = set()

    for segment in segments:
        name = segment.name

        if name is None:
            continue

        if not name:
            raise ConfigurationError(
                f"Placeholder without a name in spec {template!r}"
            )

        if name in used_names:
            raise ConfigurationError(
                f"Placeholder {name!r} used twice in spec {template!r}"
            )

        used_names.add(name)

    return segments
