"""Exceptions raised while building URL generators or URLs.

Construction problems are reported by :exc:`ConfigurationError` as soon
as a generator is created. Problems binding values to a template are
reported by a subclass of :exc:`BuildError` when the generator is
called; no partial URL is ever returned.
"""
from __future__ import annotations

import typing as t


class URLGenerationError(Exception):
    """Base class for all errors raised by this library."""


class ConfigurationError(URLGenerationError, TypeError):
    """Raised when a generator is created with an invalid template,
    invalid defaults, or a non-callable encoder or callback.
    """


class InvalidArguments(URLGenerationError, TypeError):
    """Raised when a generator is called with a mapping of named
    parameters in a position where a path value is expected.
    """


class BuildError(URLGenerationError, LookupError):
    """Raised if the values given to a generator cannot be bound to its
    template.

    :param message: The error message.
    :param template: The template of the generator that was called.
    :param missing: Every unresolved placeholder, as ``:name``, in
        template order.
    :param extra: Every unconsumed positional value, in the order they
        were given.
    """

    def __init__(
        self,
        message: str,
        template: str,
        missing: t.Sequence[str] = (),
        extra: t.Sequence[t.Any] = (),
    ) -> None:
        super().__init__(message)
        self.template = template
        self.missing = list(missing)
        self.extra = list(extra)

    def __str__(self) -> str:
        return self.args[0]


class MissingParameters(BuildError):
    """One or more placeholders did not resolve to a value."""

    def __init__(
        self, template: str, missing: t.Sequence[str], extra: t.Sequence[t.Any] = ()
    ) -> None:
        super().__init__(
            f"Missing [{', '.join(missing)}] for spec {template!r}",
            template,
            missing,
            extra,
        )


class ExtraParameters(BuildError):
    """More positional values were given than the template has
    placeholders to take them.
    """

    def __init__(self, template: str, extra: t.Sequence[t.Any]) -> None:
        values = ", ".join(str(value) for value in extra)
        super().__init__(
            f"Extra params [{values}] for spec {template!r}", template, (), extra
        )


class ProtocolWithoutHost(BuildError, ValueError):
    """A ``_protocol`` was given but no ``_host`` to go with it."""

    def __init__(self, template: str, protocol: t.Any) -> None:
        super().__init__(
            f"Can't provide a protocol with no host (protocol {protocol!r},"
            f" spec {template!r})",
            template,
        )
        self.protocol = protocol
