"""Binding values to a template and assembling the final URL."""
from __future__ import annotations

import typing as t
from collections.abc import Mapping

from ._internal import _log
from ._internal import _to_str
from .encoders import QueryEncoder
from .encoders import url_quote
from .exceptions import ConfigurationError
from .exceptions import ExtraParameters
from .exceptions import MissingParameters
from .exceptions import ProtocolWithoutHost
from .params import is_absent
from .params import ParameterSources
from .segments import parse_template
from .segments import Segment


def _is_given(value: t.Any) -> bool:
    return not is_absent(value) and _to_str(value) != ""


def _build_prefix(protocol: t.Any, host: t.Any) -> str:
    rv = f"{_to_str(protocol)}:" if _is_given(protocol) else ""

    if _is_given(host):
        return f"{rv}//{_to_str(host)}/"

    return f"{rv}/"


def assemble(
    template: str,
    defaults: t.Mapping[str, t.Any],
    positional: t.Sequence[t.Any],
    named: t.Mapping[str, t.Any],
    encoder: QueryEncoder,
    segments: t.Sequence[Segment] | None = None,
) -> str:
    """Build a URL for ``template``.

    Placeholders are filled from ``defaults``, then ``positional`` in
    template order, then ``named``, later sources overriding earlier
    ones. Whatever defaults and named values are left over become the
    query string. ``_protocol``, ``_host`` and ``_anchor`` control the
    scheme, host and fragment of the URL.

    :param template: The template, for example ``/users/:id``.
    :param defaults: Values pre-applied to the generator.
    :param positional: Values for the placeholders, left to right.
    :param named: Values given by name. They may include the special
        parameters and extra query parameters.
    :param encoder: Turns the leftover parameters into a query string.
    :param segments: The compiled template, if the caller already has it.

    :raise MissingParameters: If a placeholder has no value.
    :raise ExtraParameters: If positional values are left over.
    :raise ProtocolWithoutHost: If a protocol is given without a host.
    """
    if not isinstance(template, str):
        raise ConfigurationError("Must provide a string as a URL spec")

    if not isinstance(defaults, Mapping):
        raise ConfigurationError("Must provide a mapping for defaults")

    if segments is None:
        segments = parse_template(template)

    sources = ParameterSources(defaults, positional, named)
    protocol = sources.resolve("_protocol", use_positional=False)
    host = sources.resolve("_host", use_positional=False)

    if _is_given(protocol) and not _is_given(host):
        _log("debug", "Protocol %r given without a host for %r", protocol, template)
        raise ProtocolWithoutHost(template, protocol)

    parts = []
    missing = []

    for segment in segments:
        name = segment.name

        if name is None:
            parts.append(segment.raw)
            continue

        value = sources.resolve(name)

        if is_absent(value):
            missing.append(segment.raw)
            parts.append("")
        else:
            parts.append(url_quote(value))

    extra = sources.remaining_positional()

    if missing:
        _log("debug", "Missing %s for %r", missing, template)
        raise MissingParameters(template, missing, extra)

    if extra:
        _log("debug", "Extra params %r for %r", extra, template)
        raise ExtraParameters(template, extra)

    query = encoder(sources.leftovers())
    anchor = sources.resolve("_anchor", use_positional=False)
    rv = _build_prefix(protocol, host) + "/".join(parts)

    if query:
        rv = f"{rv}?{query}"

    if _is_given(anchor):
        rv = f"{rv}#{_to_str(anchor)}"

    return rv
