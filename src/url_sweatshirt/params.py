"""Resolving placeholder values from defaults, positional and named
parameters.
"""
from __future__ import annotations

import typing as t
from collections import deque

from ._internal import _missing

#: Named parameters that control the host, protocol and fragment of a
#: URL. They are never path segments and never part of the query.
SPECIAL_PARAMETERS = frozenset(("_host", "_protocol", "_anchor"))


class ParameterSources:
    """The three sources a call draws placeholder values from.

    The callers' mappings are copied, they are never modified. Names are
    not deleted as they are resolved, instead the resolved names are
    recorded and :meth:`leftovers` subtracts them afterwards.

    :param defaults: Values pre-applied to the generator.
    :param positional: Values consumed left to right, one per
        placeholder.
    :param named: Values given by name for this call.
    """

    def __init__(
        self,
        defaults: t.Mapping[str, t.Any],
        positional: t.Iterable[t.Any],
        named: t.Mapping[str, t.Any],
    ) -> None:
        self.defaults = dict(defaults)
        self.positional = deque(positional)
        self.named = dict(named)
        self.consumed: set[str] = set()

    def resolve(self, name: str, use_positional: bool = True) -> t.Any:
        """Resolve the value of ``name``. Precedence from lowest to
        highest is defaults, the next positional value, named values.
        ``None`` at any stage overrides the earlier sources.

        Returns ``_missing`` if none of the sources has a value.
        """
        value = _missing
        self.consumed.add(name)

        if name in self.defaults:
            value = self.defaults[name]

        if use_positional and self.positional:
            value = self.positional.popleft()

        if name in self.named:
            value = self.named[name]

        return value

    def remaining_positional(self) -> list[t.Any]:
        return list(self.positional)

    def leftovers(self) -> dict[str, t.Any]:
        """Defaults and named values not used by any placeholder, named
        values winning on collisions. ``None`` values and special
        parameters are left out.
        """
        merged = dict(self.defaults)
        merged.update(self.named)
        return {
            key: value
            for key, value in merged.items()
            if value is not None
            and key not in self.consumed
            and key not in SPECIAL_PARAMETERS
        }


def is_absent(value: t.Any) -> bool:
    return value is _missing or value is None
