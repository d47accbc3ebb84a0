"""Query string encoders.

An encoder is any callable taking a mapping of parameters and returning
the encoded query string without the leading ``?``. ``None`` values are
filtered out before an encoder sees them, and an empty mapping has to
produce an empty string.

Options of the built-in encoders can be bound with
:func:`functools.partial`::

    >>> from functools import partial
    >>> sorted_encode = partial(url_encode, sort=True)
    >>> sorted_encode({"b": 2, "a": 1})
    'a=1&b=2'
"""
from __future__ import annotations

import typing as t
from collections.abc import Mapping
from urllib.parse import quote

from ._internal import _to_str

#: Characters left alone when quoting a URL component, matching
#: ``encodeURIComponent``. ``/`` is always quoted.
_component_safe = "!'()*"

QueryEncoder = t.Callable[[t.Mapping[str, t.Any]], str]


def url_quote(
    value: t.Any,
    charset: str = "utf-8",
    errors: str = "strict",
    safe: str = _component_safe,
) -> str:
    """Percent-encode a single URL component. Values that aren't strings
    are converted with :class:`str` first.

    >>> url_quote("a b/c")
    'a%20b%2Fc'
    """
    if isinstance(value, (bytes, bytearray)):
        return quote(bytes(value), safe=safe)

    return quote(_to_str(value), safe=safe, encoding=charset, errors=errors)


def iter_multi_items(
    mapping: t.Mapping[str, t.Any] | t.Iterable[tuple[str, t.Any]]
) -> t.Iterator[tuple[str, t.Any]]:
    """Iterate over the items of a mapping or an iterable of pairs. A
    list or tuple value yields one pair per item.
    """
    if isinstance(mapping, Mapping):
        items: t.Iterable[tuple[str, t.Any]] = mapping.items()
    else:
        items = mapping

    for key, value in items:
        if isinstance(value, (list, tuple)):
            for item in value:
                yield key, item
        else:
            yield key, value


def _sorted_items(
    items: t.Iterable[tuple[str, t.Any]],
    sort: bool,
    key: t.Callable[[tuple[str, t.Any]], t.Any] | None,
) -> t.Iterable[tuple[str, t.Any]]:
    if sort:
        return sorted(items, key=key)
    return items


def url_encode(
    obj: t.Mapping[str, t.Any] | t.Iterable[tuple[str, t.Any]],
    charset: str = "utf-8",
    sort: bool = False,
    key: t.Callable[[tuple[str, t.Any]], t.Any] | None = None,
    separator: str = "&",
) -> str:
    """URL encode a mapping. Keys and values are quoted as components,
    so ``/``, ``&``, ``=`` and spaces are escaped. If a value is ``None``
    it will not appear in the result string.

    >>> url_encode({"e": "f/g", "n": 1, "skip": None})
    'e=f%2Fg&n=1'

    :param obj: The mapping or iterable of pairs to encode.
    :param charset: The charset to encode text with.
    :param sort: Sort the pairs by ``key``.
    :param key: A function used for sorting, see :func:`sorted`.
    :param separator: The separator placed between pairs.
    """
    pairs = []

    for name, value in _sorted_items(iter_multi_items(obj), sort, key):
        if value is None:
            continue

        pairs.append(f"{url_quote(name, charset)}={url_quote(value, charset)}")

    return separator.join(pairs)


def _iter_nested(prefix: str, value: t.Any) -> t.Iterator[tuple[str, t.Any]]:
    if isinstance(value, Mapping):
        for name, item in value.items():
            yield from _iter_nested(f"{prefix}[{_to_str(name)}]", item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            if isinstance(item, (Mapping, list, tuple)):
                yield from _iter_nested(f"{prefix}[{index}]", item)
            else:
                yield from _iter_nested(f"{prefix}[]", item)
    elif value is not None:
        yield prefix, value


def nested_encode(
    obj: t.Mapping[str, t.Any],
    charset: str = "utf-8",
    sort: bool = False,
    key: t.Callable[[tuple[str, t.Any]], t.Any] | None = None,
    separator: str = "&",
) -> str:
    """URL encode a mapping that may contain nested mappings and lists,
    using the bracket notation understood by Rack, PHP and jQuery's
    ``$.param``.

    >>> nested_encode({"a": 1, "b": {"c": 2, "d": [3, 4]}})
    'a=1&b%5Bc%5D=2&b%5Bd%5D%5B%5D=3&b%5Bd%5D%5B%5D=4'

    Sorting applies to the top level names only.
    """
    pairs = []

    for name, value in _sorted_items(obj.items(), sort, key):
        for nested_name, item in _iter_nested(_to_str(name), value):
            pairs.append(
                f"{url_quote(nested_name, charset)}={url_quote(item, charset)}"
            )

    return separator.join(pairs)
