"""URL generators and default scopes.

A generator is created once per template and called any number of
times::

    >>> user_post_url = generate("/users/:user_id/posts/:id")
    >>> user_post_url(1, 2)
    '/users/1/posts/2'
    >>> user_post_url(1, id=2, page=3)
    '/users/1/posts/2?page=3'
    >>> user_post_url(1, 2, _host="api.example.com", _protocol="https")
    'https://api.example.com/users/1/posts/2'
"""
from __future__ import annotations

import typing as t
import warnings
from collections.abc import Mapping
from types import MappingProxyType

from ._internal import _is_named_params
from .assembler import assemble
from .encoders import QueryEncoder
from .encoders import url_encode
from .exceptions import ConfigurationError
from .exceptions import InvalidArguments
from .segments import parse_template

_T = t.TypeVar("_T")


def _check_defaults(defaults: t.Any) -> dict[str, t.Any]:
    if defaults is None:
        return {}

    if not isinstance(defaults, Mapping):
        raise ConfigurationError("Must provide a mapping for defaults")

    return dict(defaults)


class URLGenerator:
    """Builds URLs for a single template. Calling it binds the given
    values to the template's placeholders and returns the URL.

    Positional arguments fill the placeholders in template order. Any
    trailing dicts and the keyword arguments are named parameters,
    merged left to right. Named parameters that are not placeholders
    end up in the query string, unless their value is ``None``. There
    are a few special named parameters:

    * ``_host``: the host to generate a URL for. With a host the URL is
      protocol relative, ``//host/path``.
    * ``_protocol``: the scheme of the URL. It requires a host.
    * ``_anchor``: a fragment appended as given, without quoting.

    >>> category_url = URLGenerator("/categories/:name", {"name": "all"})
    >>> category_url()
    '/categories/all'
    >>> category_url("sports")
    '/categories/sports'
    >>> category_url(name=None)
    Traceback (most recent call last):
      ...
    url_sweatshirt.exceptions.MissingParameters: Missing [:name] for spec '/categories/:name'

    :param template: The template, for example ``/users/:id``.
    :param defaults: Parameters pre-applied to every call. They can
        still be overridden by the caller, or removed with ``None``.
    :param encoder: The function used to encode the query string.
    """

    def __init__(
        self,
        template: str,
        defaults: t.Mapping[str, t.Any] | None = None,
        encoder: QueryEncoder = url_encode,
    ) -> None:
        if not isinstance(template, str) or not template:
            raise ConfigurationError("Must provide a string as a URL spec")

        if not callable(encoder):
            raise ConfigurationError("The query encoder must be callable")

        self.template = template
        self.segments = parse_template(template)
        self._defaults = _check_defaults(defaults)
        self.encoder = encoder

    @property
    def defaults(self) -> t.Mapping[str, t.Any]:
        return MappingProxyType(self._defaults)

    @property
    def placeholders(self) -> tuple[str, ...]:
        """The names of the placeholders, in template order."""
        return tuple(s.name for s in self.segments if s.name is not None)

    def __call__(self, /, *args: t.Any, **kwargs: t.Any) -> str:
        positional = list(args)
        sources: list[t.Mapping[str, t.Any]] = []

        while positional and _is_named_params(positional[-1]):
            sources.insert(0, positional.pop())

        for value in positional:
            if _is_named_params(value):
                raise InvalidArguments(
                    "Named parameters must come after the positional"
                    f" parameters for spec {self.template!r}"
                )

        named: dict[str, t.Any] = {}

        for source in sources:
            named.update(source)

        named.update(kwargs)
        return assemble(
            self.template,
            self._defaults,
            positional,
            named,
            self.encoder,
            self.segments,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.template!r}>"


class Generators:
    """Creates generators that share a query encoder. The module level
    :func:`generate` and :func:`with_defaults` belong to an instance
    using :func:`~url_sweatshirt.encoders.url_encode`::

        from url_sweatshirt import configure
        from url_sweatshirt.encoders import nested_encode

        nested = configure(nested_encode)
        home_url = nested.generate("/")
        home_url({"a": 1, "b": {"c": 2}})  # '/?a=1&b%5Bc%5D=2'

    :param encoder: The function used to encode query strings.
    """

    def __init__(self, encoder: QueryEncoder = url_encode) -> None:
        if not callable(encoder):
            raise ConfigurationError("The query encoder must be callable")

        self.encoder = encoder

    def generate(
        self, template: str, defaults: t.Mapping[str, t.Any] | None = None
    ) -> URLGenerator:
        """Create a :class:`URLGenerator` for ``template``.

        :param template: A path with optional placeholders, for example
            ``/users/:id``.
        :param defaults: Parameters pre-applied to the generator.
        """
        return URLGenerator(template, defaults, self.encoder)

    def with_defaults(
        self,
        global_defaults: t.Mapping[str, t.Any],
        callback: t.Callable[[t.Callable[..., URLGenerator]], _T],
    ) -> _T:
        """Call ``callback`` with a version of :meth:`generate` that
        applies ``global_defaults`` to every generator it creates. A
        default given for the route itself wins over the global one.
        The callback is called once, immediately, and its return value
        is returned.

        >>> def routes(generate):
        ...     return generate("/users/:id"), generate("/x", {"_host": "b.com"})
        >>> user_url, x_url = with_defaults({"_host": "a.com"}, routes)
        >>> user_url(1)
        '//a.com/users/1'
        >>> user_url(1, _host=None)
        '/users/1'
        >>> x_url()
        '//b.com/x'
        """
        if not isinstance(global_defaults, Mapping):
            raise ConfigurationError("Must provide a mapping for global defaults")

        global_defaults = dict(global_defaults)

        if not callable(callback):
            raise ConfigurationError("Must provide a callable callback")

        def generate(
            template: str, defaults: t.Mapping[str, t.Any] | None = None
        ) -> URLGenerator:
            local_defaults = _check_defaults(defaults)

            for key, value in global_defaults.items():
                local_defaults.setdefault(key, value)

            return self.generate(template, local_defaults)

        return callback(generate)

    def wrap(
        self, template: str, defaults: t.Mapping[str, t.Any] | None = None
    ) -> URLGenerator:
        """Create a :class:`URLGenerator`.

        .. deprecated:: 1.0
            Use :meth:`generate` instead.
        """
        warnings.warn(
            "'wrap' is deprecated and will be removed in a future version."
            " Use 'generate' instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.generate(template, defaults)
