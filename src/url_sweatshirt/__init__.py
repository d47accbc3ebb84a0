"""
url_sweatshirt
~~~~~~~~~~~~~~

Generate URLs from path templates such as ``/users/:id``, with
positional and named parameters, defaults, query strings, fragments
and hosts.

:license: BSD-3-Clause
"""
from .encoders import nested_encode
from .encoders import url_encode
from .exceptions import BuildError
from .exceptions import ConfigurationError
from .exceptions import ExtraParameters
from .exceptions import InvalidArguments
from .exceptions import MissingParameters
from .exceptions import ProtocolWithoutHost
from .exceptions import URLGenerationError
from .generator import Generators
from .generator import URLGenerator


def configure(encoder=url_encode):
    """Return a :class:`Generators` object whose ``generate`` and
    ``with_defaults`` use ``encoder`` for query strings.
    """
    return Generators(encoder)


_default = configure()
generate = _default.generate
with_defaults = _default.with_defaults
wrap = _default.wrap

__version__ = "1.0.0"
