from urllib.parse import quote

import hypothesis
import pytest
from hypothesis.strategies import characters
from hypothesis.strategies import data
from hypothesis.strategies import dictionaries
from hypothesis.strategies import from_regex
from hypothesis.strategies import integers
from hypothesis.strategies import lists
from hypothesis.strategies import text

from url_sweatshirt import ExtraParameters
from url_sweatshirt import generate
from url_sweatshirt import MissingParameters

name = from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True)
names = lists(name, min_size=1, max_size=5, unique=True)
values = text(characters(exclude_categories=("Cs",)))


def _template(placeholders):
    return "/" + "/".join(f":{n}" for n in placeholders)


def _path(path_values):
    return "/" + "/".join(quote(v, safe="!'()*") for v in path_values)


@hypothesis.given(names, data())
def test_positional_values_are_substituted(placeholders, draw):
    size = len(placeholders)
    path_values = draw.draw(lists(values, min_size=size, max_size=size))
    rv = generate(_template(placeholders))(*path_values)
    assert rv == _path(path_values)
    assert rv.count("/") == size


@hypothesis.given(dictionaries(name, values, min_size=1, max_size=5))
def test_all_defaults_idempotent(defaults):
    url = generate(_template(defaults), defaults)
    assert url() == url() == _path(defaults.values())


@hypothesis.given(names, data())
def test_named_overrides_positional(placeholders, draw):
    size = len(placeholders)
    positional = draw.draw(lists(values, min_size=size, max_size=size))
    named = draw.draw(lists(values, min_size=size, max_size=size))
    url = generate(_template(placeholders))
    assert url(*positional, dict(zip(placeholders, named))) == _path(named)


@hypothesis.given(names)
def test_missing_enumerates_every_placeholder(placeholders):
    with pytest.raises(MissingParameters) as excinfo:
        generate(_template(placeholders))()

    assert excinfo.value.missing == [f":{n}" for n in placeholders]


@hypothesis.given(names, lists(integers(), min_size=1))
def test_extra_enumerates_every_value(placeholders, extra):
    positional = list(range(len(placeholders))) + extra

    with pytest.raises(ExtraParameters) as excinfo:
        generate(_template(placeholders))(*positional)

    assert excinfo.value.extra == extra
