import pytest

from url_sweatshirt import configure
from url_sweatshirt import ConfigurationError
from url_sweatshirt import with_defaults


@pytest.fixture
def user_url():
    return with_defaults(
        {"_host": "api.example.com"}, lambda generate: generate("/users/:id")
    )


def test_adds_the_params_by_default(user_url):
    assert user_url(1) == "//api.example.com/users/1"


def test_params_can_be_overridden(user_url):
    assert user_url(1, {"_host": "test.com"}) == "//test.com/users/1"


def test_params_can_be_removed(user_url):
    assert user_url(1, {"_host": None}) == "/users/1"


def test_route_defaults_win():
    url = with_defaults({"_host": "a.com"}, lambda g: g("/x", {"_host": "b.com"}))
    assert url() == "//b.com/x"


def test_global_defaults_fill_missing_keys():
    def routes(generate):
        return generate("/categories/:name", {"name": "all"})

    url = with_defaults({"name": "global", "lang": "en"}, routes)
    assert url() == "/categories/all?lang=en"
    assert dict(url.defaults) == {"name": "all", "lang": "en"}


def test_callback_called_once_synchronously():
    calls = []

    def callback(generate):
        calls.append(generate)
        return "result"

    assert with_defaults({}, callback) == "result"
    assert len(calls) == 1


def test_defaults_are_not_modified():
    global_defaults = {"_host": "a.com", "lang": "en"}
    local_defaults = {"lang": "de"}
    urls = []

    def callback(generate):
        urls.append(generate("/x", local_defaults))
        urls.append(generate("/y"))

    with_defaults(global_defaults, callback)
    global_defaults["_host"] = "changed.com"

    assert global_defaults == {"_host": "changed.com", "lang": "en"}
    assert local_defaults == {"lang": "de"}
    assert urls[0]() == "//a.com/x?lang=de"
    assert urls[1]() == "//a.com/y?lang=en"


def test_scoped_generate_keeps_working_after_scope():
    generators = with_defaults({"_host": "a.com"}, lambda g: g)
    assert generators("/users/:id")(1) == "//a.com/users/1"


def test_uses_configured_encoder(recording_encoder):
    recording_encoder.result = "encoded"
    url = configure(recording_encoder).with_defaults(
        {"lang": "en"}, lambda g: g("/x")
    )
    assert url() == "/x?encoded"
    assert recording_encoder.calls == [{"lang": "en"}]


def test_invalid_arguments():
    pytest.raises(ConfigurationError, with_defaults, None, lambda g: g)
    pytest.raises(ConfigurationError, with_defaults, {}, None)

    with pytest.raises(ConfigurationError):
        with_defaults({}, lambda g: g("/x", ["not", "a", "mapping"]))
