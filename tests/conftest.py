import pytest

from url_sweatshirt import generate


@pytest.fixture
def user_post_url():
    return generate("/users/:user_id/posts/:id")


@pytest.fixture
def category_url():
    return generate("/categories/:name", {"name": "all"})


class RecordingEncoder:
    """Query encoder that remembers the mappings it was given."""

    def __init__(self, result=""):
        self.calls = []
        self.result = result

    def __call__(self, params):
        self.calls.append(dict(params))
        return self.result


@pytest.fixture
def recording_encoder():
    return RecordingEncoder()
