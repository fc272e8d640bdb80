import pytest

from tests.helpers import FakeGitHub


@pytest.fixture
def fake_github():
    """Fresh fake GitHub with no routes; unknown URLs answer 404."""
    return FakeGitHub()
