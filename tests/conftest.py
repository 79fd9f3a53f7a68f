import os

import pytest

os.environ.setdefault("FIXTURIST_SETTINGS_MODULE", "tests.settings.TestSettings")

from fixturist import BlueprintRegistry  # noqa: E402
from tests.support import InMemoryAdapter, Post, User  # noqa: E402


@pytest.fixture(scope="module")
def anyio_backend():
    return ("asyncio", {"debug": True})


@pytest.fixture
def adapter():
    return InMemoryAdapter(User, Post)


@pytest.fixture
def factory(adapter):
    return BlueprintRegistry(adapter=adapter, language="en_US", autoload=False)
