import os

from fixturist.conf.global_settings import FixturistSettings

DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite:///fixturist_test.sqlite")


class TestSettings(FixturistSettings):
    language: str = "en_US"
    model_adapter: str = "tests.support.InMemoryAdapter"
