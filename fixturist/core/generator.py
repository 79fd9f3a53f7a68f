from __future__ import annotations

from faker import Faker
from loguru import logger


def normalize_locale(language: str) -> str:
    """
    Converts a language tag to the form Faker expects.

    `en-US` and `en_US` both become `en_US`.
    """
    return language.strip().replace("-", "_")


def create_generator(language: str, seed: int | None = None) -> Faker:
    """
    Creates the Faker instance shared by every builder of a registry.

    Parameters:
        language (str): Locale, hyphenated or underscored.
        seed (int | None): When given, the instance is seeded so generated
                           values repeat across runs.

    Returns:
        Faker: A locale bound Faker instance.
    """
    locale = normalize_locale(language)
    generator = Faker(locale)
    if seed is not None:
        generator.seed_instance(seed)
    logger.debug(f"Created Faker generator for locale '{locale}'.")
    return generator
