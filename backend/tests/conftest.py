"""Shared fixtures for translation tests."""

import pytest

from hinglish.core.translation import StrategyRouter, TranslationPipeline

from tests.helpers import make_gateway


@pytest.fixture
def gateway():
    """Gateway double returning a fixed translation."""
    return make_gateway()


@pytest.fixture
def router(gateway):
    return StrategyRouter(gateway=gateway)


@pytest.fixture
def pipeline(router):
    return TranslationPipeline(router)
