"""Shared test fixtures."""

from datetime import datetime

import pytest

from pyjde import JdeDateTimeConverter

FROZEN_NOW = datetime(2024, 3, 5, 7, 8, 9, 123456)


@pytest.fixture
def frozen_now():
    return FROZEN_NOW


@pytest.fixture
def frozen_converter():
    return JdeDateTimeConverter(clock=lambda: FROZEN_NOW)
