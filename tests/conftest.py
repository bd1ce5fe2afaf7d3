import os
from typing import Optional

import pytest

import s3region.config
from s3region.config import RegionConfig
from s3region.testing import config_overrides

from .data import get_path


def pytest_configure(config):
    # Load test RegionConfig by default
    os.environ[s3region.config.S3REGION_CONFIG] = str(get_path("region_config.py"))


@pytest.fixture
def region_config_overrides() -> Optional[dict]:
    # No overrides by default
    return None


@pytest.fixture
def region_config(region_config_overrides) -> RegionConfig:
    """
    Test RegionConfig, optionally with some fields overridden
    by parameterizing the `region_config_overrides` fixture.
    """
    if region_config_overrides is None:
        yield s3region.config.get_region_config()
    else:
        with config_overrides(**region_config_overrides):
            yield s3region.config.get_region_config()


@pytest.fixture
def region_config_flush():
    """Flush the lazy loaded region config at start and end of test."""
    s3region.config.flush_region_config()
    yield
    s3region.config.flush_region_config()
