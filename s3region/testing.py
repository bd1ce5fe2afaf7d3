"""
Helpers for unit tests of code that resolves regions.
"""
from unittest import mock

import attrs

import s3region.config


def config_overrides(**kwargs):
    """
    Override fields of the region config returned by `get_region_config()`,
    as context manager or test function decorator:

        >>> with config_overrides(default_region="nyc3"):
        ...     assert get_default_region() is KnownRegion.DO_NYC3
    """
    config = attrs.evolve(s3region.config.get_region_config(), **kwargs)
    return mock.patch.object(s3region.config, "_config", new=config)
