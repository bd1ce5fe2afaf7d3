"""
Region resolution with configured object storage providers
taking precedence over the built-in region table.
"""
import logging
from typing import Dict, Optional, Tuple

from s3region.config import ProviderDetails, RegionConfig, get_region_config
from s3region.region import CustomRegion, Region, parse_region

_log = logging.getLogger(__name__)


def find_provider(name: str, providers: Dict[str, ProviderDetails]) -> Optional[Tuple[str, str]]:
    """
    Find the configured provider serving a region name (case-insensitive).

    :return: tuple of provider name and endpoint (with `{region}` filled in),
        or None if no provider lists this region.
    """
    name_lc = name.lower()
    for provider_name, details in providers.items():
        if "regions" not in details or "endpoint" not in details:
            _log.warning(f"Ignoring provider {provider_name!r} without 'regions' or 'endpoint': {details!r}")
            continue
        if any(r.lower() == name_lc for r in details["regions"]):
            return provider_name, details["endpoint"].replace("{region}", name)
    return None


def resolve_region(name: str, config: Optional[RegionConfig] = None) -> Region:
    """
    Resolve a region name: a region of a configured provider becomes a `CustomRegion`
    on that provider's endpoint, anything else is handled by `parse_region`.
    """
    config = config or get_region_config()
    found = find_provider(name, config.providers)
    if found:
        provider_name, endpoint = found
        region = CustomRegion(endpoint=endpoint)
        _log.debug(f"Resolved region {name!r} to provider {provider_name!r}: {region.origin}")
    else:
        region = parse_region(name)
        _log.debug(f"Resolved region {name!r} to {region!r}")
    return region


def get_default_region(config: Optional[RegionConfig] = None) -> Region:
    config = config or get_region_config()
    return resolve_region(config.default_region, config=config)
