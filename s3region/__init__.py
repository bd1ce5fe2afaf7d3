from s3region._version import __version__
from s3region.region import KNOWN_REGION_NAMES, CustomRegion, KnownRegion, Region, parse_region

__all__ = [
    "__version__",
    "KNOWN_REGION_NAMES",
    "CustomRegion",
    "KnownRegion",
    "Region",
    "parse_region",
]
