"""
Resolution of object storage region identifiers
to the scheme, host and display name needed to reach them.

Any string is accepted as region identifier:

    >>> parse_region("eu-west-1")
    <KnownRegion.EU_WEST_1: ...>
    >>> parse_region("http://minio.local:9000").host
    'minio.local:9000'

Unrecognized values are not rejected but kept verbatim as `CustomRegion`,
it is up to the caller to provide a reachable endpoint in that case.
"""
import enum
from typing import Dict, Tuple, Union

import attrs

# Providers
AWS = "aws"
DIGITALOCEAN = "digitalocean"
CUSTOM = "custom"

DEFAULT_SCHEME = "https"
SCHEME_SEPARATOR = "://"


class KnownRegion(enum.Enum):
    """Pre-tabulated object storage region, reachable over https on its default endpoint."""

    # us-east-1 has no "s3-us-east-1.amazonaws.com" DNS record
    US_EAST_1 = ("us-east-1", "s3.amazonaws.com", AWS)
    US_EAST_2 = ("us-east-2", "s3-us-east-2.amazonaws.com", AWS)
    US_WEST_1 = ("us-west-1", "s3-us-west-1.amazonaws.com", AWS)
    US_WEST_2 = ("us-west-2", "s3-us-west-2.amazonaws.com", AWS)
    CA_CENTRAL_1 = ("ca-central-1", "s3-ca-central-1.amazonaws.com", AWS)
    AP_SOUTH_1 = ("ap-south-1", "s3-ap-south-1.amazonaws.com", AWS)
    AP_NORTHEAST_1 = ("ap-northeast-1", "s3-ap-northeast-1.amazonaws.com", AWS)
    AP_NORTHEAST_2 = ("ap-northeast-2", "s3-ap-northeast-2.amazonaws.com", AWS)
    AP_SOUTHEAST_1 = ("ap-southeast-1", "s3-ap-southeast-1.amazonaws.com", AWS)
    AP_SOUTHEAST_2 = ("ap-southeast-2", "s3-ap-southeast-2.amazonaws.com", AWS)
    EU_CENTRAL_1 = ("eu-central-1", "s3-eu-central-1.amazonaws.com", AWS)
    EU_WEST_1 = ("eu-west-1", "s3-eu-west-1.amazonaws.com", AWS)
    EU_WEST_2 = ("eu-west-2", "s3-eu-west-2.amazonaws.com", AWS)
    EU_WEST_3 = ("eu-west-3", "s3-eu-west-3.amazonaws.com", AWS)
    SA_EAST_1 = ("sa-east-1", "s3-sa-east-1.amazonaws.com", AWS)
    DO_NYC3 = ("nyc3", "nyc3.digitaloceanspaces.com", DIGITALOCEAN)
    DO_AMS3 = ("ams3", "ams3.digitaloceanspaces.com", DIGITALOCEAN)
    DO_SGP1 = ("sgp1", "sgp1.digitaloceanspaces.com", DIGITALOCEAN)

    @property
    def region_name(self) -> str:
        return self.value[0]

    @property
    def endpoint(self) -> str:
        return self.value[1]

    @property
    def provider(self) -> str:
        return self.value[2]

    def __str__(self) -> str:
        return self.region_name

    @property
    def display(self) -> str:
        return self.region_name

    @property
    def scheme(self) -> str:
        return DEFAULT_SCHEME

    @property
    def host(self) -> str:
        return self.endpoint

    @property
    def origin(self) -> str:
        return f"{self.scheme}{SCHEME_SEPARATOR}{self.host}"


@attrs.frozen
class CustomRegion:
    """
    Region outside of the known table, e.g. a self-hosted S3-compatible service.

    The endpoint is stored as given: a bare host ("host.example.com:9000")
    or an origin including scheme ("http://host.example.com:9000").
    Scheme and host are derived from it on access.
    """

    endpoint: str

    def __str__(self) -> str:
        return CUSTOM

    @property
    def display(self) -> str:
        return CUSTOM

    @property
    def provider(self) -> str:
        return CUSTOM

    @property
    def scheme(self) -> str:
        scheme, separator, _ = self.endpoint.partition(SCHEME_SEPARATOR)
        return scheme if separator else DEFAULT_SCHEME

    @property
    def host(self) -> str:
        _, separator, host = self.endpoint.partition(SCHEME_SEPARATOR)
        return host if separator else self.endpoint

    @property
    def origin(self) -> str:
        return f"{self.scheme}{SCHEME_SEPARATOR}{self.host}"


Region = Union[KnownRegion, CustomRegion]

_KNOWN_BY_NAME: Dict[str, KnownRegion] = {r.region_name: r for r in KnownRegion}

KNOWN_REGION_NAMES: Tuple[str, ...] = tuple(_KNOWN_BY_NAME.keys())


def parse_region(value: str) -> Region:
    """
    Parse a region identifier (case-sensitive).

    Never fails: a value that is not a known region name
    is returned as `CustomRegion` with the original value.
    """
    try:
        return _KNOWN_BY_NAME[value]
    except KeyError:
        return CustomRegion(endpoint=value)
