"""
Region resolution config: the default region and custom object storage providers.

Operators point env var `S3REGION_CONFIG` to a Python file defining a `RegionConfig` as `config`:

    from s3region.config import RegionConfig

    config = RegionConfig(
        default_region="waw3-1",
        providers={"cf": {"regions": ["waw3-1", "waw4-1"], "endpoint": "https://s3.{region}.cloudferro.com"}},
    )

Without that env var, a `RegionConfig` with default values is used.
"""
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, TypedDict, Union

import attrs

_log = logging.getLogger(__name__)

# Environment variable to point to config file
S3REGION_CONFIG = "S3REGION_CONFIG"


class ConfigException(ValueError):
    pass


class ProviderDetails(TypedDict):
    """
    Region names served by an object storage provider, and its endpoint.
    A `{region}` placeholder in the endpoint is filled in with the requested region name.
    The endpoint may include a scheme ("http://..."), "https" is assumed otherwise.
    """

    regions: List[str]
    endpoint: str


def _default_region_from_env() -> str:
    return os.environ.get("AWS_REGION") or "us-east-1"


@attrs.frozen(kw_only=True)
class RegionConfig:
    # identifier for this config
    id: Optional[str] = None

    # Region to use when none is given explicitly
    default_region: str = attrs.field(factory=_default_region_from_env)

    # Custom providers by name, these take precedence over the built-in region table
    providers: Dict[str, ProviderDetails] = attrs.Factory(dict)


def load_region_config(path: Union[str, Path]) -> RegionConfig:
    """Load the `config` variable from a Python config file."""
    path = Path(path)
    namespace = {"__file__": str(path)}
    exec(compile(path.read_bytes(), path, "exec"), namespace)
    config = namespace.get("config")
    if not isinstance(config, RegionConfig):
        raise ConfigException(f"Expected RegionConfig as 'config' in {path}, but got {type(config).__name__}")
    return config


_config: Optional[RegionConfig] = None


def get_region_config(force_reload: bool = False) -> RegionConfig:
    """Lazy load the region config."""
    global _config
    if _config is None or force_reload:
        path = os.environ.get(S3REGION_CONFIG)
        _config = load_region_config(path) if path else RegionConfig()
        _log.info(f"Loaded region config {_config.id!r} from {path or 'defaults'}")
    return _config


def flush_region_config():
    global _config
    _config = None
