from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field

from ..models import PaginateConfig

DEFAULT_CONFIG_PATH = Path("paginate.config.yaml")

POLICY_FIELDS = (
    "selectable_cols",
    "where",
    "orderable_cols",
    "default_page_size",
    "max_page_size",
    "disallow_search_term",
)


class EndpointConfig(BaseModel):
    """A named endpoint: the table it reads and the policy guarding it."""

    name: str
    table: str = Field(..., description="Table (or view) the endpoint queries")
    policy: PaginateConfig


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load endpoint configuration from YAML file.

    Args:
        path: Optional path to the config file. Defaults to paginate.config.yaml

    Returns:
        Dictionary with the raw configuration

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the file is not a valid endpoints config
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")
    if "version" not in config:
        raise ValueError("Config must have 'version' field")
    if "endpoints" not in config:
        raise ValueError("Config must have 'endpoints' field")

    endpoints = config["endpoints"]
    if not isinstance(endpoints, dict):
        raise ValueError("Config 'endpoints' must be a dictionary")
    for name, endpoint in endpoints.items():
        if not isinstance(endpoint, dict):
            raise ValueError(f"Endpoint '{name}' must be a dictionary")
        if "table" not in endpoint:
            raise ValueError(f"Endpoint '{name}' missing required field: table")
        unknown = set(endpoint) - set(POLICY_FIELDS) - {"table"}
        if unknown:
            raise ValueError(f"Endpoint '{name}' has unknown fields: {', '.join(sorted(unknown))}")

    return config


def load_endpoints(config: Dict[str, Any] | None = None) -> Dict[str, EndpointConfig]:
    """
    Build EndpointConfig models for every configured endpoint.

    Args:
        config: Optional raw config dict. If None, loads from default path.
    """
    if config is None:
        config = load_config()

    endpoints: Dict[str, EndpointConfig] = {}
    for name, endpoint in (config.get("endpoints") or {}).items():
        policy = PaginateConfig(**{k: v for k, v in endpoint.items() if k in POLICY_FIELDS})
        endpoints[name] = EndpointConfig(name=name, table=endpoint["table"], policy=policy)
    return endpoints


def get_endpoint(config: Dict[str, Any], name: str) -> EndpointConfig:
    """
    Get a single endpoint by name.

    Raises:
        ValueError: If the endpoint is not configured
    """
    endpoints = load_endpoints(config)
    if name not in endpoints:
        known = ", ".join(sorted(endpoints)) or "none"
        raise ValueError(f"Unknown endpoint '{name}' (configured: {known})")
    return endpoints[name]
