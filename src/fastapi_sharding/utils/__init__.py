"""Utility helpers for fastapi-sharding."""

from fastapi_sharding.utils.db_compat import (
    detect_provider_type,
    get_short_provider_name,
    mask_url,
    requires_static_pool,
    short_name_for_backend,
)

__all__ = [
    "detect_provider_type",
    "get_short_provider_name",
    "mask_url",
    "requires_static_pool",
    "short_name_for_backend",
]
