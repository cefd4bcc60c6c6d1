"""Storefront client settings, read from the environment."""

import os
from dataclasses import dataclass

from storefront.gateway.cache import DEFAULT_TTL


def _flag(value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class StorefrontSettings:
    api_url: str | None = None
    use_static_data: bool = False
    storage_path: str | None = None
    cache_ttl: float = DEFAULT_TTL
    timeout: float = 10.0
    currency: str = "EGP"

    @classmethod
    def from_env(cls, environ=None) -> "StorefrontSettings":
        env = os.environ if environ is None else environ
        return cls(
            api_url=env.get("STOREFRONT_API_URL") or None,
            use_static_data=_flag(env.get("STOREFRONT_USE_STATIC_DATA"), default=False),
            storage_path=env.get("STOREFRONT_STORAGE_PATH") or None,
            cache_ttl=float(env.get("STOREFRONT_CACHE_TTL") or DEFAULT_TTL),
            timeout=float(env.get("STOREFRONT_TIMEOUT") or 10.0),
            currency=env.get("STOREFRONT_CURRENCY") or "EGP",
        )
