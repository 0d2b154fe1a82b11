"""
Configuration objects and helpers for the Stripe client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment

__all__ = [
    "ConfigError",
    "StripeConfig",
    "load_stripe_config",
]

DEFAULT_API_BASE = "https://api.stripe.com/v1"
DEFAULT_TIMEOUT_SECONDS = 30

_PARAMETER_TO_ENV_KEY = {
    "api_key": "STRIPE_API_KEY",
    "api_base": "STRIPE_API_BASE",
    "timeout_seconds": "STRIPE_TIMEOUT_SECONDS",
    "api_version": "STRIPE_API_VERSION",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _collect_parameter_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:  # pragma: no cover
            raise TypeError(f"Unknown Stripe parameter '{key}'") from exc
        overrides[env_key] = str(value)
    return overrides


def _normalize_api_key(raw_key: Optional[str]) -> str:
    if raw_key is None:
        raise ConfigError("STRIPE_API_KEY must be provided")
    key = raw_key.strip()
    if not key:
        raise ConfigError("STRIPE_API_KEY must not be empty")
    return key


def _normalize_api_base(raw_base: str) -> str:
    base = raw_base.strip().rstrip("/")
    if not base.startswith(("http://", "https://")):
        raise ConfigError(f"STRIPE_API_BASE must be an http(s) URL, got '{raw_base}'")
    return base


def _parse_timeout(raw_timeout: str) -> int:
    try:
        timeout = int(raw_timeout)
    except ValueError as exc:
        raise ConfigError(
            f"STRIPE_TIMEOUT_SECONDS must be an integer, got '{raw_timeout}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("STRIPE_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class StripeConfig:
    api_key: str
    api_base: str = DEFAULT_API_BASE
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    api_version: Optional[str] = None

    def url(self, path: str) -> str:
        return f"{self.api_base}/{path.lstrip('/')}"

    def __repr__(self) -> str:
        # Keep the secret key out of logs and tracebacks.
        return (
            f"StripeConfig(api_key='{self.api_key[:7]}...', api_base='{self.api_base}', "
            f"timeout_seconds={self.timeout_seconds}, api_version={self.api_version!r})"
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "StripeConfig":
        api_key = _normalize_api_key(values.get("STRIPE_API_KEY"))
        api_base = _normalize_api_base(values.get("STRIPE_API_BASE", DEFAULT_API_BASE))
        timeout_seconds = _parse_timeout(
            values.get("STRIPE_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )
        api_version = values.get("STRIPE_API_VERSION") or None

        return cls(
            api_key=api_key,
            api_base=api_base,
            timeout_seconds=timeout_seconds,
            api_version=api_version,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout_seconds: Optional[int | str] = None,
        api_version: Optional[str] = None,
    ) -> "StripeConfig":
        parameter_overrides = _collect_parameter_overrides(
            {
                "api_key": api_key,
                "api_base": api_base,
                "timeout_seconds": timeout_seconds,
                "api_version": api_version,
            }
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_stripe_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    api_key: Optional[str] = None,
    api_base: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
    api_version: Optional[str] = None,
) -> StripeConfig:
    """
    Convenience wrapper that mirrors :meth:`StripeConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, direct
    keyword arguments, or any combination of the three.
    """
    return StripeConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        api_key=api_key,
        api_base=api_base,
        timeout_seconds=timeout_seconds,
        api_version=api_version,
    )
