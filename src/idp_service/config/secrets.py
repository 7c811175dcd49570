"""
Secret masking for logs.

Values of keys that look sensitive (tokens, passwords, API keys) are replaced
before a log event is rendered.
"""
from typing import Any


SENSITIVE_KEYS = frozenset({
    "password",
    "secret",
    "token",
    "api_key",
    "apikey",
    "authorization",
    "credentials",
    "private_key",
    "secret_key",
    "jwt",
    "bearer",
})


def mask_secret(value: str) -> str:
    """Mask a secret value for safe logging."""
    return "****" if value else ""


def mask_secrets_in_dict(data: dict, keys: list[str] | None = None) -> dict:
    """
    Mask sensitive values in a dictionary for safe logging.

    Args:
        data: Dictionary potentially containing secrets
        keys: Extra key names to mask on top of SENSITIVE_KEYS

    Returns:
        New dictionary with sensitive values masked
    """
    keys_to_mask = set(SENSITIVE_KEYS)
    if keys:
        keys_to_mask.update(k.lower() for k in keys)

    masked = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        should_mask = any(sensitive in key_lower for sensitive in keys_to_mask)

        if should_mask and isinstance(value, str):
            masked[key] = mask_secret(value)
        elif isinstance(value, dict):
            masked[key] = mask_secrets_in_dict(value, keys)
        elif isinstance(value, list):
            masked[key] = [
                mask_secrets_in_dict(item, keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            masked[key] = value

    return masked


def mask_secrets_processor(logger_obj: Any, method_name: str, event_dict: dict) -> dict:
    """Structlog processor that masks sensitive fields."""
    return mask_secrets_in_dict(event_dict)
