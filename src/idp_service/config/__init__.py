"""Configuration management for the IDP service."""

from idp_service.config.settings import Settings, get_settings
from idp_service.config.secrets import mask_secret, mask_secrets_in_dict

__all__ = [
    "Settings",
    "get_settings",
    "mask_secret",
    "mask_secrets_in_dict",
]
