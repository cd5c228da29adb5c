"""Wootility integration: device/profile queries and RGB/profile actions."""

from .bulk import BulkActionResult, apply_effect_to_devices, switch_all_devices
from .client import ClientConfig, WootilityClient, validate_profile_number
from .models import DeviceListing, ProfileNumberValidation, RGBEffect, WootingDevice, WootingProfile

__all__ = [
    "BulkActionResult",
    "ClientConfig",
    "DeviceListing",
    "ProfileNumberValidation",
    "RGBEffect",
    "WootilityClient",
    "WootingDevice",
    "WootingProfile",
    "apply_effect_to_devices",
    "switch_all_devices",
    "validate_profile_number",
]
