"""Plain-text rendering for CLI output."""

from __future__ import annotations

from ..core.wootility.bulk import BulkActionResult
from ..core.wootility.catalog import category_title, effects_by_category
from ..core.wootility.models import RGBEffect, WootingDevice, WootingProfile


def format_device_line(device: WootingDevice) -> str:
    flags = []
    if device.rgb_enabled:
        flags.append("RGB")
    flags.append("Connected" if device.connected else "Disconnected")
    return f"{device.model_name}  Serial: {device.serial} | {len(device.profiles)} profiles  [{', '.join(flags)}]"


def format_device_list(devices: list[WootingDevice]) -> str:
    lines = [f"Connected Devices ({len(devices)} device(s) found)"]
    lines.extend(f"  {format_device_line(d)}" for d in devices)
    return "\n".join(lines)


def format_device_details(device: WootingDevice) -> str:
    idx = device.current_profile
    current_name = device.profiles[idx] if 0 <= idx < len(device.profiles) else "Unknown"

    lines = [
        device.model_name,
        "",
        f"Serial Number:     {device.serial}",
        f"Connection Status: {'Connected' if device.connected else 'Disconnected'}",
        f"RGB Support:       {'Enabled' if device.rgb_enabled else 'Not Available'}",
        f"Current Profile:   {idx + 1} ({current_name})",
        "",
        "Available Profiles:",
    ]
    for index, name in enumerate(device.profiles):
        active = index == idx
        marker = ">" if active else " "
        suffix = " (Active)" if active else ""
        lines.append(f"  {marker} Profile {index + 1}: {name}{suffix}")
    lines.append(f"Total Profiles: {len(device.profiles)}")
    return "\n".join(lines)


def format_profiles(device: WootingDevice, profiles: list[WootingProfile]) -> str:
    lines = [f"{device.model_name} ({device.serial})"]
    for p in profiles:
        marker = ">" if p.active else " "
        suffix = " (active)" if p.active else ""
        lines.append(f"  {marker} [{p.id}] {p.profile_index + 1}. {p.name}{suffix} - {p.description}")
    return "\n".join(lines)


def format_effects(effects: list[RGBEffect]) -> str:
    lines: list[str] = []
    for category, items in effects_by_category(effects).items():
        if lines:
            lines.append("")
        lines.append(category_title(category))
        for e in items:
            lines.append(f"  {e.id:<14} {e.name} - {e.description}")
    return "\n".join(lines)


def quick_switch_message(result: BulkActionResult, profile_number: str, profile_name: str) -> str:
    if result.outcome == "all":
        if result.total == 1:
            return f"Switched to {profile_name}"
        return f"Switched {result.success_count} devices to {profile_name}"

    if result.outcome == "partial":
        msg = f"Switched {result.success_count}/{result.total} devices to Profile {profile_number}"
        if result.skipped:
            msg += f" ({len(result.skipped)} skipped)"
        return msg

    return f"Failed to switch to Profile {profile_number}"


def effect_result_message(result: BulkActionResult, effect: RGBEffect) -> str:
    if result.outcome == "all":
        return f"RGB effect applied: {effect.name} applied to {result.success_count} device(s)"
    if result.outcome == "partial":
        return f"Partially applied: {effect.name} applied to {result.success_count}/{result.total} devices"
    return "Failed to apply effect: Check that devices are connected and Wootility is running"
