"""wootctl command line (argparse).

Subcommands mirror the four launcher commands: `devices`, `profiles`,
`switch` (quick numeric switch) and `effects`, plus `doctor` for setup checks.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

from .. import __version__
from ..core.config.paths import preferences_file_path
from ..core.config.preferences import Preferences, load_preferences
from ..core.errors import WootilityUnavailableError
from ..core.wootility.bulk import apply_effect_to_devices, rgb_targets, switch_all_devices
from ..core.wootility.catalog import find_effect
from ..core.wootility.client import ClientConfig, WootilityClient
from ..core.wootility.device_config import load_device_config
from ..core.wootility.models import WootingDevice
from . import formatting

logger = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


class Reporter:
    """Routes user-facing messages; success chatter obeys `enable_notifications`."""

    def __init__(self, prefs: Preferences, *, out=None, err=None) -> None:
        self.prefs = prefs
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def info(self, msg: str) -> None:
        print(msg, file=self.out)

    def success(self, msg: str) -> None:
        if self.prefs.enable_notifications:
            print(msg, file=self.out)

    def warning(self, msg: str) -> None:
        print(f"warning: {msg}", file=self.err)

    def error(self, msg: str) -> None:
        print(f"error: {msg}", file=self.err)


def _sample_data_note(client: WootilityClient, reporter: Reporter) -> list[WootingDevice]:
    listing = client.list_devices()
    if listing.is_mock:
        reporter.warning(f"device file unavailable ({listing.reason}); showing sample data")
    return listing.devices


def cmd_devices(args: argparse.Namespace, client: WootilityClient, reporter: Reporter) -> int:
    client.require_available()
    devices = _sample_data_note(client, reporter)

    if not devices:
        reporter.error("No Wooting devices found. Check your connection.")
        return EXIT_FAILED

    if args.serial:
        device = next((d for d in devices if d.serial == args.serial), None)
        if device is None:
            reporter.error(f"Device {args.serial} not found")
            return EXIT_FAILED
        reporter.info(formatting.format_device_details(device))
        return EXIT_OK

    reporter.info(formatting.format_device_list(devices))
    return EXIT_OK


def _parse_profile_id(profile_id: str) -> tuple[str, int] | None:
    serial, sep, index = profile_id.rpartition("-")
    if not sep or not serial or not index.isdigit():
        return None
    return serial, int(index)


def _activate_profile(profile_id: str, client: WootilityClient, reporter: Reporter) -> int:
    parsed = _parse_profile_id(profile_id)
    if parsed is None:
        reporter.error(f"Invalid profile id {profile_id!r} (expected SERIAL-INDEX)")
        return EXIT_USAGE

    serial, index = parsed
    profile = next((p for p in client.get_profiles(serial) if p.profile_index == index), None)
    if profile is None:
        reporter.error(f"Unknown profile: {profile_id}")
        return EXIT_FAILED

    if profile.active:
        reporter.success(f"Profile already active: {profile.name} is already the active profile")
        return EXIT_OK

    if not client.switch_profile(profile.device_serial, profile.profile_index):
        reporter.error("Failed to switch profile: Check that Wootility is running and the device is connected")
        return EXIT_FAILED

    # Re-query so the reported state reflects what the device says now.
    refreshed = client.get_profiles(serial)
    active = next((p for p in refreshed if p.active), None)
    logger.debug("Active profile after switch on %s: %s", serial, active.name if active else None)
    reporter.success(f"Profile switched: Switched to {profile.name}")
    return EXIT_OK


def cmd_profiles(args: argparse.Namespace, client: WootilityClient, reporter: Reporter) -> int:
    client.require_available()

    if args.activate:
        return _activate_profile(args.activate, client, reporter)

    devices = _sample_data_note(client, reporter)
    if args.serial:
        devices = [d for d in devices if d.serial == args.serial]

    if not devices:
        reporter.error("No Wooting devices found. Check your connection.")
        return EXIT_FAILED

    blocks: list[str] = []
    for device in devices:
        try:
            profiles = client.get_profiles(device.serial)
        except Exception as exc:
            logger.error("Error loading profiles for device %s: %s", device.serial, exc)
            continue
        blocks.append(formatting.format_profiles(device, profiles))

    reporter.info("\n\n".join(blocks))
    return EXIT_OK


def cmd_switch(args: argparse.Namespace, client: WootilityClient, reporter: Reporter) -> int:
    profile_number = args.profile_number or reporter.prefs.default_profile
    if not profile_number:
        reporter.error("No profile number given and no default_profile preference set")
        return EXIT_USAGE

    client.require_available()

    devices = client.get_devices()
    if not devices:
        reporter.error("No Wooting devices found. Check your connection.")
        return EXIT_FAILED

    validation = client.validate_profile_number(profile_number)
    if not validation.valid:
        reporter.error(validation.error or "Invalid profile number")
        return EXIT_USAGE

    index = validation.number
    if len(devices) > 1:
        reporter.success(f"Switching {len(devices)} devices to Profile {profile_number}...")

    result = switch_all_devices(client, index, devices)

    first = devices[0]
    profile_name = first.profiles[index] if index < len(first.profiles) else f"Profile {profile_number}"
    message = formatting.quick_switch_message(result, profile_number, profile_name)

    if result.outcome == "all":
        reporter.success(message)
        return EXIT_OK
    if result.outcome == "partial":
        reporter.warning(message)
        return EXIT_FAILED
    reporter.error(message)
    return EXIT_FAILED


def cmd_effects(args: argparse.Namespace, client: WootilityClient, reporter: Reporter) -> int:
    client.require_available()
    effects = client.get_rgb_effects()

    if not args.apply:
        reporter.info(formatting.format_effects(effects))
        return EXIT_OK

    effect = find_effect(args.apply)
    if effect is None:
        reporter.error(f"Unknown RGB effect: {args.apply}")
        return EXIT_USAGE

    devices = client.get_devices()
    if not rgb_targets(devices, args.serial):
        reporter.error("No RGB devices available: No devices with RGB support found")
        return EXIT_FAILED

    result = apply_effect_to_devices(client, effect.id, devices, serial=args.serial)
    message = formatting.effect_result_message(result, effect)
    if result.outcome == "none":
        reporter.error(message)
        return EXIT_FAILED
    reporter.success(message)
    return EXIT_OK if result.outcome == "all" else EXIT_FAILED


def cmd_doctor(args: argparse.Namespace, client: WootilityClient, reporter: Reporter) -> int:
    problems = 0

    if client.mock_mode:
        reporter.info("Wootility: not found, running in mock mode")
    elif os.path.exists(client.wootility_path):
        reporter.info(f"Wootility: {client.wootility_path}")
    else:
        reporter.error(f"Wootility: {client.wootility_path} does not exist")
        problems += 1

    loaded = load_device_config(client.device_config_path)
    if loaded.loaded:
        count = len(client.get_devices())
        reporter.info(f"Device file: {loaded.path} ({count} device(s))")
    else:
        reporter.warning(f"Device file: {loaded.reason}; sample devices will be used")

    prefs_path = preferences_file_path()
    state = "found" if prefs_path.exists() else "not found, using defaults"
    reporter.info(f"Preferences: {prefs_path} ({state})")
    for key, value in reporter.prefs.to_dict().items():
        reporter.info(f"  {key} = {value!r}")

    if reporter.prefs.default_profile:
        validation = client.validate_profile_number(reporter.prefs.default_profile)
        if not validation.valid:
            reporter.error(f"default_profile: {validation.error}")
            problems += 1

    return EXIT_FAILED if problems else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wootctl",
        description="Wooting keyboard profile and RGB control via Wootility",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--wootility-path", help="Wootility executable (overrides preferences)")
    parser.add_argument("--device-config", help="Profile Switcher device file to read")
    sub = parser.add_subparsers(dest="command")

    p_dev = sub.add_parser("devices", help="List Wooting devices")
    p_dev.add_argument("--serial", help="Show details for one device")
    p_dev.set_defaults(func=cmd_devices)

    p_prof = sub.add_parser("profiles", help="List or activate profiles")
    p_prof.add_argument("--serial", help="Only list profiles of this device")
    p_prof.add_argument("--activate", metavar="PROFILE_ID", help="Activate a profile (SERIAL-INDEX)")
    p_prof.set_defaults(func=cmd_profiles)

    p_sw = sub.add_parser("switch", help="Switch all devices to profile N (1-4)")
    p_sw.add_argument("profile_number", nargs="?", help="Profile number (1-4); defaults to default_profile")
    p_sw.set_defaults(func=cmd_switch)

    p_fx = sub.add_parser("effects", help="List or apply RGB effects")
    p_fx.add_argument("--apply", metavar="EFFECT_ID", help="Effect to apply")
    p_fx.add_argument("--serial", help="Apply to this device only")
    p_fx.set_defaults(func=cmd_effects)

    p_doc = sub.add_parser("doctor", help="Check the Wootility and config setup")
    p_doc.set_defaults(func=cmd_doctor)

    return parser


def make_client(args: argparse.Namespace, prefs: Preferences) -> WootilityClient:
    return WootilityClient(
        ClientConfig(
            wootility_path=args.wootility_path or prefs.wootility_path,
            device_config_path=Path(args.device_config) if args.device_config else None,
        )
    )


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if not getattr(args, "func", None):
        parser.print_help()
        return EXIT_USAGE

    prefs = load_preferences()
    reporter = Reporter(prefs)
    client = make_client(args, prefs)

    try:
        return int(args.func(args, client, reporter))
    except WootilityUnavailableError as exc:
        reporter.error(f"{exc}. Install Wootility or set wootility_path in {preferences_file_path()}.")
        return EXIT_USAGE
