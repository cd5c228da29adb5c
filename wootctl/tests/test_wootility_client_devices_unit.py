#!/usr/bin/env python3
"""Unit tests for device listing: device file parsing and mock fallback."""

from __future__ import annotations

import json

from wootctl.core.wootility.client import ClientConfig, WootilityClient
from wootctl.core.wootility.device_config import DEFAULT_MODEL_NAME, DEFAULT_PROFILE_NAMES, load_device_config


def _client(tmp_path, device_file=None) -> WootilityClient:
    path = device_file if device_file is not None else tmp_path / "missing.json"
    return WootilityClient(ClientConfig(device_config_path=path))


class TestMockFallback:
    def test_missing_file_returns_two_mock_devices(self, tmp_path):
        devices = _client(tmp_path).get_devices()

        assert [d.serial for d in devices] == ["WK001", "WK002"]

        one, two = devices
        assert one.model_name == "Wooting One"
        assert one.profiles == ["Default", "Gaming", "Typing", "Custom"]
        assert one.current_profile == 0
        assert two.model_name == "Wooting Two HE"
        assert two.profiles == ["Work", "Gaming", "Streaming", "RGB Show"]
        assert two.current_profile == 1
        assert all(d.connected and d.rgb_enabled for d in devices)

    def test_malformed_json_falls_back_to_mock(self, tmp_path, device_file_factory):
        path = device_file_factory("{not json")
        listing = _client(tmp_path, path).list_devices()

        assert listing.is_mock
        assert "could not read" in listing.reason
        assert [d.serial for d in listing.devices] == ["WK001", "WK002"]

    def test_non_object_document_falls_back_to_mock(self, tmp_path, device_file_factory):
        path = device_file_factory([1, 2, 3])
        listing = _client(tmp_path, path).list_devices()

        assert listing.source == "mock"
        assert "not a JSON object" in listing.reason

    def test_unexpected_error_never_escapes(self, tmp_path, monkeypatch):
        import wootctl.core.wootility.client as client_mod

        def boom(_path):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(client_mod, "load_device_config", boom)
        listing = _client(tmp_path).list_devices()

        assert listing.is_mock
        assert "disk on fire" in listing.reason

    def test_missing_file_reports_reason(self, tmp_path):
        result = load_device_config(tmp_path / "nope.json")
        assert result.loaded is False
        assert "does not exist" in result.reason


class TestDeviceFile:
    def test_entries_map_to_connected_devices_on_profile_zero(self, tmp_path, device_file_factory):
        path = device_file_factory(
            {
                "devices": {
                    "A1": {"model_name": "Wooting 60HE", "profiles": ["Work", "Play"]},
                    "B2": {"model_name": "Wooting Two"},
                }
            }
        )
        listing = _client(tmp_path, path).list_devices()

        assert listing.source == "config"
        a1, b2 = listing.devices
        assert a1.serial == "A1"
        assert a1.model_name == "Wooting 60HE"
        assert a1.profiles == ["Work", "Play"]
        assert a1.connected is True
        assert a1.current_profile == 0
        assert b2.profiles == list(DEFAULT_PROFILE_NAMES)

    def test_missing_fields_get_defaults(self, tmp_path, device_file_factory):
        path = device_file_factory({"devices": {"X": {}, "Y": "garbage", "Z": {"model_name": "", "profiles": []}}})
        devices = _client(tmp_path, path).get_devices()

        assert [d.model_name for d in devices] == [DEFAULT_MODEL_NAME] * 3
        assert all(d.profiles == list(DEFAULT_PROFILE_NAMES) for d in devices)

    def test_no_devices_key_yields_empty_list_not_mock(self, tmp_path, device_file_factory):
        path = device_file_factory({"other": True})
        listing = _client(tmp_path, path).list_devices()

        assert listing.source == "config"
        assert listing.devices == []

    def test_profile_names_are_stringified(self, tmp_path, device_file_factory):
        path = device_file_factory(json.dumps({"devices": {"S": {"profiles": [1, "Two"]}}}))
        (device,) = _client(tmp_path, path).get_devices()
        assert device.profiles == ["1", "Two"]

    def test_env_override_selects_device_file(self, tmp_path, device_file_factory, monkeypatch):
        path = device_file_factory({"devices": {"ENV1": {"model_name": "Env Board"}}})
        monkeypatch.setenv("WOOTCTL_DEVICE_CONFIG", str(path))

        devices = WootilityClient().get_devices()
        assert [d.serial for d in devices] == ["ENV1"]

    def test_each_query_builds_fresh_devices(self, tmp_path):
        client = _client(tmp_path)
        first = client.get_devices()
        second = client.get_devices()
        assert first == second
        assert first[0] is not second[0]
