from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

import pytest


# Safety default: during pytest, never read or write the user's real
# preferences or Profile Switcher device file.
os.environ["WOOTCTL_CONFIG_DIR"] = tempfile.mkdtemp(prefix="wootctl-test-config-")
os.environ["WOOTCTL_DEVICE_CONFIG"] = str(Path(os.environ["WOOTCTL_CONFIG_DIR"]) / "no-such-device-file.json")
os.environ.pop("WOOTCTL_PREFERENCES_PATH", None)
os.environ.pop("WOOTCTL_WOOTILITY_PATH", None)


@pytest.fixture(autouse=True)
def _isolate_install_probe(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep path resolution from finding a real Wootility install."""

    import wootctl.core.wootility.paths as paths
    from wootctl.core.logging_utils import reset_throttle

    monkeypatch.setattr(paths, "candidate_paths", lambda *a, **k: [])
    monkeypatch.delenv("WOOTCTL_WOOTILITY_PATH", raising=False)
    reset_throttle()


@pytest.fixture
def fake_wootility(tmp_path: Path) -> Path:
    """An existing file standing in for the Wootility executable."""

    exe = tmp_path / "Wootility.exe"
    exe.write_text("")
    return exe


@pytest.fixture
def device_file_factory(tmp_path: Path):
    """Write a Profile Switcher device file and return its path."""

    def _make(payload, *, name: str = "config.json") -> Path:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _make


class RecordingPort:
    """Port double that records calls and answers from a per-serial table."""

    def __init__(self, results: dict[str, bool] | None = None, *, raises: set[str] | None = None) -> None:
        self.results = results or {}
        self.raises = raises or set()
        self.calls: list[tuple[str, str, object]] = []

    def _answer(self, serial: str) -> bool:
        if serial in self.raises:
            raise RuntimeError(f"port failure for {serial}")
        return self.results.get(serial, True)

    def switch_profile(self, serial: str, profile_index: int) -> bool:
        self.calls.append(("switch", serial, profile_index))
        return self._answer(serial)

    def apply_rgb_effect(self, serial: str, effect_id: str) -> bool:
        self.calls.append(("rgb", serial, effect_id))
        return self._answer(serial)


@pytest.fixture
def recording_port():
    return RecordingPort
