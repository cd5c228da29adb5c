from __future__ import annotations

from pathlib import Path

import pytest

from wootctl.core.wootility.paths import MOCK_WOOTILITY_PATH, candidate_paths, resolve_wootility_path


def test_first_existing_candidate_wins() -> None:
    existing = {"/b", "/c"}
    assert resolve_wootility_path(candidates=["/a", "/b", "/c"], exists=existing.__contains__) == "/b"


def test_no_candidate_selects_mock_sentinel() -> None:
    assert resolve_wootility_path(candidates=["/a"], exists=lambda _p: False) == MOCK_WOOTILITY_PATH


def test_explicit_path_wins_even_if_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WOOTCTL_WOOTILITY_PATH", "/from/env")
    assert resolve_wootility_path("/explicit", candidates=["/a"], exists=lambda _p: True) == "/explicit"


def test_env_override_beats_probe(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WOOTCTL_WOOTILITY_PATH", "/from/env")
    assert resolve_wootility_path(None, candidates=["/a"], exists=lambda _p: True) == "/from/env"


def test_blank_explicit_path_is_ignored() -> None:
    assert resolve_wootility_path("   ", candidates=["/a"], exists=lambda _p: True) == "/a"


def test_probe_errors_are_skipped() -> None:
    def exists(p: str) -> bool:
        if p == "/a":
            raise OSError("permission denied")
        return True

    assert resolve_wootility_path(candidates=["/a", "/b"], exists=exists) == "/b"


def test_windows_candidates_keep_install_order() -> None:
    paths = candidate_paths("win32", home=Path("/home/u"))
    assert paths[0] == "C:\\Program Files\\WootingUtility\\WootingUtility.exe"
    assert paths[-1] == "C:\\Program Files (x86)\\Wooting\\Wootility\\Wootility.exe"
    assert len(paths) == 5
    assert any("AppData" in p for p in paths)


@pytest.mark.parametrize("platform", ["darwin", "linux"])
def test_other_platforms_have_candidates(platform: str) -> None:
    assert candidate_paths(platform, home=Path("/home/u"))
