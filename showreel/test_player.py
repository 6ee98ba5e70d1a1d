from __future__ import annotations

import random
import subprocess

import pytest

from showreel import player
from showreel.config import PlayerConfig


def test_build_player_args_orders_flags_and_appends_magnet() -> None:
    args = player.build_player_args(
        "magnet:?xt=urn:btih:abc",
        ["mpv", "vlc"],
        PlayerConfig(output_dir="/downloads"),
        rng=random.Random(7),
    )

    assert args[:3] == ["webtorrent", "download", "--quiet"]
    assert args[3] == "--port"
    assert 8000 <= int(args[4]) <= 8999
    assert args[5:7] == ["-o", "/downloads"]
    assert args[7:] == ["--vlc", "--mpv", "magnet:?xt=urn:btih:abc"]


def test_build_player_args_defaults_to_temp_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(player.tempfile, "gettempdir", lambda: "/tmp/x")

    args = player.build_player_args("magnet:?a", [], PlayerConfig(port_range=(9100, 9100)))

    assert args == ["webtorrent", "download", "--quiet", "--port", "9100", "-o", "/tmp/x", "magnet:?a"]


def test_build_player_args_rejects_unknown_flag() -> None:
    with pytest.raises(ValueError, match="kodi"):
        player.build_player_args("magnet:?a", ["kodi"], PlayerConfig())


def test_launch_external_player_spawns_without_waiting(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[list[str], dict]] = []

    class _FakePopen:
        def __init__(self, args, **kwargs) -> None:
            calls.append((args, kwargs))

    monkeypatch.setattr(player.subprocess, "Popen", _FakePopen)
    sink = object()

    handle = player.launch_external_player("magnet:?a", ["iina"], PlayerConfig(command="wt"), stdout=sink)

    assert isinstance(handle, _FakePopen)
    args, kwargs = calls[0]
    assert args[0] == "wt"
    assert "--iina" in args
    assert args[-1] == "magnet:?a"
    assert kwargs["stdout"] is sink
    assert kwargs["stderr"] is subprocess.STDOUT
