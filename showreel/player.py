"""Spawn webtorrent-cli for a resolved magnet."""

from __future__ import annotations

import random
import subprocess
import sys
import tempfile
from typing import Iterable, Literal, Optional, TextIO

from showreel import logger
from showreel.config import PlayerConfig

PlayerFlag = Literal["vlc", "iina", "mplayer", "mpv", "xmbc"]
PLAYER_FLAGS: tuple[PlayerFlag, ...] = ("vlc", "iina", "mplayer", "mpv", "xmbc")


def build_player_args(
    magnet: str,
    flags: Iterable[str],
    player: PlayerConfig,
    *,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Command line for `webtorrent download`; flags keep the PLAYER_FLAGS order."""
    low, high = player.port_range
    port = (rng or random).randint(low, high)
    output_dir = player.output_dir or tempfile.gettempdir()
    requested = set(flags)
    unknown = requested.difference(PLAYER_FLAGS)
    if unknown:
        raise ValueError(f"Unsupported player flag(s): {', '.join(sorted(unknown))}")

    args = [player.command, "download", "--quiet", "--port", str(port), "-o", output_dir]
    args.extend(f"--{flag}" for flag in PLAYER_FLAGS if flag in requested)
    args.append(magnet)
    return args


def launch_external_player(
    magnet: str,
    flags: Iterable[str],
    player: PlayerConfig,
    stdout: TextIO | None = None,
) -> subprocess.Popen:
    """Start the player without waiting; its output is relayed to `stdout` (stderr by default)."""
    args = build_player_args(magnet, flags, player)
    logger.debug(f"Launching: {' '.join(args[:-1])} <magnet>")
    return subprocess.Popen(
        args,
        stdin=subprocess.DEVNULL,
        stdout=stdout or sys.stderr,
        stderr=subprocess.STDOUT,
    )
