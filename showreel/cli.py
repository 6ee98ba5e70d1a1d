#!/usr/bin/env python3
"""
cli.py - Entry point for SHOWREEL
Pick an episode from your TV show collection and stream it with webtorrent.
"""

try:
    import asyncio
    import sys
    import argparse
    import time
    from pathlib import Path
    from typing import Optional, Sequence
    from rich.console import Console
    import showreel as pkg
    from . import logger
    from .catalog.client import CatalogServiceAdapter
    from .collection.service import CollectionService
    from .collection.store import JsonCollectionStore
    from .config import ShowreelConfig, load_config, resolve_config_path
    from .pipeline.episode_pipeline import EpisodePipeline
    from .player import PLAYER_FLAGS, launch_external_player
    from .ui import TerminalUI
except ImportError as e:
    print(f"Error: Missing required dependency: {e}", file=sys.stderr)
    print("Please install required dependencies: pip install -e .", file=sys.stderr)
    sys.exit(1)

console = Console(stderr=True)
_CLI_SESSION_START_MONOTONIC = time.monotonic()
PLAYER_FLAG_HELP: dict[str, str] = {
    "vlc": "Default, Use VLC as player",
    "iina": "Use IINA as player",
    "mplayer": "Use MPlayer as player",
    "mpv": "Use MPV as player",
    "xmbc": "Use XMBC as player",
}


def _ui_info(message: str) -> None:
    console.print(f"[cyan][INFO][/cyan] {message}")


def _ui_error(message: str) -> None:
    console.print(f"[red][ERROR][/red] {message}")


def _reset_cli_session_timer() -> None:
    global _CLI_SESSION_START_MONOTONIC
    _CLI_SESSION_START_MONOTONIC = time.monotonic()


def _format_elapsed_runtime(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.1f}s"
    if seconds < 3_600:
        return f"{seconds / 60:.1f}m"
    return f"{seconds / 3_600:.1f}h"


def _ui_goodbye_with_elapsed() -> None:
    elapsed = max(0.0, time.monotonic() - _CLI_SESSION_START_MONOTONIC)
    _ui_info(f"Goodbye! Elapsed {_format_elapsed_runtime(elapsed)}")


def _store_for(config: ShowreelConfig) -> JsonCollectionStore:
    return JsonCollectionStore(config.collection.resolved_path())


async def add_command(config: ShowreelConfig, ui: TerminalUI, show_id: str) -> int:
    async with CatalogServiceAdapter(config.catalog) as resolver:
        await CollectionService(_store_for(config), resolver, ui).add(show_id)
    return 0


async def remove_command(config: ShowreelConfig, ui: TerminalUI) -> int:
    async with CatalogServiceAdapter(config.catalog) as resolver:
        await CollectionService(_store_for(config), resolver, ui).remove()
    return 0


async def resolve_magnet(config: ShowreelConfig, ui: TerminalUI) -> Optional[str]:
    async with CatalogServiceAdapter(config.catalog) as resolver:
        outcome = await EpisodePipeline(_store_for(config), resolver, ui).run()
    return outcome.magnet


async def fetch_command(config: ShowreelConfig, ui: TerminalUI) -> int:
    magnet = await resolve_magnet(config, ui)
    if magnet:
        print(magnet, flush=True)
    return 0


async def watch_command(config: ShowreelConfig, ui: TerminalUI, flags: Sequence[str]) -> int:
    magnet = await resolve_magnet(config, ui)
    if not magnet:
        return 0
    logger.info(f"Streaming with {config.player.command}")
    process = launch_external_player(magnet, flags, config.player)
    with ui.status("Buffering"):
        returncode = await asyncio.to_thread(process.wait)
    if returncode:
        logger.error(f"{config.player.command} exited with status {returncode}")
    else:
        logger.debug("Player exited cleanly")
    return returncode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="showreel",
        description="CLI to stream TV shows with webtorrent",
    )
    for args, kwargs in (
        (("-c", "--config"), {"metavar": "PATH", "help": "Path to config.toml (file or directory)"}),
        (("-d", "--debug"), {"action": "store_true", "help": "Debug mode with API calls, JSON responses, timestamps"}),
        (("--log-file",), {"metavar": "PATH", "help": "Append diagnostic output to this file"}),
        (("-V", "--version"), {"action": "version", "version": f"%(prog)s {getattr(pkg, '__version__', '0.0.0')}"}),
    ):
        parser.add_argument(*args, **kwargs)

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    add = commands.add_parser("add", help="Add a TV show to your collection with its IMDB ID.")
    add.add_argument("show_id", metavar="imdbID")
    commands.add_parser("remove", help="Remove a TV show from your collection.")
    commands.add_parser("fetch", help="Fetch a magnet URL for an episode from your collection.")
    watch = commands.add_parser("watch", help="Stream an episode from your collection with webtorrent-cli.")
    for flag in PLAYER_FLAGS:
        watch.add_argument(f"--{flag}", action="store_true", help=PLAYER_FLAG_HELP[flag])
    return parser


def _selected_player_flags(args: argparse.Namespace) -> list[str]:
    return [flag for flag in PLAYER_FLAGS if getattr(args, flag, False)]


def _setup_logger(config: ShowreelConfig, args: argparse.Namespace) -> logger.ShowreelLogger:
    log_file_raw = args.log_file or config.logging.log_file
    log_file = Path(log_file_raw).expanduser() if log_file_raw else None
    log = logger.ShowreelLogger(log_file=log_file, debug=args.debug or config.logging.debug)
    logger.set_logger(log)
    return log


def run_command(config: ShowreelConfig, args: argparse.Namespace, ui: TerminalUI) -> int:
    if args.command == "add":
        return asyncio.run(add_command(config, ui, args.show_id))
    if args.command == "remove":
        return asyncio.run(remove_command(config, ui))
    if args.command == "fetch":
        return asyncio.run(fetch_command(config, ui))
    if args.command == "watch":
        return asyncio.run(watch_command(config, ui, _selected_player_flags(args)))
    raise ValueError(f"Unknown command '{args.command}'")


def main(argv: Optional[Sequence[str]] = None, default_command: Optional[str] = None):
    """Entry point; `default_command` runs when no sub-command is given (help otherwise)."""
    _reset_cli_session_timer()
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    try:
        args = parser.parse_args(argv)
        if args.command is None:
            if default_command is None:
                parser.print_help(sys.stderr)
                sys.exit(0)
            args = parser.parse_args([*argv, default_command])

        config = load_config(resolve_config_path(args.config))
        with _setup_logger(config, args):
            code = run_command(config, args, TerminalUI(console=console))
        sys.exit(code)
    except KeyboardInterrupt:
        _ui_goodbye_with_elapsed()
        sys.exit(0)
    except Exception as e:
        _ui_error(f"Fatal error: {e}")
        sys.exit(1)


def watch_main():
    """Entry point that defaults to streaming when no sub-command is given."""
    main(default_command="watch")


if __name__ == "__main__":
    main()
