"""Entry point: ``python -m dungeon``.

Supports two modes:
  - ``python -m dungeon``              → Launch the FastAPI server
  - ``python -m dungeon play <user>``  → Play a session from the terminal
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based dungeon crawl engine")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--state-dir", type=str, default="state")
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Terminal mode ---
    play = sub.add_parser("play", help="Play a session interactively from stdin")
    play.add_argument("username", type=str)
    play.add_argument("--session", type=str, default="local")
    play.add_argument("--seed", type=int, default=42)
    play.add_argument("--state-dir", type=str, default="state")
    play.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from dungeon.api.app import create_app
    from dungeon.config import DungeonConfig

    config = DungeonConfig(world_seed=args.seed, state_dir=args.state_dir, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_play(args: argparse.Namespace) -> int:
    from dungeon.config import DungeonConfig
    from dungeon.engine.persistence import PersistenceError
    from dungeon.engine.session_manager import SessionManager
    from dungeon.utils.logging import setup_logging

    config = DungeonConfig(world_seed=args.seed, state_dir=args.state_dir, log_level=args.log_level)
    setup_logging(config.log_level, stream=sys.stderr)
    manager = SessionManager(config)

    print(f"Session {args.session!r} as {args.username}. Type /look to start, Ctrl-D to quit.")
    for line in sys.stdin:
        try:
            result = manager.handle(args.session, args.username, line)
        except PersistenceError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(result.narrative)
        print(result.ascii_map)
        print()
    return 0


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "play":
        sys.exit(_run_play(args))


if __name__ == "__main__":
    main()
