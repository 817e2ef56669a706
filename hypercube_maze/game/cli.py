"""CLI entrypoint for an interactive hypercube game.

Owns argument parsing, config-file resolution, and the read/print loop. All
game logic lives in ``hypercube_maze.game.session`` and the domain layer.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from hypercube_maze.config.types import MazeConfig, SessionConfig, TrapRule
from hypercube_maze.domain.hypercube import Hypercube
from hypercube_maze.game.session import GameSession
from hypercube_maze.io.move_log import write_move_log

logger = logging.getLogger(__name__)

PROMPT = "> "

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_trap_rule(raw_trap_rule: str) -> TrapRule:
    """Parse trap rule from CLI/config."""
    try:
        return TrapRule(raw_trap_rule)
    except ValueError as exc:
        valid = ", ".join(rule.value for rule in TrapRule)
        raise ValueError(f"trap-rule must be one of {valid}") from exc


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _load_file_config(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        loaded = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return loaded


def resolve_session_config(
    args: argparse.Namespace, file_cfg: dict[str, object]
) -> SessionConfig:
    """Merge CLI arguments over config-file values over built-in defaults."""
    trap_rule = _parse_trap_rule(
        _coerce_str(
            _get_val(args.trap_rule, "trap_rule", file_cfg, TrapRule.TIME_SHIFTING.value),
            "trap_rule",
        )
    )
    raw_size = _get_val(args.size, "size", file_cfg, None)
    size = None if raw_size is None else _coerce_int(raw_size, "size")
    raw_log = _get_val(args.move_log, "move_log", file_cfg, None)
    move_log_path = None if raw_log is None else Path(_coerce_str(raw_log, "move_log"))
    return SessionConfig(
        maze=MazeConfig.for_rule(trap_rule, size),
        move_log_path=move_log_path,
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Find the exit at the center of a 4D hypercube")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--size", type=int, default=None, help="Grid side length")
    parser.add_argument(
        "--trap-rule",
        type=str,
        choices=[rule.value for rule in TrapRule],
        default=None,
    )
    parser.add_argument(
        "--move-log",
        type=Path,
        default=None,
        help="Write a Parquet transcript of every move attempt when the game ends",
    )
    parser.add_argument(
        "--summary",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Print a JSON summary of the finished game",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------


def run_session(session: GameSession, stdin: TextIO, stdout: TextIO) -> GameSession:
    """Feed lines from ``stdin`` to ``session`` until it ends or input runs out."""
    for line in session.intro():
        print(line, file=stdout)
    while not session.state.is_terminal:
        stdout.write(PROMPT)
        stdout.flush()
        raw = stdin.readline()
        if not raw:
            logger.info("Input closed; leaving the hypercube")
            session.abandon()
            break
        outcome = session.handle(raw)
        for line in outcome.lines:
            print(line, file=stdout)
    return session


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """CLI entrypoint for one game.

    Every ending (quit, trap, exit found, end of input) returns 0.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    file_cfg = _load_file_config(parser, args.config)
    try:
        config = resolve_session_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    out = stdout if stdout is not None else sys.stdout
    session = GameSession(cube=Hypercube.create(config.maze))
    run_session(session, stdin if stdin is not None else sys.stdin, out)

    if config.move_log_path is not None:
        written = write_move_log(session.move_log, config.move_log_path)
        logger.info("Wrote %d move-log rows to %s", len(session.move_log), written)
    if args.summary:
        print(json.dumps(session.summary(), ensure_ascii=False, indent=2), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
