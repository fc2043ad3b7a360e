"""Command-line settings for a chess session."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

_VERSION = "0.2.0"


class VizType(Enum):
    """How the game is shown: in the terminal or through the web frontend."""

    TERM = "Term"
    WEB = "Web"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProgramState:
    """Settings chosen on the command line."""

    viz_type: VizType
    human_plays: bool
    tick_speed: int
    num_plies: int

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping of the settings."""
        return {
            "viz_type": str(self.viz_type),
            "human_plays": self.human_plays,
            "tick_speed": self.tick_speed,
            "num_plies": self.num_plies,
        }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chrust", description="Simple Chess Engine", add_help=False
    )
    parser.add_argument("--help", action="help", help="Print help information")
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {_VERSION}"
    )
    parser.add_argument(
        "-z",
        "--visualization_mode",
        dest="viz",
        metavar="TERM|WEB",
        default="WEB",
        help="Sets the method of visualization for the app",
    )
    parser.add_argument(
        "-h",
        "--human_plays",
        dest="hplay",
        metavar="true|false",
        default="true",
        help=(
            "Sets whether or not the human player will play the game. "
            "If false, the human player makes random decisions"
        ),
    )
    parser.add_argument(
        "-t",
        "--tick_speed",
        dest="tick",
        metavar="positive integer",
        default="1000",
        help="Sets the interval between moves. (Milliseconds)",
    )
    parser.add_argument(
        "-p",
        "--num_plies",
        dest="plies",
        metavar="positive integer",
        default="3",
        help="Number of turns into the future the AI will look ahead.",
    )
    return parser


def _non_negative(text: str, option: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"The {option} flag needs a non-negative integer, got {text!r}") from None
    if value < 0:
        raise ValueError(f"The {option} flag needs a non-negative integer, got {text!r}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> ProgramState:
    """Read the settings from ``argv`` (the process arguments by default)."""
    args = _build_parser().parse_args(argv)

    viz_names = {"TERM": VizType.TERM, "WEB": VizType.WEB}
    if args.viz not in viz_names:
        raise ValueError("You must pass in a valid argument for the -z flag!")

    human_values = {"true": True, "false": False}
    if args.hplay not in human_values:
        raise ValueError("You must pass in a valid argument for the -h flag!")

    return ProgramState(
        viz_type=viz_names[args.viz],
        human_plays=human_values[args.hplay],
        tick_speed=_non_negative(args.tick, "-t"),
        num_plies=_non_negative(args.plies, "-p"),
    )