# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, TextIO

from debug import COMPONENTS, Debug
from enigma import Enigma
from errors import EnigmaError
from settings import build_machine, load_settings

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Config:
    """Runtime switches for the line loop."""

    show_positions: bool = True     # print the window letters before reading input
    block: int = 0                  # group output in blocks of N letters, 0 = off


# ────────────────────────────────────────────────────────────────────────
#  1. Helpers
# ────────────────────────────────────────────────────────────────────────


def format_blocks(text: str, block: int) -> str:
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


def run_lines(machine: Enigma, lines: Iterable[str], out: TextIO, cfg: Config) -> None:
    """Encrypt each line in order and print one result per line."""
    for line in lines:
        print(format_blocks(machine.encrypt(line.rstrip("\r\n")), cfg.block), file=out)


# ────────────────────────────────────────────────────────────────────────
#  2. CLI
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt text with a rotor machine")
    p.add_argument("-s", "--settings", metavar="FILE", required=True, help="YAML or JSON settings document")
    p.add_argument("-m", "--message", metavar="TEXT", help="Encrypt TEXT once instead of reading lines from stdin")
    p.add_argument("-k", "--key", metavar="LETTERS", help="Override the starting window letters of the moving wheels")
    p.add_argument("--block", type=int, default=0, help="Group output in blocks of N characters. Default: off")
    p.add_argument("--no-positions", dest="show_positions", action="store_false", help="Do not print the wheel positions")
    p.add_argument("-v", "--verbose", nargs="+", metavar="PART", choices=list(COMPONENTS), default=[], help="Log the given machine parts")
    p.add_argument("--log-file", metavar="FILE", help="Also write log records to FILE")
    return p.parse_args(argv)


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)

    debug = Debug(log_to=args.log_file)
    debug.enable(*args.verbose)

    try:
        machine = build_machine(load_settings(Path(args.settings)))
        if args.key:
            machine.set_positions(list(args.key))
    except (EnigmaError, OSError) as e:
        sys.exit(f"Failed to load settings: {e}")

    cfg = Config(show_positions=args.show_positions, block=args.block)

    if cfg.show_positions:
        print(f"Wheel position: {machine.positions()}")

    # one-shot mode ------------------------------------------------------
    if args.message is not None:
        run_lines(machine, [args.message], sys.stdout, cfg)
        return

    run_lines(machine, sys.stdin, sys.stdout, cfg)


if __name__ == "__main__":
    main()
