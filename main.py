# main.py
from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from dataclasses import dataclass

from debug import Debug
from errors import EnigmaError
from machine import Machine
from suites import legacy_machine
from utilities import load_config, process_messages

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches for one simulator run."""

    verbose: bool = False           # trace every converted symbol
    block: int = 5                  # output group width
    log_file: str | None = None     # also send the trace to this file


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt messages with an Enigma machine")
    p.add_argument("-c", "--config", metavar="FILE", help="Machine configuration (text or .json). Default: the built-in historical wheel set.")
    p.add_argument("-i", "--input", metavar="FILE", help="Messages to process. Default: standard input.")
    p.add_argument("-o", "--output", metavar="FILE", help="Where processed messages go. Default: standard output.")
    p.add_argument("--verbose", action="store_true", help="Log rotor window and plugboard path of every symbol.")
    p.add_argument("--block", type=int, default=5, help="Output group width. Default: 5")
    p.add_argument("--log-file", metavar="FILE", help="Also write log messages to FILE.")
    return p.parse_args(argv)


def build_machine(config_path: str | None) -> Machine:
    if config_path is None:
        return legacy_machine()
    return load_config(config_path)


def run(args: argparse.Namespace) -> None:
    cfg = Config(verbose=args.verbose, block=args.block, log_file=args.log_file)
    if cfg.block < 1:
        raise EnigmaError(f"Group width must be positive, got {cfg.block}")

    if cfg.verbose or cfg.log_file:
        Debug.configure(log_to=cfg.log_file)
    if cfg.verbose:
        debug.enable("convert")

    machine = build_machine(args.config)

    with ExitStack() as stack:
        try:
            src = (
                stack.enter_context(open(args.input, encoding="utf-8"))
                if args.input else sys.stdin
            )
            dst = (
                stack.enter_context(open(args.output, "w", encoding="utf-8"))
                if args.output else sys.stdout
            )
        except OSError as e:
            raise EnigmaError(f"could not open {e.filename}") from None

        for line in process_messages(machine, src, cfg.block):
            print(line, file=dst)


# ────────────────────────────────────────────────────────────────────────
#  2. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        run(args)
    except EnigmaError as e:
        sys.exit(f"Error: {e}")


if __name__ == "__main__":
    main()
