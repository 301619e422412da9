"""Command-line interface: ``riesel-llr [options] h n``.

Prints ``prime`` or ``composite`` and exits with

* 0 when ``h * 2^n - 1`` is prime,
* 1 when it is composite,
* 2 on a usage error or an untestable candidate,
* 3 when no start value was found within ``--search-limit``.
"""

from __future__ import annotations

import argparse
import sys

from .candidate import RieselNumber
from .config import MAX_SEARCH, LLRConfig, SeedMethod
from .llr import is_prime
from .logconfig import configure_logging
from .results import Verdict

EXIT_CODES = {
    Verdict.PRIME: 0,
    Verdict.COMPOSITE: 1,
    Verdict.INVALID_INPUT: 2,
    Verdict.SEARCH_EXHAUSTED: 3,
}


def _positive_int(text: str) -> int:
    """Parse decimal, ``0x``, ``0o`` or ``0b`` integers greater than zero."""
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not an integer") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be an integer > 0, got {value}")
    return value


def _log_level(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 3:
        raise argparse.ArgumentTypeError("level must be 0, 1, 2 or 3")
    return value


def _parse_cli(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="riesel-llr",
        description="Lucas-Lehmer-Riesel primality test for numbers of the form h*2^n-1",
    )
    parser.add_argument("h", type=_positive_int, help="power of 2 multiplier (as in h*2^n-1)")
    parser.add_argument("n", type=_positive_int, help="power of 2 (as in h*2^n-1)")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="verbose mode: report V(1), U(2) and the residue every 1000 iterations",
    )
    parser.add_argument(
        "-t",
        dest="terminal_level",
        type=_log_level,
        default=0,
        help="level of logs written to the terminal {0 = none (default); 1 = warning; 2 = info; 3 = debug}",
    )
    parser.add_argument(
        "-f",
        dest="file_level",
        type=_log_level,
        default=0,
        help="level of logs written to .logs/ {0 = none (default); 1 = warning; 2 = info; 3 = debug}",
    )
    parser.add_argument(
        "--method",
        choices=[m.value for m in SeedMethod],
        default=SeedMethod.RODSETH.value,
        help="start value search used when h is a multiple of 3 (default rodseth)",
    )
    parser.add_argument(
        "--search-limit",
        type=_positive_int,
        default=MAX_SEARCH,
        help="maximum number of start value candidates to try",
    )
    parser.add_argument("--progress", action="store_true", help="show a progress bar")
    parser.add_argument("--log-dir", default=".logs", help="directory for -f log files")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_cli(argv)

    terminal_level = args.terminal_level
    if args.verbose and terminal_level < 2:
        terminal_level = 2
    configure_logging(terminal_level, args.file_level, args.log_dir)

    candidate = RieselNumber.from_args(args.h, args.n)
    config = LLRConfig(
        verbose=args.verbose,
        progress_bar=args.progress,
        seed_method=SeedMethod(args.method),
        search_limit=args.search_limit,
    )

    result = is_prime(candidate, config)
    if result.verdict in (Verdict.PRIME, Verdict.COMPOSITE):
        print(result.verdict.value)
    else:
        print(f"riesel-llr: {candidate}: {result.reason}", file=sys.stderr)
    return EXIT_CODES[result.verdict]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
