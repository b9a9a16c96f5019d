#!/usr/bin/env python3
"""
cli.py
Command-line entrypoint: print the multiplicative subgroup of order N mod P.
"""

import argparse
import logging
import random
import sys

from mulgroup.config import DEFAULT_CONFIG, load_config
from mulgroup.errors import SubgroupError
from mulgroup.log import setup_basic_logger
from mulgroup.subgroup import build_subgroup, root_of_unity


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mulgroup",
        description="Compute the multiplicative subgroup of order N modulo prime P.",
    )
    p.add_argument("p", type=int, help="Prime modulus P.")
    p.add_argument("n", type=int, help="Subgroup order N (must divide P-1).")
    p.add_argument(
        "--rounds",
        "-r",
        type=int,
        default=None,
        help="Miller-Rabin rounds for the primality check. Default: 5",
    )
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible sampling. Default: OS entropy.",
    )
    p.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up the generator search after this many candidates.",
    )
    p.add_argument(
        "--config",
        "-c",
        default=None,
        help="Optional JSON config file to override defaults.",
    )
    p.add_argument(
        "--root",
        action="store_true",
        help="Print a primitive N-th root of unity instead of the subgroup.",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log search progress to stderr.",
    )
    return p


def main(argv=None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    cfg = DEFAULT_CONFIG.copy()
    if args.config:
        try:
            cfg = load_config(args.config, base=cfg)
        except (OSError, ValueError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    for key in ("rounds", "seed", "max_attempts"):
        value = getattr(args, key)
        if value is not None:
            cfg[key] = value
    if args.verbose:
        cfg["log_level"] = "DEBUG"

    setup_basic_logger("mulgroup", level=logging.getLevelName(cfg["log_level"]))
    rng = random.Random(cfg["seed"]) if cfg["seed"] is not None else None

    try:
        if args.root:
            result = [root_of_unity(args.p, args.n, rounds=cfg["rounds"], rng=rng,
                                    max_attempts=cfg["max_attempts"])]
        else:
            result = build_subgroup(args.p, args.n, rounds=cfg["rounds"], rng=rng,
                                    max_attempts=cfg["max_attempts"])
    except SubgroupError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(" ".join(str(e) for e in result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
