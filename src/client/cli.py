#!/usr/bin/env python3
"""
Fibonacci device exerciser.

Drives an AccessGateway the same way a user-space client drives the
character device:
- write a test payload offset + 1 times
- seek to every index 0..offset and read F(index)
- repeat the reads in reverse order

Exit Codes:
===========
- 0: Success
- 1: Device busy
- 2: Invalid configuration
- 3: Engine error (capacity overflow)
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from src.core.contracts import validate_read_result
from src.core.domain import ReadResult, SeekMode
from src.core.math import BIGDECIMAL_CAPACITY_DEFAULT, CapacityOverflowError, OverflowPolicy
from src.engine import MAX_N_DEFAULT, EngineConfig, SequenceEngine
from src.gateway import AccessGateway, DeviceBusyError

DEVICE_NAME = "fibonacci"
WRITE_PAYLOAD = b"testing writing"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fibclient",
        description="Exercise the Fibonacci device: write, then read forward and backward.",
    )
    parser.add_argument(
        "--offset",
        type=int,
        default=MAX_N_DEFAULT,
        help="Highest index to read (default: %(default)s)",
    )
    parser.add_argument(
        "--max-n",
        type=int,
        default=MAX_N_DEFAULT,
        help="Device ceiling MAX_N (default: %(default)s)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=BIGDECIMAL_CAPACITY_DEFAULT,
        help="BigDecimal capacity in digits (default: %(default)s)",
    )
    parser.add_argument(
        "--overflow-policy",
        choices=[p.value for p in OverflowPolicy],
        default=OverflowPolicy.RAISE.value,
        help="Carry overflow handling (default: %(default)s)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print each read as a read_result JSON object",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)",
    )
    return parser


def _print_read(index: int, result: ReadResult, as_json: bool) -> None:
    if as_json:
        payload = result.to_contract_dict()
        validate_read_result(payload)
        print(json.dumps(payload))
    else:
        print(
            f"Reading from {DEVICE_NAME} at offset {index}, "
            f"returned the sequence {result.text}."
        )


def run(gateway: AccessGateway, offset: int, as_json: bool = False) -> None:
    """Write/read-forward/read-backward sequence against an open gateway."""
    for _ in range(offset + 1):
        sz = gateway.write(WRITE_PAYLOAD)
        if not as_json:
            print(f"Writing to {DEVICE_NAME}, returned the sequence {sz}")

    for i in range(offset + 1):
        gateway.seek(i, SeekMode.ABSOLUTE)
        _print_read(i, gateway.read(), as_json)

    for i in range(offset, -1, -1):
        gateway.seek(i, SeekMode.ABSOLUTE)
        _print_read(i, gateway.read(), as_json)


def main(argv: Optional[Sequence[str]] = None, gateway: Optional[AccessGateway] = None) -> int:
    """CLI entrypoint. Returns process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.offset < 0:
        print(f"ERROR: --offset must be non-negative, got {args.offset}", file=sys.stderr)
        return 2

    if gateway is None:
        try:
            config = EngineConfig(
                max_n=args.max_n,
                capacity=args.capacity,
                overflow_policy=args.overflow_policy,
            )
        except ValueError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2
        gateway = AccessGateway(SequenceEngine(config))

    try:
        gateway.open_session()
    except DeviceBusyError as e:
        print(f"Failed to open character device: {e}", file=sys.stderr)
        return 1

    try:
        run(gateway, args.offset, as_json=args.json)
    except CapacityOverflowError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 3
    finally:
        gateway.close_session()

    return 0


if __name__ == "__main__":
    sys.exit(main())
