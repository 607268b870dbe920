# main.py
"""
CLI entry point for the OMS client.

Usage:
    python main.py status --order-id ORDER --gtin GTIN
    python main.py codes --order-id ORDER --gtin GTIN --quantity 100
    python main.py close --order-id ORDER --gtin GTIN --last-block-id BLOCK
"""

import argparse
import json
import logging
import sys
from typing import Optional

from pydantic import ValidationError

import config
from clients import build_transport, get_oms_client
from errors import OmsClientError
from schemas import Extension
from utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per OMS operation."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--extension",
        type=Extension,
        choices=list(Extension),
        default=config.OMS_EXTENSION,
        help="Product group namespace (default: %(default)s)",
    )
    common.add_argument("--token", default=config.OMS_CLIENT_TOKEN, help="Client token")
    common.add_argument("--oms-id", default=config.OMS_ID, help="OMS identifier")
    common.add_argument("--order-id", required=True, help="Order identifier")
    common.add_argument("--gtin", required=True, help="Product GTIN")
    common.add_argument("--debug", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(description="Work with OMS IC buffers.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", parents=[common], help="Show buffer status")

    codes = subparsers.add_parser("codes", parents=[common], help="Fetch codes")
    codes.add_argument("--quantity", type=int, required=True, help="Codes to fetch")
    codes.add_argument(
        "--last-block-id",
        default="0",
        help="blockId of the previous block (default: %(default)s)",
    )

    close = subparsers.add_parser("close", parents=[common], help="Close code array")
    close.add_argument(
        "--last-block-id", required=True, help="blockId of the last received block"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Parse arguments, call the OMS, and output results."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.token:
        parser.error("a client token is required (--token or OMS_CLIENT_TOKEN)")
    if not args.oms_id:
        parser.error("an OMS id is required (--oms-id or OMS_ID)")

    setup_logging(level=logging.DEBUG if args.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    logger.info(
        "Command: %s extension=%s order=%s gtin=%s",
        args.command,
        args.extension,
        args.order_id,
        args.gtin,
    )

    transport = build_transport()
    client = get_oms_client(transport)
    try:
        if args.command == "status":
            result = client.get_ic_buffer_status(
                args.extension, args.token, args.oms_id, args.order_id, args.gtin
            )
        elif args.command == "codes":
            result = client.get_ics_from_order(
                args.extension,
                args.token,
                args.oms_id,
                args.order_id,
                args.gtin,
                args.quantity,
                args.last_block_id,
            )
        else:
            result = client.close_ic_array(
                args.extension,
                args.token,
                args.oms_id,
                args.order_id,
                args.gtin,
                args.last_block_id,
            )

        print(json.dumps(result.model_dump(), indent=2))

    except (OmsClientError, ValidationError) as e:
        logger.error("OMS call failed: %s", e)
        print(json.dumps({"error": str(e)}), file=sys.stderr)
        sys.exit(1)
    finally:
        transport.close()


if __name__ == "__main__":
    main()
