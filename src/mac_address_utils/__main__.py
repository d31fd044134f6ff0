"""Command-line entry point for MAC address utilities."""

import argparse
import os
import sys

from dotenv import load_dotenv

from .address import MacAddress
from .config import Config
from .interfaces import InterfaceNotFoundError, SysfsInterfaceDirectory, get_mac_address
from .logging_config import setup_logging
from .mac_utils import MacAddressError, are_equal, is_mac_address, reverse_mac_address, to_buffer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mac-utils",
        description="Validate, convert and compare MAC addresses",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["text", "json", "kv"],
        help="Log format (default: LOG_FORMAT or text)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    validate = commands.add_parser("validate", help="Check that addresses are valid")
    validate.add_argument("macs", nargs="+", metavar="MAC")

    normalize = commands.add_parser("normalize", help="Print the canonical form")
    normalize.add_argument("mac", metavar="MAC")
    normalize.add_argument(
        "--separator",
        choices=[":", "-"],
        default=None,
        help="Output separator (default: MAC_SEPARATOR or ':')",
    )

    reverse = commands.add_parser("reverse", help="Reverse the octet order")
    reverse.add_argument("mac", metavar="MAC")

    equal = commands.add_parser("equal", help="Compare addresses")
    equal.add_argument("macs", nargs="+", metavar="MAC")

    hex_cmd = commands.add_parser("hex", help="Print the 12 hex digits of the address")
    hex_cmd.add_argument("mac", metavar="MAC")

    commands.add_parser("interfaces", help="List network interfaces")
    commands.add_parser("active", help="Print the active interface's MAC address")

    return parser


def run(args: argparse.Namespace, config: Config) -> int:
    """Execute a parsed command, returning the exit code."""
    if args.command == "validate":
        code = 0
        for mac in args.macs:
            valid = is_mac_address(mac)
            print(f"{mac}\t{'valid' if valid else 'invalid'}")
            if not valid:
                code = 1
        return code

    if args.command == "normalize":
        print(MacAddress.from_string(args.mac).to_string(args.separator or config.separator))
        return 0

    if args.command == "reverse":
        print(reverse_mac_address(args.mac))
        return 0

    if args.command == "equal":
        equal = are_equal(*args.macs)
        print("equal" if equal else "different")
        return 0 if equal else 1

    if args.command == "hex":
        print(to_buffer(args.mac).hex().upper())
        return 0

    directory = SysfsInterfaceDirectory.from_config(config)

    if args.command == "interfaces":
        for interface in directory.list_interfaces():
            print(f"{interface.name}\t{MacAddress.from_string(interface.mac_address)}")
        return 0

    print(MacAddress.from_string(get_mac_address(directory=directory)).to_string(config.separator))
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if os.path.exists(args.env_file):
        load_dotenv(args.env_file)

    config = Config.from_env()
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format

    try:
        config.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(level=config.log_level, format_type=config.log_format)

    try:
        code = run(args, config)
    except MacAddressError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except InterfaceNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
