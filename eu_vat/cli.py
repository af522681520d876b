"""
Command line interface.

Usage:
    eu-vat 123456789 FR
    eu-vat 123456789 FR --requester-vat 009444452B01 --requester-country NL --json

Exit codes: 0 valid, 1 invalid, 2 service error.
"""

import argparse
import json
import sys

from .config import get_settings
from .core import configure_logging_from_settings
from .domain import VatDetails, VatException
from .infrastructure.europa import EuropaVatClient, normalize_country_code, sanitize_vat_number

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eu-vat",
        description="Validate an EU VAT number against the VIES service",
        epilog="More about VIES: https://ec.europa.eu/taxation_customs/vies/",
    )
    parser.add_argument("vat_number", help="VAT number (country prefix and separators are removed)")
    parser.add_argument("country_code", help="Two-letter country code, e.g. FR")
    parser.add_argument("--requester-vat", dest="requester_vat", help="Requester VAT number (enables approximate match)")
    parser.add_argument("--requester-country", dest="requester_country", help="Requester country code")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override LOG_LEVEL",
    )
    return parser


def format_details(details: VatDetails) -> str:
    """Render details as aligned 'key: value' lines."""
    data = details.to_dict()
    width = max(len(key) for key in data)
    return "\n".join(f"{key.ljust(width)} : {value}" for key, value in data.items())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging_from_settings(settings, level=args.log_level)

    country_code = normalize_country_code(args.country_code)
    vat_number = sanitize_vat_number(args.vat_number, country_code)
    requester_vat = None
    if args.requester_vat:
        requester_vat = sanitize_vat_number(args.requester_vat, args.requester_country)

    try:
        with EuropaVatClient(settings=settings) as client:
            details = client.get_resource_with_requester(
                vat_number,
                country_code,
                requester_vat_number=requester_vat,
                requester_country_code=args.requester_country,
            )
    except VatException as e:
        if args.json:
            print(json.dumps(e.to_dict(), ensure_ascii=False))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(json.dumps(details.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_details(details))

    return EXIT_VALID if details.valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
