"""Command-line front end printing the Black-Scholes price and Greeks."""

import argparse
import logging

from pricing.contract import InvalidInputError, parse_option_type
from pricing.pricer import price_option


def _kind(s: str) -> bool:
    try:
        return parse_option_type(s)
    except InvalidInputError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bs-pricer", description="Black-Scholes European option pricer")
    p.add_argument("--kind", type=_kind, default=False, help="call|put (default put)")
    p.add_argument("--spot", type=float, default=80.0)
    p.add_argument("--strike", type=float, default=80.0)
    p.add_argument("--expiry", type=float, default=1.0, help="years")
    p.add_argument("--rate", type=float, default=0.03, help="cont. risk-free")
    p.add_argument("--volatility", type=float, default=0.3)
    p.add_argument("--greeks", action="store_true", help="also print Delta, Gamma, Theta, Vega, Rho")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        result = price_option(args.kind, args.spot, args.strike, args.expiry, args.rate, args.volatility)
    except InvalidInputError as exc:
        parser.error(str(exc))

    print(f"{result.price:.10f}")
    if args.greeks:
        for name, value in result.greeks.as_dict().items():
            print(f"{name}: {value:.10f}")


if __name__ == "__main__":
    main()
