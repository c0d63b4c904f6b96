#!/usr/bin/env python3

import argparse
import sys

from kitchen_inventory.kitchendata import load_dishes, load_config, Config
from kitchen_inventory.kitchen import Kitchen


def parse_cli_args():
    parser = argparse.ArgumentParser(description="Kitchen dish inventory report")

    parser.add_argument("-d", "--debug_level", help=f"Debug level (default: 0), 1-verbose, 2-debug", type=int, default=0)

    parser.add_argument("-i", "--dishes", help=f"Specify input file with dishes (json)", required=True)
    parser.add_argument("-c", "--config", help=f"Specify custom config file (json); unlimited capacity if omitted", default=None)

    return parser.parse_args()


def main():
    args = parse_cli_args()

    dishes = load_dishes(args.dishes, errors_sink = sys.stderr)

    if args.config:
        config = load_config(args.config, errors_sink = sys.stderr)
    else:
        config = Config()

    if dishes is None or config is None:
        sys.exit(1) # exit code passed to shell

    Kitchen(config).run(dishes, args.debug_level)


if __name__ == "__main__":
    main()
