#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import logging
import sys
from argparse import RawTextHelpFormatter

from yonum.config import YorubaNumberConfig, load_config
from yonum.text.cleaners import yoruba_cleaners
from yonum.text.yoruba.formatter import YorubaNumberConverter
from yonum.utils.generic_utils import setup_logger


def str2bool(v):
    if isinstance(v, bool):
        return v
    if v.lower() in ("yes", "true", "t", "y", "1"):
        return True
    if v.lower() in ("no", "false", "f", "n", "0"):
        return False
    raise argparse.ArgumentTypeError("Boolean value expected.")


def main():
    description = """Spell numbers in Yoruba on command line.

## Example Runs

- Cardinal numbers:

    ```
    $ yonum-spell 15 456 1000000
    ```

- Years and money:

    ```
    $ yonum-spell --mode year -44
    $ yonum-spell --mode currency --round true 12.505
    ```

- Expand the numbers inside a sentence:

    ```
    $ yonum-spell --text "Mo ra ìwé 3 ní ₦1,500"
    ```

- Read the options from a config file, command line flags win over it:

    ```
    $ yonum-spell --config_path config.json 2024
    ```
    """
    parser = argparse.ArgumentParser(description=description, formatter_class=RawTextHelpFormatter)
    parser.add_argument("numbers", nargs="*", type=str, help="Numbers to spell.")
    parser.add_argument("--text", type=str, default=None, help="Text whose numbers are expanded.")
    parser.add_argument("--config_path", type=str, default=None, help="Path to a json or yaml config file.")
    parser.add_argument("--mode", type=str, default=None, choices=["cardinal", "year", "currency"], help="Spelling mode.")
    parser.add_argument("--negative_prefix", type=str, default=None, help="Word put in front of negative numbers.")
    parser.add_argument(
        "--decimal_separator",
        type=str,
        default=None,
        choices=["period", "point", "comma"],
        help="Word used for the decimal separator.",
    )
    parser.add_argument("--round", type=str2bool, default=None, help="Round currency amounts to two decimals.")
    parser.add_argument("--verbose", type=str2bool, nargs="?", const=True, default=False, help="Print debug logs.")
    args = parser.parse_args()

    if not args.numbers and args.text is None:
        parser.parse_args(["-h"])

    if args.verbose:
        setup_logger("yonum", level=logging.DEBUG, screen=True)

    config = load_config(args.config_path) if args.config_path else YorubaNumberConfig()
    for name in ("mode", "negative_prefix", "decimal_separator", "round"):
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, value)

    if args.text is not None:
        print(yoruba_cleaners(args.text))
        return

    converter = YorubaNumberConverter(config)
    for number in args.numbers:
        print(converter.convert(number))
    sys.stdout.flush()


if __name__ == "__main__":
    main()
