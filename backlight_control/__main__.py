import argparse
import logging
import pprint
import sys
from typing import List, Optional

import backlight_control as BLC
from backlight_control import _debug, config
from backlight_control.exceptions import BacklightError, format_exc
from backlight_control.helpers import percentage


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='backlight_control', description='Read and set the brightness of a Linux backlight device'
    )
    parser.add_argument('-d', '--device', default=None, help=f'the backlight device to use (default: {config.DEVICE})')
    parser.add_argument('-r', '--root', default=None, help=f'the sysfs backlight directory (default: {config.SYSFS_ROOT})')
    parser.add_argument('-g', '--get', action='store_true', help='print the maximum, current and percentage brightness')
    parser.add_argument('-m', '--max', action='store_true', help='print the maximum brightness')
    parser.add_argument('-s', '--set', type=int, help='set the brightness to this raw value', metavar='VALUE')
    parser.add_argument(
        '-p', '--percent', type=str, metavar='VALUE',
        help='set the brightness to this percentage (1-100). Prefix with +/- to adjust relative to the current level'
    )
    parser.add_argument('--debug', action='store_true', help='print debugging information about the device')
    parser.add_argument('-v', '--verbose', action='store_true', help='some messages will be more detailed')
    parser.add_argument('-V', '--version', action='store_true', help='print the current version')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.version:
        print(BLC.__version__)
        return 0

    device = config.DEVICE if args.device is None else args.device
    br = BLC.Brightness(device, root=args.root)

    if args.debug:
        pprint.pprint(_debug.info(device=device, root=args.root))
        return 0

    try:
        if args.get:
            print(f'Maximum brightness: {br.get_max_brightness()}')
            print(f'Current brightness: {br.get_brightness()}')
            print(f'Current brightness: {br.get_percent()}%')
        elif args.max:
            print(f'Maximum brightness: {br.get_max_brightness()}')
        elif args.set is not None:
            br.set_brightness(args.set)
        elif args.percent is not None:
            try:
                value = percentage(args.percent, current=br.get_percent)
            except BacklightError:
                raise
            except ValueError as e:
                print(f'Invalid value {args.percent!r}: {e}')
                return 2
            if value < 1 or value > 100:
                print('Invalid value set. Should be between 1 and 100')
                return 2
            br.set_percent(value)
        else:
            print('No valid arguments')
            return 2
    except BacklightError as e:
        if args.verbose:
            print(f'{br.name} -> Failed: {format_exc(e)}')
        else:
            print(f'{br.name} -> Failed: {e}')
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
