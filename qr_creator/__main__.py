import argparse
import logging
import sys

from .config import DEFAULT_TEXT, DEFAULT_VERSION, RenderConfig
from .exceptions import QRCreatorError
from .qr_code import QRcode


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='qr_creator', description='Creates a QR code image (byte mode, level L)')
    parser.add_argument('text', nargs='?', default=DEFAULT_TEXT)
    parser.add_argument('--version', type=int, default=DEFAULT_VERSION)
    parser.add_argument('--mask', type=int, default=None, help='skip the search and use this mask')
    parser.add_argument('--scale', type=int, default=RenderConfig.scale)
    parser.add_argument('--output', default=RenderConfig.output)
    parser.add_argument('-v', '--verbose', action='store_true')

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        qr = QRcode(data=args.text, version=args.version, mask=args.mask,
                    config=RenderConfig(scale=args.scale, output=args.output))
    except QRCreatorError as error:
        print('qr_creator: %s' % error, file=sys.stderr)
        return 2

    qr.save()

    return 0


if __name__ == '__main__':
    sys.exit(main())
