# Copyright (c) 2026, py-fips202 developers

"""Command line interface: print SHA3 digests of a hex message or a file."""

# Load standard packages
import argparse
import sys

# Load local packages
from .sha3 import HASH_FUNCTIONS, HashFunction


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='py-fips202',
        description='Compute SHA3 digests (FIPS PUB 202).',
    )
    parser.add_argument('message', nargs='?',
                        help='message as a hexadecimal string (default: empty)')
    parser.add_argument('-f', '--file', help='hash the raw contents of a file instead')
    parser.add_argument('-a', '--algorithm', choices=sorted(HASH_FUNCTIONS), default='sha3-256')
    parser.add_argument('--all', action='store_true', help='print the digests of all four functions')
    parser.add_argument('-v', '--verbose', action='store_true', help='report sponge progress on stderr')
    return parser


def compute(h: HashFunction, args: argparse.Namespace) -> str:
    """Compute a single digest as requested on the command line."""
    if args.file is None:
        return h.hexdigest(args.message or '', verbose=args.verbose)
    with open(args.file, 'rb') as f:
        return h.digest(f.read(), verbose=args.verbose).hex()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.file is not None and args.message is not None:
        print('error: give either a message or --file, not both', file=sys.stderr)
        return 2
    functions = list(HASH_FUNCTIONS.values()) if args.all else [HASH_FUNCTIONS[args.algorithm]]
    try:
        digests = [(h.name, compute(h, args)) for h in functions]
    except (ValueError, OSError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 1
    for name, digest in digests:
        print(f'{name}: {digest}' if args.all else digest)
    return 0


if __name__ == '__main__':
    sys.exit(main())
