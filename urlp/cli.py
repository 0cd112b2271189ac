import sys
import logging
import argparse

from .env import DEBUG, DEMO_URI


def main(argv=None):
    from urlp import ParseFail, match_uri

    ap = argparse.ArgumentParser(prog='urlp', description='Decompose an http(s) URI')
    ap.add_argument('uri', nargs='?', default=DEMO_URI, help='the URI to parse')
    ap.add_argument('-v', '--verbose', help='log every grammar stage', action='store_true')
    ap.add_argument('--color', help='highlight consumed and remaining input', action='store_true')
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or DEBUG) else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        m = match_uri(args.uri)
    except ParseFail as e:
        print('Can not parse {!r}: {}'.format(args.uri, e))
        sys.exit(2)

    m.value.pp()
    print('remaining: {!r}'.format(m.rest))
    if args.color:
        m.pp()


if __name__ == '__main__':
    main()
