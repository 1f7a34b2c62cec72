"""ffpoly is a Python package for exact arithmetic over finite fields.

Prime fields GF(p) and their extensions GF(p^d), defined by an irreducible
polynomial over GF(p), are provided by module finfields. Dense univariate
polynomials over any of these fields are provided by module polys, including
division with remainder, extended GCD, Lagrange interpolation, and
error-tolerant interpolation (unique decoding of Reed-Solomon style codes).

All arithmetic is available via Python's operator overloading.
Module random provides a seedable pseudorandom source for generating field
elements and polynomials, e.g., for tests and demos.
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments recognized by ffpoly."""
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('ffpoly configuration')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(log_level=os.getenv('FFPOLY_LOGLEVEL', 'warning'))
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.CRITICAL)
    else:
        ch = (options.log_level or 'w')[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    del options
