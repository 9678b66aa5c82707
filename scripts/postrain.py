#!/usr/bin/env python3

"""count a tagged corpus (one word/tag per line) and write its tag probability table"""

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import sys

from postag.corpus import ReadTokens, WriteCounts, WriteProbabilities
from postag.model import TagFrequencyTable, TagProbabilityModel

__author__ = 'Florian Leitner'
__version__ = '1.0'


def main(corpora, output, counts=False):
    """
    :param corpora: tagged corpus streams
    :param output: stream to write the table to
    :param counts: write raw counts instead of probabilities
    """
    tokens = (token for stream in corpora for token in ReadTokens(stream))
    table = TagFrequencyTable.fromTokens(tokens)
    logging.info("counted %s tokens of %s words", table.N(), len(table))

    if counts:
        lines = WriteCounts(table, output)
    else:
        lines = WriteProbabilities(TagProbabilityModel.fromFrequencies(table), output)

    logging.info("wrote %s lines", lines)
    return 0


if __name__ == '__main__':
    from argparse import ArgumentParser

    epilog = 'system (default) encoding: {}'.format(sys.getdefaultencoding())
    parser = ArgumentParser(
        usage='%(prog)s [options] [CORPUS ...]',
        description=__doc__, epilog=epilog,
        prog=os.path.basename(sys.argv[0])
    )

    parser.set_defaults(loglevel=logging.WARNING)
    parser.add_argument(
        'files', metavar='CORPUS', nargs='*', type=open,
        help='tagged corpus file(s); if absent, read from <STDIN>'
    )
    parser.add_argument(
        '-o', '--output', metavar='FILE', type=lambda f: open(f, 'w'),
        default=sys.stdout, help='write the table to FILE [STDOUT]'
    )
    parser.add_argument(
        '-c', '--counts', action='store_true',
        help='write word/tag count lines instead of probabilities'
    )
    parser.add_argument('--version', action='version', version=__version__)
    parser.add_argument(
        '--error', action='store_const', const=logging.ERROR,
        dest='loglevel', help='error log level only [warn]'
    )
    parser.add_argument(
        '--info', action='store_const', const=logging.INFO,
        dest='loglevel', help='info log level [warn]'
    )
    parser.add_argument(
        '--debug', action='store_const', const=logging.DEBUG,
        dest='loglevel', help='debug log level [warn]'
    )
    parser.add_argument('--logfile', metavar='FILE', help='log to file, not STDERR')

    args = parser.parse_args()
    logging.basicConfig(
        filename=args.logfile, level=args.loglevel,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    try:
        status = main(args.files or [sys.stdin], args.output, args.counts)
    except Exception:
        logging.exception("unexpected program error")
        sys.exit(1)

    sys.exit(status)
