#!/usr/bin/env python3

"""tag raw words (one per line) with their part-of-speech using a tag probability table"""

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

from postag.corpus import ReadCounts, ReadProbabilities, ReadWords, WriteTokens
from postag.model import MODEL_PATH, TagProbabilityModel
from postag.pipeline import ENHANCED, MODES, TaggingPipeline

__author__ = 'Florian Leitner'
__version__ = '1.0'


def main(model_file, input_streams, output, mode=ENHANCED, counts=False):
    """
    :param model_file: path of the probability (or count) table
    :param input_streams: raw word streams to tag
    :param output: stream to write the word/tag lines to
    :param mode: the tagging mode
    :param counts: the model file is a count table
    """
    with open(model_file) as stream:
        if counts:
            model = TagProbabilityModel.fromCounts(ReadCounts(stream))
        else:
            model = TagProbabilityModel.fromProbabilities(ReadProbabilities(stream))

    pipeline = TaggingPipeline(model, mode)

    for words in input_streams:
        logging.debug('tagging %s', getattr(words, 'name', words))
        n = WriteTokens(pipeline.run(ReadWords(words)), output)
        logging.info('tagged %s words', n)

    return 0


if __name__ == '__main__':
    from argparse import ArgumentParser

    epilog = 'system (default) encoding: {}'.format(sys.getdefaultencoding())
    parser = ArgumentParser(
        usage='%(prog)s [options] [FILE ...]',
        description=__doc__, epilog=epilog,
        prog=os.path.basename(sys.argv[0])
    )

    parser.set_defaults(loglevel=logging.WARNING)
    parser.add_argument(
        'files', metavar='FILE', nargs='*', type=open,
        help='raw word file(s); if absent, read from <STDIN>'
    )
    parser.add_argument(
        '-m', '--model', metavar='TABLE', default=MODEL_PATH,
        help='tag probability table [%(default)s; env: POSTAG_MODEL]'
    )
    parser.add_argument(
        '--mode', choices=sorted(MODES), default=ENHANCED,
        help='baseline (0) or rule-enhanced (1) tagging [%(default)s]'
    )
    parser.add_argument(
        '-c', '--counts', action='store_true',
        help='the model TABLE has word/tag count lines'
    )
    parser.add_argument(
        '-o', '--output', metavar='FILE', type=lambda f: open(f, 'w'),
        default=sys.stdout, help='write the tagged words to FILE [STDOUT]'
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
        status = main(args.model, args.files or [sys.stdin], args.output,
                      args.mode, args.counts)
    except Exception:
        logging.exception("unexpected program error")
        sys.exit(1)

    sys.exit(status)
