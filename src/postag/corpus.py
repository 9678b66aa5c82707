"""
.. py:module:: postag.corpus
   :synopsis: Readers and writers for tagged corpora, probability tables, and raw word streams.

All line formats share the ``word/tag`` convention: the tag delimiter is the
last unescaped slash on the line; slashes and backslashes that are part of
the word are escaped as ``\\/`` and ``\\\\``. Readers yield unescaped
words; writers escape them again.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
from nltk.tag import str2tuple

from postag.token import Token, Escape, IsEscaped, Unescape, SEPARATOR

logger = logging.getLogger(__name__)


class MalformedRecordError(ValueError):
    """
    A line of a corpus or table that cannot be parsed.

    Malformed lines are never skipped, as that would silently distort the
    counts or probabilities read from the file.
    """

    def __init__(self, reason, source, lineno, line):
        super(MalformedRecordError, self).__init__(
            "line {} in {} malformed ({}): {!r}".format(lineno, source, reason, line)
        )
        self.reason = reason
        self.source = source
        self.lineno = lineno
        self.line = line


def _SourceName(stream) -> str:
    return getattr(stream, 'name', '<stream>')


def _Lines(stream):
    """Yield ``(lineno, stripped line)`` tuples for all non-blank lines of a *stream*."""
    for lno, line in enumerate(stream):
        if lno == 0 and line and ord(line[0]) == 0xFEFF:
            line = line[1:]

        stripped = line.strip()

        if stripped:
            yield lno + 1, stripped


def SplitTagged(text:str) -> (str, str):
    """
    Split a ``word/tag`` string at its last unescaped slash.

    :param text: the tagged string
    :return: the unescaped word and the tag, or ``None`` if *text* is no
             well-formed ``word/tag`` string
    """
    word, tag = str2tuple(text, SEPARATOR)

    # an escaped delimiter means there is no tag at all
    if not tag or not word or IsEscaped(text, len(word)):
        return None

    return Unescape(word), tag


def ReadTokens(stream) -> iter:
    """
    Yield a :class:`postag.token.Token` for each ``word/tag`` line in the *stream*.

    :raises MalformedRecordError: at the first line that has no tag
    """
    source = _SourceName(stream)
    count = 0

    for lno, line in _Lines(stream):
        pair = SplitTagged(line)

        if pair is None:
            raise MalformedRecordError('no word/tag', source, lno, line)

        count += 1
        yield Token(*pair)

    logger.debug('read %s tokens from %s', count, source)


def _ReadTable(stream, convert, what):
    source = _SourceName(stream)

    for lno, line in _Lines(stream):
        items = line.rsplit(None, 1)

        if len(items) != 2:
            raise MalformedRecordError('no ' + what, source, lno, line)

        pair = SplitTagged(items[0])

        if pair is None:
            raise MalformedRecordError('no word/tag', source, lno, line)

        try:
            value = convert(items[1])
        except ValueError:
            raise MalformedRecordError('illegal ' + what, source, lno, line)

        yield pair[0], pair[1], value, (source, lno, line)


def _Probability(text:str) -> float:
    value = float(text)

    if not 0.0 < value <= 1.0:
        raise ValueError('probability %s not in (0, 1]' % text)

    return value


def _Count(text:str) -> int:
    value = int(text)

    if value < 1:
        raise ValueError('count %s not positive' % text)

    return value


def ReadProbabilities(stream) -> iter:
    """
    Yield ``(word, tag, probability)`` triples from ``word/tag probability`` lines.

    The lines may come in any order (the training tool writes them in
    ascending order of probability).

    :raises MalformedRecordError: at the first line that does not parse, that
                                  has a probability outside (0, 1], or that
                                  repeats a word/tag pair
    """
    seen = set()

    for word, tag, probability, (source, lno, line) in _ReadTable(stream, _Probability,
                                                                  'probability'):
        if (word, tag) in seen:
            raise MalformedRecordError('duplicate word/tag', source, lno, line)

        seen.add((word, tag))
        yield word, tag, probability

    logger.debug('read %s probabilities from %s', len(seen), _SourceName(stream))


def ReadCounts(stream) -> iter:
    """
    Yield ``(word, tag, count)`` triples from ``word/tag count`` lines.

    :raises MalformedRecordError: at the first line that does not parse or
                                  has a count that is not a positive integer
    """
    for word, tag, count, _ in _ReadTable(stream, _Count, 'count'):
        yield word, tag, count


def ReadWords(stream) -> iter:
    """Yield the unescaped raw word on each non-blank line of the *stream*."""
    for _, line in _Lines(stream):
        yield Unescape(line)


def WriteTokens(tokens, stream) -> int:
    """
    Write each token as a ``word/tag`` line to the *stream*.

    :return: the number of tokens written
    """
    count = 0

    for token in tokens:
        stream.write(str(token))
        stream.write('\n')
        count += 1

    return count


def WriteProbabilities(model, stream) -> int:
    """
    Write a :class:`postag.model.TagProbabilityModel` as ``word/tag probability`` lines.

    Lines are ordered by ascending probability, ties by word and tag.

    :return: the number of lines written
    """
    rows = sorted(
        (probability, word, tag)
        for word in model.words()
        for tag, probability in model.probabilityOf(word)
    )

    for probability, word, tag in rows:
        stream.write('{}{}{} {!r}\n'.format(Escape(word), SEPARATOR, tag, probability))

    return len(rows)


def WriteCounts(table, stream) -> int:
    """
    Write a :class:`postag.model.TagFrequencyTable` as ``word/tag count`` lines,
    ordered by word and tag.

    :return: the number of lines written
    """
    count = 0

    for word in sorted(table.words()):
        for tag, n in sorted(table.counts(word).items()):
            stream.write('{}{}{} {}\n'.format(Escape(word), SEPARATOR, tag, n))
            count += 1

    return count
