"""
.. py:module:: postag.token
   :synopsis: An immutable word/tag pair.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import re
from operator import itemgetter

SEPARATOR = '/'
"""The word/tag delimiter of the tagged line formats."""

ESCAPE = '\\'
"""The escape character of the line formats."""

ESCAPED_SEPARATOR = ESCAPE + SEPARATOR
"""A literal slash inside a word, as it appears in the line formats."""

_ESCAPED = re.compile(r'\\([\\/])')


def Escape(word:str) -> str:
    """Escape any literal backslashes and slashes in a *word* so it can be written as ``word/tag``."""
    return word.replace(ESCAPE, ESCAPE + ESCAPE).replace(SEPARATOR, ESCAPED_SEPARATOR)


def Unescape(word:str) -> str:
    """
    Undo :func:`Escape`; a backslash that does not precede a slash or
    another backslash is kept as it is.
    """
    return _ESCAPED.sub(r'\1', word)


def IsEscaped(text:str, index:int) -> bool:
    """Return ``True`` if the character at *index* in *text* is preceded by an odd number of escapes."""
    start = index

    while start > 0 and text[start - 1] == ESCAPE:
        start -= 1

    return (index - start) % 2 == 1


# noinspection PyPropertyAccess
class Token(tuple):
    """
    A named tuple data structure for tagged tokens.

    Tokens have the following items and attributes:

    0. ``word`` - the (unescaped) token string
    1. ``tag`` - the PoS tag assigned to it
    """

    __slots__ = ()

    #noinspection PyInitNewSignature
    def __new__(cls, word, tag):
        return tuple.__new__(cls, (word, tag))

    def __repr__(self):
        return 'Token(word=%r, tag=%r)' % self

    def __str__(self):
        return '%s%s%s' % (Escape(self[0]), SEPARATOR, self[1])

    #noinspection PyInitNewSignature,PyMethodOverriding
    def __getnewargs__(self):
        return tuple(self)

    word = property(itemgetter(0), doc="get the token string")
    tag = property(itemgetter(1), doc="get the PoS tag")
