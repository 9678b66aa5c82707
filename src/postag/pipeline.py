"""
.. py:module:: postag.pipeline
   :synopsis: Stream words through a classifier while maintaining the context window.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
import warnings

from postag.classify import BaselineClassifier
from postag.model import EmptyModelWarning
from postag.rules import Context, RuleCascadeClassifier
from postag.token import Token

BASELINE = "baseline"
ENHANCED = "enhanced"

MODES = {
    BASELINE: BaselineClassifier,
    ENHANCED: RuleCascadeClassifier,
    "0": BaselineClassifier,
    "1": RuleCascadeClassifier,
}
"""
Tagging modes and their classifiers;
"0" and "1" are the numeric selectors accepted on the command line.
"""


class UnknownModeError(ValueError):
    """An unsupported tagging mode was requested."""

    def __init__(self, mode):
        super(UnknownModeError, self).__init__(
            "unknown tagging mode {!r} (use one of {})".format(mode, ", ".join(sorted(MODES)))
        )
        self.mode = mode


class ContextWindow(object):
    """
    The two most recent words and the tags assigned to them.

    Empty strings stand in for words before the start of the stream.
    """

    __slots__ = ('secondPriorWord', 'secondPriorTag', 'firstPriorWord', 'firstPriorTag')

    def __init__(self):
        self.secondPriorWord = ''
        self.secondPriorTag = ''
        self.firstPriorWord = ''
        self.firstPriorTag = ''

    def __repr__(self):
        return "ContextWindow<{}/{} {}/{}>".format(self.secondPriorWord, self.secondPriorTag,
                                                   self.firstPriorWord, self.firstPriorTag)

    def context(self, next_word='') -> Context:
        """Return the rule :class:`postag.rules.Context` for the current word."""
        return Context(self.secondPriorWord, self.secondPriorTag,
                       self.firstPriorWord, self.firstPriorTag, next_word)

    def shift(self, word, tag):
        """Drop the oldest word/tag pair and push the given one as the most recent."""
        self.secondPriorWord = self.firstPriorWord
        self.secondPriorTag = self.firstPriorTag
        self.firstPriorWord = word
        self.firstPriorTag = tag


def Lookahead(iterable) -> iter:
    """
    Yield ``(item, next_item)`` pairs, with the empty string as the next item of the last one.
    """
    it = iter(iterable)

    try:
        current = next(it)
    except StopIteration:
        return

    for following in it:
        yield current, following
        current = following

    yield current, ''


class TaggingPipeline(object):
    """
    Tag a stream of words in a single forward pass.

    The model may be shared between pipelines; the context window is
    created anew for each :meth:`run`.
    """

    L = logging.getLogger("TaggingPipeline")

    def __init__(self, model, mode=ENHANCED):
        """
        :param model: the :class:`postag.model.TagProbabilityModel` to use
        :param mode: ``"baseline"`` or ``"enhanced"`` (or ``0``/``1``)
        :raises UnknownModeError: if the mode is not supported
        """
        key = str(mode).strip().lower()

        if key not in MODES:
            raise UnknownModeError(mode)

        self.mode = BASELINE if MODES[key] is BaselineClassifier else ENHANCED
        self.model = model
        self.classifier = MODES[key](model)
        self.L.info("%s tagging with %s known words", self.mode, len(model))

        if len(model) == 0:
            self.L.info("empty model: all words are unknown")
            warnings.warn("tagging with an empty model: all words are unknown",
                          EmptyModelWarning, stacklevel=2)

    def run(self, words) -> iter:
        """
        Yield a :class:`postag.token.Token` for each word in *words*, in order.
        """
        window = ContextWindow()
        count = 0

        for word, next_word in Lookahead(words):
            tag = self.classifier.classify(word, window.context(next_word))
            yield Token(word, tag)
            window.shift(word, tag)
            count += 1

        self.L.debug("tagged %s words", count)

    def tagTokens(self, words) -> list:
        """Return the list of tagged tokens for all *words*."""
        return list(self.run(words))
