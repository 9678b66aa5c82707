"""
.. py:module:: postag.model
   :synopsis: Word/tag frequency tables and the tag probability model derived from them.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
import os
from collections import defaultdict
from operator import itemgetter

from nltk.probability import ConditionalFreqDist, FreqDist, MLEProbDist

MODEL_PATH = os.environ.get("POSTAG_MODEL", "var/postag/probabilities.txt")
"""
The default probability table used by the tagging tool,
or as set by the ``POSTAG_MODEL`` environment variable.
"""


class EmptyModelWarning(UserWarning):
    """
    Issued when tagging with a model that has no known words;
    every word is then handled as an unknown word.
    """


def Rank(entries) -> tuple:
    """
    Order ``(tag, probability)`` *entries* by descending probability.

    Equally probable tags are ordered by their tag string, so the ranking is
    deterministic; no rule depends on the order among such ties.
    """
    return tuple(sorted(((tag, float(p)) for tag, p in entries), key=lambda e: (-e[1], e[0])))


class TagFrequencyTable(object):
    """
    How many times each word occurred with each tag in a training corpus.

    A table is built in one go (see :meth:`fromTokens` and :meth:`fromCounts`)
    and only offers read access afterwards.
    """

    L = logging.getLogger("TagFrequencyTable")

    def __init__(self, counts=None):
        """
        :param counts: a mapping of words to mappings of tags to (non-negative)
                       counts; zero counts are dropped
        """
        self._cfd = ConditionalFreqDist()

        for word, tags in (counts or {}).items():
            for tag, n in tags.items():
                assert n >= 0, "negative count for %s/%s" % (word, tag)

                if n:
                    self._cfd[word][tag] += n

        self.L.debug("counted %s words with %s tokens", len(self), self.N())

    @classmethod
    def fromTokens(cls, tokens) -> 'TagFrequencyTable':
        """
        Count a stream of ``(word, tag)`` observations (e.g., :class:`postag.token.Token` instances).
        """
        return cls._fromDistribution(ConditionalFreqDist((word, tag) for word, tag in tokens))

    @classmethod
    def fromCounts(cls, triples) -> 'TagFrequencyTable':
        """
        Sum up ``(word, tag, count)`` triples, e.g., as read from a count table.
        """
        counts = defaultdict(lambda: defaultdict(int))

        for word, tag, n in triples:
            counts[word][tag] += n

        return cls(counts)

    @classmethod
    def _fromDistribution(cls, cfd):
        table = cls.__new__(cls)
        table._cfd = cfd
        cls.L.debug("counted %s words with %s tokens", len(table), table.N())
        return table

    def __contains__(self, word) -> bool:
        return word in self._cfd

    def __len__(self) -> int:
        return len(self._cfd)

    def __eq__(self, other):
        if isinstance(other, TagFrequencyTable):
            return self.asDict() == other.asDict()
        else:
            return False

    def __repr__(self):
        return "TagFrequencyTable<words={}, tokens={}>".format(len(self), self.N())

    def N(self) -> int:
        """Return the total number of observations counted."""
        return self._cfd.N()

    def words(self) -> list:
        """Return all counted words."""
        return list(self._cfd.conditions())

    def counts(self, word) -> dict:
        """
        Return a copy of the tag counts for a *word*.

        :raises KeyError: if the *word* was never counted
        """
        if word not in self._cfd:
            raise KeyError(word)

        return dict(self._cfd[word])

    def count(self, word, tag) -> int:
        """Return the number of times *word* was seen with *tag* (zero if never)."""
        if word not in self._cfd:
            return 0

        return self._cfd[word][tag]

    def asDict(self) -> dict:
        """Return a `dict` of words to `dict` of tags to counts."""
        return {word: dict(self._cfd[word]) for word in self._cfd.conditions()}


class TagProbabilityModel(object):
    """
    The tags of each known word, ranked by their (maximum-likelihood) probability.

    Unknown words are never defaulted: :meth:`probabilityOf` and
    :meth:`topTag` raise a `KeyError` for them, while the predicates
    (:meth:`contains`, :meth:`containsTag`, :meth:`containsAnyTag`) return
    ``False``.
    """

    L = logging.getLogger("TagProbabilityModel")

    def __init__(self, probabilities:dict):
        """
        :param probabilities: a mapping of words to ``(tag, probability)``
                              sequences in any order
        :raises ValueError: if a word has no tags or a probability is not in (0, 1]
        """
        self._probs = {}
        self._tags = {}

        for word, entries in probabilities.items():
            ranked = Rank(entries)

            if not ranked:
                raise ValueError("no tags for word %r" % word)

            for tag, p in ranked:
                if not 0.0 < p <= 1.0:
                    raise ValueError("probability %r of %s/%s not in (0, 1]" % (p, word, tag))

            self._probs[word] = ranked
            self._tags[word] = frozenset(map(itemgetter(0), ranked))

        self.L.info("model with %s known words", len(self._probs))

    @classmethod
    def fromFrequencies(cls, table:TagFrequencyTable) -> 'TagProbabilityModel':
        """
        Derive the model from a frequency table: each tag's probability is its
        count divided by the total count of the word.
        """
        probabilities = {}

        for word in table.words():
            dist = MLEProbDist(FreqDist(table.counts(word)))
            probabilities[word] = [(tag, dist.prob(tag)) for tag in dist.samples()]

        return cls(probabilities)

    @classmethod
    def fromCounts(cls, triples) -> 'TagProbabilityModel':
        """Derive the model from raw ``(word, tag, count)`` triples."""
        return cls.fromFrequencies(TagFrequencyTable.fromCounts(triples))

    @classmethod
    def fromProbabilities(cls, triples) -> 'TagProbabilityModel':
        """
        Load the model from pre-computed ``(word, tag, probability)`` triples
        in any order.

        :raises ValueError: if a word/tag pair occurs more than once
        """
        probabilities = defaultdict(dict)

        for word, tag, p in triples:
            if tag in probabilities[word]:
                raise ValueError("duplicate probability for %s/%s" % (word, tag))

            probabilities[word][tag] = p

        return cls({word: tags.items() for word, tags in probabilities.items()})

    def __contains__(self, word) -> bool:
        return word in self._probs

    def __len__(self) -> int:
        return len(self._probs)

    def __eq__(self, other):
        if isinstance(other, TagProbabilityModel):
            return self._probs == other._probs
        else:
            return False

    def __repr__(self):
        return "TagProbabilityModel<words={}>".format(len(self))

    def contains(self, word) -> bool:
        """Return ``True`` if the *word* is a known word."""
        return word in self._probs

    def words(self) -> list:
        """Return all known words."""
        return list(self._probs.keys())

    def probabilityOf(self, word) -> tuple:
        """
        Return the ``(tag, probability)`` pairs of a known *word*, most probable first.

        :raises KeyError: if the *word* is unknown
        """
        return self._probs[word]

    def topTag(self, word) -> str:
        """
        Return the most probable tag of a known *word*.

        :raises KeyError: if the *word* is unknown
        """
        return self._probs[word][0][0]

    def containsTag(self, word, tag) -> bool:
        """Return ``True`` if *tag* is any of the candidate tags of the *word*."""
        return word in self._tags and tag in self._tags[word]

    def containsAnyTag(self, word, *tags) -> bool:
        """Return ``True`` if any of the *tags* is a candidate tag of the *word*."""
        return word in self._tags and not self._tags[word].isdisjoint(tags)

    def asDict(self) -> dict:
        """Return a `dict` of words to lists of ``(tag, probability)`` tuples."""
        return {word: list(ranked) for word, ranked in self._probs.items()}
