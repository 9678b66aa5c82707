"""
.. py:module:: postag.rules
   :synopsis: The rule cascade that overrides the baseline tag using the word form and its context.

The cascade is data: two ordered lists of :class:`Rule` tuples, one for
known and one for unknown words. A rule *matches* a word in a given
:class:`Context` and then *resolves* its tag; the first matching rule wins.
If no rule matches, the baseline tag is used.

All context values are tags already assigned to the preceding words in the
same run (never gold tags), or the empty string if there is no such word.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
import re
from collections import namedtuple

from postag.classify import BaselineClassifier, BaselineTag
from postag.penn import NOUN_TAGS, PREDICATE_TAGS, PUNCTUATION_TAGS, VERB_PRECEDING_TAGS, \
    VERB_TAGS

AUXILIARY_WORDS = frozenset({
    "had", "has", "have", "been", "be", "are", "am", "was", "were", "do", "did",
})
"""Words that, among the two preceding words, indicate a past participle."""

ADJECTIVE_SUFFIXES = (
    "able", "ible", "al", "ful", "ic", "ical", "ish", "ive", "less", "ous", "y",
)
"""Suffixes that make an unknown word an adjective."""

_DIGIT = re.compile(r'\d')
_CARDINAL = re.compile(r'\$?[\d.,/:-]+')
_PLURAL_NUMBER = re.compile(r"'?\d+s")
_ALPHANUMERIC = re.compile(r'[\dA-Za-z]+')
_HYPHENATED = re.compile(r'([A-Za-z]+-)+[A-Za-z]+')


class Context(namedtuple('Context', 'secondPriorWord secondPriorTag firstPriorWord '
                                    'firstPriorTag nextWord')):
    """
    The words and assigned tags of the two preceding tokens,
    and the raw word of the following token.
    """

    __slots__ = ()

    def __new__(cls, secondPriorWord='', secondPriorTag='', firstPriorWord='',
                firstPriorTag='', nextWord=''):
        return super(Context, cls).__new__(cls, secondPriorWord, secondPriorTag,
                                           firstPriorWord, firstPriorTag, nextWord)


EMPTY_CONTEXT = Context()
"""The context of a single word without any neighbors."""

Rule = namedtuple('Rule', 'name matches resolve')
Rule.__doc__ = """
A named pair of functions with the signature ``f(model, word, context)``:
``matches`` returns a `bool`, ``resolve`` the tag of the *word* (only
called if the rule matches).
"""


def _AfterAuxiliary(context) -> bool:
    return context.firstPriorWord in AUXILIARY_WORDS or \
        context.secondPriorWord in AUXILIARY_WORDS


def _Participle(model, word, context) -> str:
    return "VBN" if _AfterAuxiliary(context) else "VBD"


def _Ambiguous(first, second):
    """Create a predicate for a word whose top tag is one of the two tags while the other is a candidate."""
    def matches(model, word, context) -> bool:
        top = model.topTag(word)
        return (top == first and model.containsTag(word, second)) or \
            (top == second and model.containsTag(word, first))

    return matches


def _NounOrVerb(model, word, context) -> str:
    if context.firstPriorTag in VERB_PRECEDING_TAGS or \
            (model.topTag(word) in PUNCTUATION_TAGS and
             context.secondPriorTag in VERB_PRECEDING_TAGS):
        return "VB"
    else:
        return "NN"


def _AdverbOrParticle(model, word, context) -> str:
    return "RP" if context.firstPriorTag in VERB_TAGS else "RB"


def _Is(literal):
    def matches(model, word, context) -> bool:
        return word == literal

    return matches


def _That(model, word, context) -> str:
    if context.firstPriorTag in VERB_TAGS:
        return "IN"
    # the next word is tagged by the baseline, never by the rules
    elif BaselineTag(model, context.nextWord) in PREDICATE_TAGS:
        return "WDT"
    elif context.firstPriorTag == "IN" or context.firstPriorTag in PUNCTUATION_TAGS:
        return "DT"
    else:
        return model.topTag(word)


def _PossessiveOrVerb(model, word, context) -> str:
    return "POS" if context.firstPriorTag in NOUN_TAGS else "VBZ"


KNOWN_WORD_RULES = (
    Rule("participle",
         lambda model, word, context: model.topTag(word) in ("VBD", "VBN") and
         model.containsTag(word, "VBD") and model.containsTag(word, "VBN"),
         _Participle),
    Rule("noun-verb", _Ambiguous("NN", "VB"), _NounOrVerb),
    Rule("adverb-particle", _Ambiguous("RB", "RP"), _AdverbOrParticle),
    Rule("that", _Is("that"), _That),
    Rule("apostrophe-s", _Is("'s"), _PossessiveOrVerb),
)
"""The rules for words in the model, in order of priority."""


def DigitTag(word:str) -> str:
    """
    Return the tag of an unknown *word* containing a digit,
    or ``None`` if the word has no digit.
    """
    if not _DIGIT.search(word):
        return None
    elif _CARDINAL.fullmatch(word):
        return "CD"
    elif _PLURAL_NUMBER.fullmatch(word):
        return "NNS"
    elif _ALPHANUMERIC.fullmatch(word):
        return "NNP"
    else:
        # any digit-only word is a cardinal, so a non-digit is present
        return "JJ"


def _SingularTag(model, word):
    if word.endswith("s") and model.contains(word[:-1]):
        return model.topTag(word[:-1])
    else:
        return None


def _Plural(model, word, context) -> str:
    return "NNS" if _SingularTag(model, word) == "NN" else "NNPS"


def _Capitalized(model, word, context) -> bool:
    return "A" <= word[:1] <= "Z"


def _LowerCased(model, word, context) -> str:
    lower = word.lower()
    return model.topTag(lower) if model.contains(lower) else "NNPS"


def _Adjective(model, word, context) -> bool:
    return bool(_HYPHENATED.fullmatch(word)) or word.endswith(ADJECTIVE_SUFFIXES)


def _Suffix(suffix):
    def matches(model, word, context) -> bool:
        return word.endswith(suffix)

    return matches


def _Constant(tag):
    def resolve(model, word, context) -> str:
        return tag

    return resolve


UNKNOWN_WORD_RULES = (
    Rule("number",
         lambda model, word, context: _DIGIT.search(word) is not None,
         lambda model, word, context: DigitTag(word)),
    Rule("plural-of-known",
         lambda model, word, context: _SingularTag(model, word) in ("NN", "NNP"),
         _Plural),
    Rule("capitalized", _Capitalized, _LowerCased),
    Rule("adjective", _Adjective, _Constant("JJ")),
    Rule("gerund", _Suffix("ing"), _Constant("VBG")),
    Rule("past", _Suffix("ed"), _Participle),
    # any other unknown word is a noun; the singular is the baseline default
    Rule("plural", _Suffix("s"), _Constant("NNS")),
)
"""The rules for words not in the model, in order of priority."""


class RuleCascadeClassifier(object):
    """
    Tag words by the first matching rule of the cascade, falling back to
    the :class:`postag.classify.BaselineClassifier` if no rule matches.
    """

    L = logging.getLogger("RuleCascadeClassifier")

    def __init__(self, model, known_rules=KNOWN_WORD_RULES, unknown_rules=UNKNOWN_WORD_RULES):
        """
        :param model: the :class:`postag.model.TagProbabilityModel` to use
        :param known_rules: ordered rules for words in the model
        :param unknown_rules: ordered rules for words not in the model
        """
        self.model = model
        self.baseline = BaselineClassifier(model)
        self.known_rules = tuple(known_rules)
        self.unknown_rules = tuple(unknown_rules)

    def rulesFor(self, word) -> tuple:
        """Return the rule branch applicable to the *word*."""
        return self.known_rules if self.model.contains(word) else self.unknown_rules

    def decide(self, word, context=EMPTY_CONTEXT) -> (str, str):
        """
        Return the tag of the *word* in its *context*, together with the name
        of the rule that decided it (or ``None`` if the baseline did).
        """
        for rule in self.rulesFor(word):
            if rule.matches(self.model, word, context):
                tag = rule.resolve(self.model, word, context)
                self.L.debug("rule %s tagged %r as %s", rule.name, word, tag)
                return tag, rule.name

        return self.baseline.classify(word), None

    def classify(self, word, context=EMPTY_CONTEXT) -> str:
        """Return the tag of the *word* in its *context*."""
        return self.decide(word, context)[0]
