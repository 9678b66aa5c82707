"""
.. py:module:: postag.evaluate
   :synopsis: Score tagged output against a gold-standard key.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
from collections import namedtuple
from itertools import zip_longest

from nltk.probability import ConditionalFreqDist
from sklearn import metrics


class TokenMismatchError(ValueError):
    """The system output and the key are not aligned token by token."""


Evaluation = namedtuple('Evaluation', 'accuracy confusion total')
Evaluation.__doc__ = """
The ``accuracy`` (a `float`), the ``confusion`` counts as a
:class:`nltk.probability.ConditionalFreqDist` of system tags to key tags,
and the ``total`` number of tokens compared.
"""


def Evaluate(system, key) -> Evaluation:
    """
    Compare the tags of two aligned token streams.

    :param system: the tagger's :class:`postag.token.Token` stream
    :param key: the gold-standard :class:`postag.token.Token` stream
    :raises TokenMismatchError: if the words differ at any position
                                or the streams have different lengths
    :raises ValueError: if both streams are empty
    """
    system_tags = []
    key_tags = []
    confusion = ConditionalFreqDist()

    for idx, (sys_token, key_token) in enumerate(zip_longest(system, key)):
        if sys_token is None or key_token is None:
            raise TokenMismatchError(
                "{} ends early at token {}".format("system" if sys_token is None else "key", idx + 1)
            )

        if sys_token.word != key_token.word:
            raise TokenMismatchError(
                "word mismatch at token {}: system {!r}, key {!r}".format(
                    idx + 1, sys_token.word, key_token.word
                )
            )

        system_tags.append(sys_token.tag)
        key_tags.append(key_token.tag)
        confusion[sys_token.tag][key_token.tag] += 1

    if not key_tags:
        raise ValueError("no tokens to evaluate")

    accuracy = float(metrics.accuracy_score(key_tags, system_tags))
    logging.info("accuracy %.4f over %s tokens", accuracy, len(key_tags))
    return Evaluation(accuracy, confusion, len(key_tags))


def WriteReport(evaluation:Evaluation, stream):
    """
    Write the accuracy followed by one ``SYSTEM KEY: count`` line per
    observed tag combination, sorted by system tag and key tag.
    """
    stream.write("Accuracy: {!r}\n".format(evaluation.accuracy))
    confusion = evaluation.confusion

    for sys_tag in sorted(confusion.conditions()):
        for key_tag in sorted(confusion[sys_tag]):
            stream.write("{} {}: {}\n".format(sys_tag, key_tag, confusion[sys_tag][key_tag]))
