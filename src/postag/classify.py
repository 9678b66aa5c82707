"""
.. py:module:: postag.classify
   :synopsis: The baseline most-likely-tag classifier.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging

DEFAULT_TAG = "NN"
"""The tag of any unknown word in baseline mode: a singular common noun."""


def BaselineTag(model, word) -> str:
    """Return the most probable tag of a known *word*, or :data:`DEFAULT_TAG`."""
    return model.topTag(word) if model.contains(word) else DEFAULT_TAG


class BaselineClassifier(object):
    """
    Tag known words with their most probable tag and unknown words with
    :data:`DEFAULT_TAG`, ignoring any context.
    """

    L = logging.getLogger("BaselineClassifier")

    def __init__(self, model):
        """
        :param model: the :class:`postag.model.TagProbabilityModel` to use
        """
        self.model = model

    def usesModel(self, word) -> bool:
        """Return ``True`` if the tag of the *word* comes from the model."""
        return self.model.contains(word)

    def classify(self, word, context=None) -> str:
        """
        Return the tag for a *word*; the *context* is accepted for interface
        compatibility with :class:`postag.rules.RuleCascadeClassifier` and ignored.
        """
        return BaselineTag(self.model, word)
