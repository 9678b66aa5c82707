"""
.. py:module:: postag.penn
   :synopsis: The Penn tag classes the tagging rules consult.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""

VERB_TAGS = frozenset({"VB", "VBD", "VBG", "VBN", "VBP", "VBZ"})
"""All verb-form tags."""

NOUN_TAGS = frozenset({"NN", "NNS", "NNP", "NNPS"})
"""All noun-form tags."""

PUNCTUATION_TAGS = frozenset({"#", "$", "''", "(", ")", ",", ".", ":", "``"})
"""
The punctuation class as consulted by the rules; note that the dash tag
(``--``) is not part of it.
"""

VERB_PRECEDING_TAGS = frozenset({"TO", "MD", "RB"})
"""Tags after which an ambiguous noun/verb is read as a base-form verb."""

PREDICATE_TAGS = VERB_TAGS | {"MD"}
"""Verb forms and modals: a following word tagged one of these makes "that" relative."""
