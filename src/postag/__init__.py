"""
.. py:module:: postag
   :synopsis: A statistical part-of-speech tagger with a rule cascade.

Training counts how often each word was seen with each Penn tag
(:class:`postag.model.TagFrequencyTable`), normalizes those counts into a
:class:`postag.model.TagProbabilityModel`, and tagging streams words through
a :class:`postag.pipeline.TaggingPipeline` in either ``baseline`` or
``enhanced`` mode::

    model = TagProbabilityModel.fromFrequencies(
        TagFrequencyTable.fromTokens(ReadTokens(corpus))
    )
    for token in TaggingPipeline(model, ENHANCED).run(words):
        print(token)

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""

__version__ = '1'
