import logging
import types
import unittest

from postag.classify import BaselineClassifier
from postag.model import EmptyModelWarning, TagFrequencyTable, TagProbabilityModel
from postag.pipeline import *
from postag.rules import RuleCascadeClassifier
from postag.token import Token

MODEL = TagProbabilityModel.fromFrequencies(TagFrequencyTable({
    "'s": {"POS": 7, "VBZ": 3},
    "Smith": {"NNP": 4},
    "dog": {"NN": 9},
    "eat": {"VB": 5},
    "run": {"NN": 6, "VB": 4},
    "running": {"VBG": 3},
    "that": {"IN": 6, "DT": 2, "WDT": 2},
    "the": {"DT": 20},
    "to": {"TO": 10},
    "walked": {"VBD": 6, "VBN": 4},
    "will": {"MD": 5},
    "up": {"RB": 6, "RP": 4},
    "gave": {"VBD": 3},
    ".": {".": 10},
}))


def Tags(tokens):
    return [token.tag for token in tokens]


class LookaheadTests(unittest.TestCase):

    def testPairs(self):
        self.assertEqual(list(Lookahead(['a', 'b', 'c'])), [('a', 'b'), ('b', 'c'), ('c', '')])

    def testSingle(self):
        self.assertEqual(list(Lookahead(iter(['a']))), [('a', '')])

    def testEmpty(self):
        self.assertEqual(list(Lookahead([])), [])


class ContextWindowTests(unittest.TestCase):

    def testInitiallyEmpty(self):
        self.assertEqual(ContextWindow().context(), ('', '', '', '', ''))

    def testShift(self):
        window = ContextWindow()
        window.shift('the', 'DT')
        self.assertEqual(window.context('dog'), ('', '', 'the', 'DT', 'dog'))
        window.shift('dog', 'NN')
        self.assertEqual(window.context('.'), ('the', 'DT', 'dog', 'NN', '.'))
        window.shift('.', '.')
        self.assertEqual(window.context(), ('dog', 'NN', '.', '.', ''))


class ModeTests(unittest.TestCase):

    def testBaseline(self):
        for mode in (BASELINE, "0", 0, "Baseline"):
            pipeline = TaggingPipeline(MODEL, mode)
            self.assertEqual(pipeline.mode, BASELINE)
            self.assertIsInstance(pipeline.classifier, BaselineClassifier)

    def testEnhanced(self):
        for mode in (ENHANCED, "1", 1):
            pipeline = TaggingPipeline(MODEL, mode)
            self.assertEqual(pipeline.mode, ENHANCED)
            self.assertIsInstance(pipeline.classifier, RuleCascadeClassifier)

    def testDefaultIsEnhanced(self):
        self.assertEqual(TaggingPipeline(MODEL).mode, ENHANCED)

    def testUnknownMode(self):
        for mode in ("viterbi", 2, None, ""):
            with self.assertRaises(UnknownModeError) as cm:
                TaggingPipeline(MODEL, mode)

            self.assertEqual(cm.exception.mode, mode)

    def testUnknownModeIsValueError(self):
        self.assertTrue(issubclass(UnknownModeError, ValueError))

    def testEmptyModelWarning(self):
        with self.assertWarns(EmptyModelWarning):
            pipeline = TaggingPipeline(TagProbabilityModel({}), BASELINE)

        self.assertEqual(pipeline.tagTokens(['dog', 'ran']), [Token('dog', 'NN'), Token('ran', 'NN')])

    def testEmptyModelLogsAtInfo(self):
        with self.assertWarns(EmptyModelWarning), \
                self.assertLogs('TaggingPipeline', 'INFO') as cm:
            TaggingPipeline(TagProbabilityModel({}), ENHANCED)

        self.assertTrue(cm.records)
        self.assertTrue(all(r.levelno == logging.INFO for r in cm.records))


class BaselineTaggingTests(unittest.TestCase):

    def setUp(self):
        self.pipeline = TaggingPipeline(MODEL, BASELINE)

    def testUnknownWord(self):
        self.assertEqual(self.pipeline.tagTokens(['xyzzy']), [Token('xyzzy', 'NN')])

    def testTopTags(self):
        words = ['Smith', "'s", 'dog', 'walked', 'up', '.']
        self.assertEqual(Tags(self.pipeline.run(words)), ['NNP', 'POS', 'NN', 'VBD', 'RB', '.'])

    def testIgnoresContext(self):
        self.assertEqual(Tags(self.pipeline.run(['to', 'run'])), ['TO', 'NN'])


class EnhancedTaggingTests(unittest.TestCase):

    def setUp(self):
        self.pipeline = TaggingPipeline(MODEL, ENHANCED)

    def testRunIsLazy(self):
        self.assertIsInstance(self.pipeline.run(['dog']), types.GeneratorType)

    def testOneTokenPerWordInOrder(self):
        words = ['the', 'dog', 'that', 'will', 'run', '7th-best', 'Running', 'blorks', '.']
        tokens = self.pipeline.tagTokens(words)
        self.assertEqual([t.word for t in tokens], words)
        self.assertTrue(all(isinstance(t, Token) for t in tokens))

    def testEmptyStream(self):
        self.assertEqual(self.pipeline.tagTokens([]), [])

    def testPossessive(self):
        self.assertEqual(Tags(self.pipeline.run(['Smith', "'s", 'dog'])), ['NNP', 'POS', 'NN'])

    def testContraction(self):
        self.assertEqual(Tags(self.pipeline.run(['gave', "'s"])), ['VBD', 'VBZ'])

    def testFirstTokenHasNoContext(self):
        self.assertEqual(Tags(self.pipeline.run(["'s", 'walked'])), ['VBZ', 'VBD'])

    def testNounVerb(self):
        self.assertEqual(Tags(self.pipeline.run(['to', 'run'])), ['TO', 'VB'])
        self.assertEqual(Tags(self.pipeline.run(['the', 'run'])), ['DT', 'NN'])
        self.assertEqual(Tags(self.pipeline.run(['will', 'run'])), ['MD', 'VB'])

    def testThat(self):
        self.assertEqual(Tags(self.pipeline.run(['dog', 'that', 'will', 'eat'])),
                         ['NN', 'WDT', 'MD', 'VB'])
        self.assertEqual(Tags(self.pipeline.run(['gave', 'that', 'dog'])), ['VBD', 'IN', 'NN'])
        self.assertEqual(Tags(self.pipeline.run(['.', 'that', 'dog'])), ['.', 'DT', 'NN'])

    def testThatAtEndOfStream(self):
        self.assertEqual(Tags(self.pipeline.run(['dog', 'that'])), ['NN', 'IN'])

    def testParticipleLooksTwoWordsBack(self):
        self.assertEqual(Tags(self.pipeline.run(['had', 'quickly', 'walked'])),
                         ['NN', 'JJ', 'VBN'])
        self.assertEqual(Tags(self.pipeline.run(['had', 'the', 'dog', 'walked'])),
                         ['NN', 'DT', 'NN', 'VBD'])

    def testUsesAssignedTags(self):
        # "Smiths" is not in the model, so its (assigned) tag comes from the rules
        self.assertEqual(Tags(self.pipeline.run(['Smiths', "'s"])), ['NNPS', 'POS'])
        self.assertEqual(Tags(self.pipeline.run(['blorked', 'up'])), ['VBD', 'RP'])

    def testCausality(self):
        words = ['to', 'run', 'up', 'that', 'dog', "'s"]
        full = self.pipeline.tagTokens(words)

        for idx in range(1, len(words)):
            prefix = self.pipeline.tagTokens(words[:idx] + ['.'])
            self.assertEqual(prefix[:idx - 1], full[:idx - 1])

    def testRunsAreIndependent(self):
        words = ['Smith', "'s", 'dog']
        first = self.pipeline.run(words)
        self.assertEqual(next(first), Token('Smith', 'NNP'))
        self.assertEqual(self.pipeline.tagTokens(['gave', "'s"]), [Token('gave', 'VBD'),
                                                                   Token("'s", 'VBZ')])
        self.assertEqual(list(first), [Token("'s", 'POS'), Token('dog', 'NN')])

    def testUnknownWords(self):
        words = ['7th-best', 'Running', 'dogs', '1990s', 'blork']
        self.assertEqual(Tags(self.pipeline.run(words)), ['JJ', 'VBG', 'NNS', 'NNS', 'NN'])


if __name__ == '__main__':
    unittest.main()
