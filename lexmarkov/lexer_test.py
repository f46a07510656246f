#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'

import io
import unittest

from lexmarkov.lexer import Lexer
from lexmarkov.lexer import LexemeCategory


class TokenizeTest(unittest.TestCase):
  def setUp(self):
    self.lexer = Lexer()

  def testCategoryPriority(self):
    self.assertEqual(["don't"], self.lexer.Tokenize("don't"),
                     "Apostrophed word should be a single lexeme")
    self.assertEqual(['well-known', ','], self.lexer.Tokenize('well-known,'),
                     "Hyphenated word should beat the plain word run")
    self.assertEqual(['wait', '...'], self.lexer.Tokenize('wait...'),
                     "Ellipsis should beat single punctuation")
    self.assertEqual(['.', '.'],
                     self.lexer.Tokenize('..'),
                     "Two dots are two punctuation marks")

  def testNoLookback(self):
    result = self.lexer.Tokenize('mother-in-law')
    self.assertEqual(['mother-in', '-', 'law'], result,
                     "Joined words take one joiner only, got %s" % repr(result))
    result = self.lexer.Tokenize('....')
    self.assertEqual(['...', '.'], result,
                     "Four dots should be ellipsis then dot, got %s" % repr(result))

  def testPunctuationSplit(self):
    self.assertEqual(['"', 'Hello', ',', '"'], self.lexer.Tokenize('"Hello,"'),
                     "Quotes and commas are separate lexemes")
    self.assertEqual(['a', '-'], self.lexer.Tokenize('a-'),
                     "Trailing hyphen doesn't join")

  def testUnicodeWords(self):
    self.assertEqual([u'caf\xe9', u','], self.lexer.Tokenize(u'caf\xe9,'),
                     "Accented letters are word characters")
    self.assertEqual([u"na\xefve-ish"], self.lexer.Tokenize(u"na\xefve-ish"),
                     "Accented letters can be joined too")

  def testEmptyChunk(self):
    self.assertEqual([], self.lexer.Tokenize(u'«»'),
                     "Unmatched characters should give no lexemes")
    self.assertEqual([], self.lexer.Tokenize(''), "Empty chunk has no lexemes")

  def testIsPunctuation(self):
    self.assertTrue(self.lexer.IsPunctuation(','), "comma is punctuation")
    self.assertTrue(self.lexer.IsPunctuation('...'), "ellipsis is punctuation")
    self.assertFalse(self.lexer.IsPunctuation('word'), "word isn't punctuation")
    self.assertFalse(self.lexer.IsPunctuation("it's"),
                     "apostrophed word isn't punctuation")
    self.assertFalse(self.lexer.IsPunctuation(',,'),
                     "only whole single marks are punctuation")

  def testCustomCategories(self):
    lexer = Lexer(categories=[LexemeCategory('digits', r'\d+'),
                              LexemeCategory('bang', '!', punctuation=True)])
    self.assertEqual(['12', '!', '3'], lexer.Tokenize('ab12!c3'),
                     "Only configured categories should match")
    self.assertTrue(lexer.IsPunctuation('!'), "custom punctuation class")
    self.assertFalse(lexer.IsPunctuation('.'), "dot isn't configured here")

  def testBadConfiguration(self):
    self.assertRaises(ValueError, Lexer, categories=[])
    self.assertRaises(ValueError, Lexer, sentinel='')


class PairsTest(unittest.TestCase):
  def setUp(self):
    self.lexer = Lexer()

  def testChunkBoundary(self):
    pairs = list(self.lexer.Pairs(['a b\n', 'c d\n']))
    self.assertEqual([('.', 'a'), ('a', 'b'), ('b', 'c'), ('c', 'd')], pairs,
                     "Pairs across chunks were %s" % repr(pairs))

  def testWithinChunk(self):
    pairs = list(self.lexer.Pairs('Hi, there.'))
    self.assertEqual([('.', 'Hi'), ('Hi', ','), (',', 'there'),
                      ('there', '.')], pairs,
                     "Pairs within chunks were %s" % repr(pairs))

  def testEmptyChunkKeepsLink(self):
    pairs = list(self.lexer.Pairs(u'end «» start'))
    self.assertEqual([('.', 'end'), ('end', 'start')], pairs,
                     "Empty chunk should not break the link: %s" % repr(pairs))

  def testFileSource(self):
    lexemes = list(self.lexer.Lexemes(io.StringIO(u'one two\n\nthree\n')))
    self.assertEqual(['one', 'two', 'three'], lexemes,
                     "Lines of a file should be chunked like a string")

  def testEmptySource(self):
    self.assertEqual([], list(self.lexer.Pairs('   \n ')),
                     "Whitespace alone yields no pairs")

  def testCustomSentinel(self):
    lexer = Lexer(sentinel='<s>')
    self.assertEqual(('<s>', 'x'), next(lexer.Pairs('x y')),
                     "First predecessor should be the configured sentinel")


if __name__ == "__main__":
  unittest.main()
