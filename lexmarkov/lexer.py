#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

"""Splits raw text into lexemes.

Input is read in whitespace-delimited chunks, and every chunk is cut into
lexemes by trying a list of categories in priority order at each position.
Characters that match no category are dropped.
"""

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'

import logging
import re
import string

SENTINEL = '.'


class LexemeCategory(object):
  """A named class of lexemes.

  Arguments:
    name: identifier, must be usable as a regex group name
    pattern: regular expression matching one lexeme of this class
    punctuation: if True, lexemes of this class are not preceded by a
      space when text is rendered
  """

  __slots__ = ['name', 'pattern', 'punctuation']

  def __init__(self, name, pattern, punctuation=False):
    self.name = name
    self.pattern = pattern
    self.punctuation = punctuation

  def __repr__(self):
    return 'LexemeCategory(%r, %r, punctuation=%r)' % (
        self.name, self.pattern, self.punctuation)


DEFAULT_CATEGORIES = (
    LexemeCategory('joined', r"\w+[-']\w+"),
    LexemeCategory('word', r'\w+'),
    LexemeCategory('ellipsis', r'\.{3}', punctuation=True),
    LexemeCategory('punct', '[' + re.escape(string.punctuation) + ']',
                   punctuation=True),
)


class Lexer(object):
  """Turns a text source into a stream of lexemes."""

  def __init__(self, categories=DEFAULT_CATEGORIES, sentinel=SENTINEL):
    if not categories:
      raise ValueError('a lexer needs at least one lexeme category')
    if not sentinel:
      raise ValueError('the sentinel lexeme cannot be empty')
    self.categories = tuple(categories)
    self.sentinel = sentinel
    self._lex_rx = re.compile('|'.join(
        '(?P<%s>%s)' % (cat.name, cat.pattern) for cat in self.categories))
    punct = [cat.pattern for cat in self.categories if cat.punctuation]
    if punct:
      self._punct_rx = re.compile('(?:%s)' % '|'.join(punct))
    else:
      self._punct_rx = None

  def Tokenize(self, chunk):
    """Returns the lexemes of a single chunk, in order.

    The alternation is tried left to right, so the first category that
    matches at a position wins.  A chunk made only of unmatched characters
    gives an empty list.
    """
    return [match.group(0) for match in self._lex_rx.finditer(chunk)
            if match.group(0)]

  def Chunks(self, source):
    if isinstance(source, str):
      source = [source]
    for line in source:
      for chunk in line.split():
        yield chunk

  def Lexemes(self, source):
    """Generates every lexeme of source.

    Arguments:
      source: a string, or an iterable of lines such as an open file.
    """
    for chunk in self.Chunks(source):
      lexemes = self.Tokenize(chunk)
      logging.debug('%s @< %s >@', chunk, ' / '.join(lexemes))
      for lexeme in lexemes:
        yield lexeme

  def Pairs(self, source):
    """Generates (predecessor, lexeme) pairs for source.

    The first lexeme follows the sentinel.  The first lexeme of any later
    chunk follows the last lexeme of the closest earlier chunk that had one.
    """
    last = self.sentinel
    for lexeme in self.Lexemes(source):
      yield last, lexeme
      last = lexeme

  def IsPunctuation(self, lexeme):
    if self._punct_rx is None:
      return False
    return self._punct_rx.fullmatch(lexeme) is not None
