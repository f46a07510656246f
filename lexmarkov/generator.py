#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'

from lexmarkov.errors import SourceExhaustedError
from lexmarkov.lexer import Lexer
from lexmarkov.sampler import Sampler

DEFAULT_LIMIT = 500


def Render(lexemes, lexer=None):
  """Joins lexemes into text.

  Every lexeme after the first is preceded by a space unless it is
  punctuation, so [Hello, ",", world, "."] becomes "Hello, world."
  """
  if lexer is None:
    lexer = Lexer()
  return ''.join(_Spaced(lexemes, lexer))


def _Spaced(lexemes, lexer):
  first = True
  for lexeme in lexemes:
    if first or lexer.IsPunctuation(lexeme):
      yield lexeme
    else:
      yield ' ' + lexeme
    first = False


class Generator(object):
  """Random walk over a TransitionModel.

  The walk starts from a successor of the sentinel and keeps going until
  more than `limit` lexemes have been emitted and the sentinel is drawn
  again.  The limit is a floor, not a cap: if the sentinel is never drawn
  the walk never ends.
  """

  def __init__(self, model, sampler=None, limit=DEFAULT_LIMIT, sentinel=None,
               lexer=None):
    """Build a generator.

    Arguments:
      model: a fully built TransitionModel
      sampler: (optional) Sampler to draw with, default is an unseeded one
      limit: soft limit on the number of lexemes, must be >= 0
      sentinel: start and end lexeme, defaults to the model's sentinel
      lexer: (optional) Lexer used to tell punctuation apart when formatting
    """
    if limit < 0:
      raise ValueError('soft limit must be non-negative, not %d' % limit)
    self.model = model
    if sampler is None:
      sampler = Sampler(model)
    self.sampler = sampler
    self.limit = limit
    if sentinel is None:
      sentinel = model.sentinel
    self.sentinel = sentinel
    if lexer is None:
      lexer = Lexer(sentinel=sentinel)
    self.lexer = lexer
    self.count = 0

  def _GetRandomIds(self):
    if not self.model.UniqueLexemeCount():
      raise SourceExhaustedError('no lexemes to generate from')

    sentinel_id = self.model.Lookup(self.sentinel)
    self.count = 0
    lex_id = self.sampler.SampleNext(sentinel_id)
    steps = 0
    while True:
      yield lex_id
      self.count += 1
      lex_id = self.sampler.SampleNext(lex_id)
      steps += 1
      if steps > self.limit and lex_id == sentinel_id:
        yield lex_id
        self.count += 1
        return

  def GetRandomSequence(self):
    """Generate a random sequence of lexemes.

    Returns a generator of lexeme strings ending with the sentinel.

    Raises:
      SourceExhaustedError: if the model is empty, on the first next()
      LexemeLookupError: if the walk reaches a lexeme with no successors.
        Whatever was already yielded stands.
    """
    for lex_id in self._GetRandomIds():
      yield self.model.Text(lex_id)

  def GetFormattedSequence(self):
    """Like GetRandomSequence(), but with the spacing of Render() applied."""
    return _Spaced(self.GetRandomSequence(), self.lexer)

  def Generate(self):
    return ''.join(self.GetFormattedSequence())
