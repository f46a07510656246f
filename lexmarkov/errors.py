#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

"""Exceptions raised by the lexeme chain."""


class LexemeLookupError(LookupError):
  """A lexeme has no entry in the model, or has no recorded successors."""

  def __init__(self, lexeme, reason='unknown or exhausted lexeme'):
    LookupError.__init__(self, '%s: %s' % (reason, repr(lexeme)))
    self.lexeme = lexeme


class SourceExhaustedError(ValueError):
  """The source produced no lexemes, so there is nothing to generate from."""
