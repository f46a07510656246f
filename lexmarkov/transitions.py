#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'

import logging

from lexmarkov.lexeme_table import LexemeTable
from lexmarkov.lexer import SENTINEL


class _successor_list(list):
  __slots__ = []


class SuccessorView(object):
  """Read-only window onto the successor list of one lexeme."""

  __slots__ = ['_ids']

  def __init__(self, ids):
    self._ids = ids

  def __len__(self):
    return len(self._ids)

  def __getitem__(self, index):
    return self._ids[index]

  def __iter__(self):
    return iter(self._ids)

  def __eq__(self, other):
    try:
      return list(self) == list(other)
    except TypeError:
      return NotImplemented

  def __ne__(self, other):
    result = self.__eq__(other)
    if result is NotImplemented:
      return result
    return not result

  def __repr__(self):
    return 'SuccessorView(%r)' % (list(self._ids),)


class TransitionModel(object):
  """A first order markov chain over interned lexemes.

  Every distinct lexeme is stored once in a LexemeTable.  Each one owns a
  list of successor ids, one entry per observed transition, so a lexeme seen
  k times after another appears k times in its list.  There are no counts;
  the multiplicity is the weight.

  The model only grows.  It is built by a single writer and then read.
  """

  __slots__ = ['count', 'sentinel', '_table', '_successors']

  def __init__(self, sentinel=SENTINEL):
    """Build a new, empty model.

    Arguments:
      sentinel: the lexeme that precedes the first lexeme of a source when
        the model is built with Build().
    """
    if not sentinel:
      raise ValueError('the sentinel lexeme cannot be empty')
    self.count = 0
    self.sentinel = sentinel
    self._table = LexemeTable()
    self._successors = []

  def Intern(self, lexeme):
    """Returns the id of lexeme, creating an empty entry if needed."""
    lex_id = self._table.Intern(lexeme)
    if lex_id == len(self._successors):
      self._successors.append(_successor_list())
    return lex_id

  def Add(self, predecessor, successor):
    """Records that successor was seen right after predecessor.

    Arguments:
      predecessor: id of an interned lexeme
      successor: text of the following lexeme

    Returns:
      the id of successor, to be used as the next predecessor.

    Raises:
      LexemeLookupError: if predecessor is not a known id
    """
    self._table.Text(predecessor)
    next_id = self.Intern(successor)
    self._successors[predecessor].append(next_id)
    self.count += 1
    return next_id

  def Update(self, pairs):
    """Updates from an iterable of (predecessor, successor) text pairs.

    Returns:
      the number of transitions added.
    """
    added = 0
    for predecessor, successor in pairs:
      self.Add(self.Intern(predecessor), successor)
      added += 1
    return added

  def Build(self, lexemes):
    """Updates from a bare lexeme stream that follows the sentinel.

    Returns:
      the id of the last lexeme added, or None if the stream was empty,
      in which case not even the sentinel is interned.
    """
    last_id = None
    for lexeme in lexemes:
      if last_id is None:
        last_id = self.Intern(self.sentinel)
      last_id = self.Add(last_id, lexeme)
    return last_id

  def UniqueLexemeCount(self):
    return len(self._table)

  def Successors(self, lex_id):
    """Returns the successor ids of a lexeme, duplicates included.

    Raises:
      LexemeLookupError: if lex_id isn't in the model
    """
    self._table.Text(lex_id)
    return SuccessorView(self._successors[lex_id])

  def Lookup(self, lexeme):
    return self._table.Lookup(lexeme)

  def Text(self, lex_id):
    return self._table.Text(lex_id)

  def __len__(self):
    return len(self._table)

  def __contains__(self, lexeme):
    return lexeme in self._table

  def Dump(self):
    if not logging.getLogger().isEnabledFor(logging.DEBUG):
      return
    logging.debug('---- Sequential pairs distribution model dump ----')
    for lex_id, text in enumerate(self._table):
      logging.debug('%s:( %s )', text,
                    ' '.join(self._table.Text(n) for n in self._successors[lex_id]))
