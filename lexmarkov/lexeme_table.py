#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

"""Single-copy storage for lexeme strings."""

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'

from lexmarkov.errors import LexemeLookupError


class _id_list(list):
  __slots__ = []


class _id_dict(dict):
  __slots__ = []


class LexemeTable(object):
  """An append-only arena of lexeme strings.

  Each distinct text is kept exactly once and is known everywhere else by a
  small integer id.  Ids are handed out densely starting at 0 and, since
  nothing is ever removed, stay valid for the life of the table.
  """

  __slots__ = ['_text_list', '_id_map']

  def __init__(self, texts=None):
    self._text_list = _id_list()
    self._id_map = _id_dict()
    if texts:
      for text in texts:
        self.Intern(text)

  def Intern(self, text):
    """Returns the id of text, storing it first if it is new."""
    lex_id = self._id_map.get(text)
    if lex_id is None:
      lex_id = len(self._text_list)
      self._text_list.append(text)
      self._id_map[text] = lex_id
    return lex_id

  def Lookup(self, text):
    try:
      return self._id_map[text]
    except KeyError:
      raise LexemeLookupError(text, 'unknown lexeme')

  def Text(self, lex_id):
    if not isinstance(lex_id, int) or lex_id < 0 or lex_id >= len(self._text_list):
      raise LexemeLookupError(lex_id, 'unknown lexeme id')
    return self._text_list[lex_id]

  def __contains__(self, text):
    return text in self._id_map

  def __len__(self):
    return len(self._text_list)

  def __iter__(self):
    return iter(self._text_list)
