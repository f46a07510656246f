#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

"""Generates text that looks like a given source.

usage: gen_similar.py [-v] [limit] [file]

The source defaults to text.txt, use - to read stdin.
"""

import logging
import sys

from lexmarkov.errors import LexemeLookupError
from lexmarkov.generator import DEFAULT_LIMIT
from lexmarkov.generator import Generator
from lexmarkov.lexer import Lexer
from lexmarkov.lexer import SENTINEL
from lexmarkov.sampler import Sampler
from lexmarkov.transitions import TransitionModel

DEFAULT_FILE = 'text.txt'


def GenerateSimilar(infile, outfile, limit=DEFAULT_LIMIT, sentinel=SENTINEL,
                    seed=None):
  """Builds a model from infile and writes a random walk of it to outfile.

  Returns:
    the number of lexemes written, 0 if infile had nothing usable.

  Raises:
    LexemeLookupError: if the walk got stuck.  What was written stays.
  """
  lexer = Lexer(sentinel=sentinel)
  mkv = TransitionModel(sentinel=sentinel)
  logging.debug('---- Input ----')
  mkv.Build(lexer.Lexemes(infile))

  unique_count = mkv.UniqueLexemeCount()
  if not unique_count:
    logging.info('Got no parsable data on the input.')
    return 0

  mkv.Dump()

  logging.debug('---- Generated ----')
  gen = Generator(mkv, sampler=Sampler(mkv, seed=seed), limit=limit,
                  lexer=lexer)
  for piece in gen.GetFormattedSequence():
    outfile.write(piece)
  outfile.write('\n')
  # we shouldn't close a file that we didn't open.
  outfile.flush()

  logging.info('Generated text of %d lexemes from %d unique ones.',
               gen.count, unique_count)
  return gen.count


def main(argv=None):
  if argv is None:
    argv = sys.argv[1:]

  level = logging.INFO
  limit = DEFAULT_LIMIT
  filename = DEFAULT_FILE
  for arg in argv:
    if arg == '-v':
      level = logging.DEBUG
    elif arg.isdigit():
      limit = int(arg)
    else:
      filename = arg
  logging.basicConfig(level=level, format='[%(levelname).1s] %(message)s')

  if filename == '-':
    infile = sys.stdin
  else:
    try:
      infile = open(filename, 'r', encoding='utf-8')
    except IOError as e:
      logging.error("Can't open the file specified: %s (%s)", filename, e)
      return 1

  try:
    GenerateSimilar(infile, sys.stdout, limit)
  except (IOError, UnicodeDecodeError) as e:
    logging.error("Can't read the source %s: %s", filename, e)
    return 1
  except LexemeLookupError as e:
    sys.stdout.write('\n')
    logging.error("Can't find next lexeme: %s", e)
    return 1
  finally:
    if infile is not sys.stdin:
      infile.close()
  return 0


if __name__ == '__main__':
  sys.exit(main())
