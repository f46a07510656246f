# Copyright 2009, Mitch Patenaude

"""First order markov chains over lexemes, for generating look-alike text."""

from lexmarkov.errors import LexemeLookupError
from lexmarkov.errors import SourceExhaustedError
from lexmarkov.generator import Generator
from lexmarkov.generator import Render
from lexmarkov.lexeme_table import LexemeTable
from lexmarkov.lexer import DEFAULT_CATEGORIES
from lexmarkov.lexer import LexemeCategory
from lexmarkov.lexer import Lexer
from lexmarkov.lexer import SENTINEL
from lexmarkov.sampler import Sampler
from lexmarkov.transitions import TransitionModel
