#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'

import random

from lexmarkov.errors import LexemeLookupError


class Sampler(object):
  """Draws successors from a TransitionModel.

  A successor list holds one entry per observed transition, so picking an
  index uniformly returns each distinct successor with probability
  proportional to how often it was seen.
  """

  def __init__(self, model, rng=None, seed=None):
    """Build a sampler.

    Arguments:
      model: the TransitionModel to walk
      rng: (optional) a random.Random or anything else with randint(a, b).
        Shared by every draw this sampler makes.
      seed: (optional) seed for the default rng, ignored if rng is given
    """
    self.model = model
    if rng is None:
      rng = random.Random(seed)
    self._rng = rng

  def SampleNext(self, lex_id):
    """Returns the id of a random successor of lex_id.

    Raises:
      LexemeLookupError: if lex_id is unknown or has no successors
    """
    successors = self.model.Successors(lex_id)
    if not successors:
      raise LexemeLookupError(self.model.Text(lex_id))
    return successors[self._rng.randint(0, len(successors) - 1)]
