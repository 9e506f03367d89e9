import logging
import random

import numpy as np

from .errors import BijectionViolation
from .rank_comb.main_functions import domain_width, rank, unrank

logger = logging.getLogger(__name__)


class Enumeration:
    """
    Every (rank, object) pair of spec, ranks ascending.

    Lazy and finite; each iteration starts over from rank 0.
    """

    def __init__(self, spec):
        self.spec = spec

    def __iter__(self):
        for r in range(self.spec.cardinality):
            yield r, unrank(self.spec, r)

    def __len__(self):
        return self.spec.cardinality

    def __repr__(self):
        return f"Enumeration({self.spec})"


def enumerate_all(spec):
    return Enumeration(spec)


def validate_all(spec):
    '''Re-rank every enumerated object; raise BijectionViolation on the first mismatch'''
    logger.debug(f"validate_all: checking {spec.cardinality} objects of {spec}")
    count = 0
    for r, obj in enumerate_all(spec):
        got = rank(spec, obj)
        if got != r:
            logger.error(f"validate_all: {spec}: {obj} unranked from {r}, ranked as {got}")
            raise BijectionViolation(spec, r, got, obj)
        count += 1
    logger.debug(f"validate_all: {spec} ok")
    return count


def unrank_many(spec, indexes):
    """
    Objects for a batch of ranks, one per row.

    Rows are int64 unless a symbol of spec could exceed that range, in which
    case the array holds Python ints (dtype=object).
    """
    rows = [unrank(spec, i) for i in indexes]
    dtype = np.int64 if domain_width(spec) - 1 <= np.iinfo(np.int64).max else object
    return np.array(rows, dtype=dtype).reshape(len(rows), spec.size)


def enumerate_array(spec):
    '''All objects of spec stacked so that row r holds unrank(spec, r)'''
    return unrank_many(spec, range(spec.cardinality))


def random_object(spec, rng=None):
    rng = rng if rng is not None else random
    return unrank(spec, rng.randrange(spec.cardinality))
