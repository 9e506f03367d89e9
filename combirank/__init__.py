"""
combirank: ranking and unranking of digit strings, permutations, combinations
and multiset permutations ("words").
"""

__version__ = "0.1.0"

from .errors import (ArithmeticInvariantViolation, BijectionViolation, IndexOutOfRange,
    InvalidSpec, RankError
)
from .counting import binomial
from .specs import (Spec, SpecKind, combination_spec, permutation_spec,
    permutation_spec_from_array, radix_spec, radix_spec_from_array, word_spec,
    word_spec_from_array
)
from .rank_comb import (cardinality, domain_width, encoding_bits, is_valid, rank,
    rank_items, unrank, unrank_items
)
from .enumerator import (Enumeration, enumerate_all, enumerate_array, random_object,
    unrank_many, validate_all
)
from .lazy_handler import LazyRotatingFileHandler, setup_logger

__all__ = [
    "ArithmeticInvariantViolation",
    "BijectionViolation",
    "IndexOutOfRange",
    "InvalidSpec",
    "RankError",
    "binomial",
    "Spec",
    "SpecKind",
    "radix_spec",
    "permutation_spec",
    "combination_spec",
    "word_spec",
    "radix_spec_from_array",
    "permutation_spec_from_array",
    "word_spec_from_array",
    "cardinality",
    "rank",
    "unrank",
    "is_valid",
    "encoding_bits",
    "domain_width",
    "rank_items",
    "unrank_items",
    "Enumeration",
    "enumerate_all",
    "validate_all",
    "enumerate_array",
    "unrank_many",
    "random_object",
    "LazyRotatingFileHandler",
    "setup_logger",
]
