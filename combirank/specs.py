"""
Immutable descriptors of the four combinatorial families.

A spec fixes the shape of every object in its family; the cardinality is
computed once, at construction, and stored on the spec.
"""

import logging
import operator
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from .errors import InvalidSpec
from .counting import (combination_cardinality, permutation_cardinality,
    radix_cardinality, word_cardinality
)

logger = logging.getLogger(__name__)


class SpecKind(Enum):
    RADIX = "radix"
    PERMUTATION = "permutation"
    COMBINATION = "combination"
    WORD = "word"


@dataclass(frozen=True)
class Spec:
    kind: SpecKind
    size: int
    radix: Optional[int] = None
    zero_count: Optional[int] = None
    type_counts: Optional[Tuple[int, ...]] = None
    cardinality: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.kind, SpecKind):
            raise InvalidSpec(f"kind must be a SpecKind, got {self.kind!r}")
        object.__setattr__(self, 'size', _check_size(self.size))
        self._check_params()

        match self.kind:
            case SpecKind.RADIX:
                value = radix_cardinality(self.size, self.radix)
            case SpecKind.PERMUTATION:
                value = permutation_cardinality(self.size)
            case SpecKind.COMBINATION:
                value = combination_cardinality(self.size, self.zero_count)
            case SpecKind.WORD:
                value = word_cardinality(self.size, self.type_counts)
        # the only write this field ever sees
        object.__setattr__(self, 'cardinality', value)

    def _check_params(self):
        allowed = {
            SpecKind.RADIX: 'radix',
            SpecKind.COMBINATION: 'zero_count',
            SpecKind.WORD: 'type_counts',
        }.get(self.kind)
        for name in ('radix', 'zero_count', 'type_counts'):
            if name != allowed and getattr(self, name) is not None:
                raise InvalidSpec(f"{self.kind.value} spec takes no {name}")

        match self.kind:
            case SpecKind.RADIX:
                radix = _as_int("radix", self.radix)
                if radix < 1:
                    raise InvalidSpec(f"radix must be at least 1, got {radix}")
                object.__setattr__(self, 'radix', radix)

            case SpecKind.COMBINATION:
                zero_count = _as_int("zero_count", self.zero_count)
                if not 0 <= zero_count <= self.size:
                    raise InvalidSpec(f"zero_count must lie in [0, {self.size}], got {zero_count}")
                object.__setattr__(self, 'zero_count', zero_count)

            case SpecKind.WORD:
                counts = _as_counts(self.type_counts)
                if any(c < 0 for c in counts):
                    raise InvalidSpec(f"type_counts must be non-negative, got {list(counts)}")
                if sum(counts) != self.size:
                    raise InvalidSpec(f"type_counts sum to {sum(counts)}, expected {self.size}")
                object.__setattr__(self, 'type_counts', counts)

    @property
    def types(self):
        '''Number of distinct symbols of a word spec'''
        return len(self.type_counts) if self.type_counts is not None else None

    def __str__(self):
        match self.kind:
            case SpecKind.RADIX:
                extra = f", radix={self.radix}"
            case SpecKind.COMBINATION:
                extra = f", zero_count={self.zero_count}"
            case SpecKind.WORD:
                extra = f", type_counts={list(self.type_counts)}"
            case _:
                extra = ""
        return f"{self.kind.value}(size={self.size}{extra})"


def _as_int(name, value):
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidSpec(f"{name} must be an integer, got {value!r}") from None


def _check_size(size):
    size = _as_int("size", size)
    if size < 0:
        raise InvalidSpec(f"size must be non-negative, got {size}")
    return size


def _as_counts(type_counts):
    try:
        return tuple(_as_int("type_counts entry", c) for c in type_counts)
    except TypeError:
        raise InvalidSpec(f"type_counts must be a sequence, got {type_counts!r}") from None


def radix_spec(size: int, radix: int) -> Spec:
    spec = Spec(SpecKind.RADIX, size, radix=radix)
    logger.debug(f"radix_spec: built {spec}, cardinality={spec.cardinality}")
    return spec


def permutation_spec(size: int) -> Spec:
    spec = Spec(SpecKind.PERMUTATION, size)
    logger.debug(f"permutation_spec: built {spec}, cardinality={spec.cardinality}")
    return spec


def combination_spec(size: int, zero_count: int) -> Spec:
    spec = Spec(SpecKind.COMBINATION, size, zero_count=zero_count)
    logger.debug(f"combination_spec: built {spec}, cardinality={spec.cardinality}")
    return spec


def word_spec(size: int, types: int, type_counts: Sequence[int]) -> Spec:
    types = _as_int("types", types)
    counts = _as_counts(type_counts)
    if len(counts) != types:
        raise InvalidSpec(f"type_counts has {len(counts)} entries, expected {types}")

    spec = Spec(SpecKind.WORD, size, type_counts=counts)
    logger.debug(f"word_spec: built {spec}, cardinality={spec.cardinality}")
    return spec


def radix_spec_from_array(array: Sequence[int], radix: int) -> Spec:
    spec = radix_spec(len(array), radix)
    bad = [d for d in array if not 0 <= d < spec.radix]
    if bad:
        raise InvalidSpec(f"digits {bad} outside [0, {spec.radix})")
    return spec


def permutation_spec_from_array(array: Sequence[int]) -> Spec:
    """
    Size is taken from the array length. Unlike a bare size, the array must
    really be a permutation of 0..size-1.
    """
    if sorted(array) != list(range(len(array))):
        raise InvalidSpec(f"{list(array)} is not a permutation of 0..{len(array) - 1}")
    return permutation_spec(len(array))


def word_spec_from_array(array: Sequence[int]) -> Spec:
    '''Infer types = max(symbol) + 1 and per-symbol counts from an example word'''
    symbols = sorted(array)
    if symbols and symbols[0] < 0:
        raise InvalidSpec(f"word symbols must be non-negative, got {symbols[0]}")
    types = symbols[-1] + 1 if symbols else 0
    counts = Counter(symbols)
    return word_spec(len(symbols), types, [counts[s] for s in range(types)])
