import logging
import operator
from collections import Counter
from numbers import Integral

from sortedcontainers import SortedSet

from ..errors import ArithmeticInvariantViolation, IndexOutOfRange, InvalidSpec
from ..specs import SpecKind
from ..counting import binomial

logger = logging.getLogger(__name__)


def exact_div(num, den):
    '''num // den for divisions that must leave no remainder'''
    quotient, remainder = divmod(num, den)
    if __debug__ and remainder:
        raise ArithmeticInvariantViolation(f"{num} / {den} leaves remainder {remainder}")
    return quotient


def rank_radix_raw(seq, radix):
    '''little-endian: seq[0] is the least significant digit'''
    rank = 0
    for digit in reversed(seq):
        rank = rank * radix + digit
    return rank


def generate_radix_raw(size, radix, rank):
    digits = []
    for _ in range(size):
        rank, digit = divmod(rank, radix)
        digits.append(digit)
    return digits


def rank_perm_raw(seq):
    """
    Lexicographic rank of a permutation of 0..n-1.

    Walking from the back, the index of each item among the items seen so far
    is its Lehmer digit (the count of later, smaller items).
    """
    s = SortedSet()
    place_val = 1
    rank = 0

    for item in reversed(seq):
        s.add(item)
        rank += s.index(item) * place_val
        place_val *= len(s)

    return rank


def generate_perm_raw(size, rank):
    # position i carries a digit of radix size - i, least significant last
    digits = [0] * size
    for i in reversed(range(size)):
        rank, digits[i] = divmod(rank, size - i)

    s = SortedSet(range(size))
    return [s.pop(digit) for digit in digits]


def rank_combination_raw(seq, zero_count):
    '''combinatorial number system over the positions holding 0'''
    z = zero_count
    rank = 0

    for i in reversed(range(len(seq))):
        if seq[i] == 0:
            rank += binomial(i, z)
            z -= 1

    return rank


def generate_combination_raw(size, zero_count, rank):
    combination = [1] * size
    z = zero_count

    for i in reversed(range(size)):
        count = binomial(i, z)
        if rank >= count:
            rank -= count
            combination[i] = 0
            z -= 1

    return combination


def rank_word_raw(seq, type_counts, cardinality):
    """
    Mixed-radix multinomial rank of a word (lexicographic among all distinct
    arrangements of the multiset described by type_counts).
    """
    remaining = list(type_counts)
    size = len(seq)
    total = cardinality
    rank = 0

    for pos, symbol in enumerate(seq):
        if total <= 1:
            # the rest of the word is forced
            break
        length = size - pos
        offset = sum(remaining[:symbol])
        rank += exact_div(total * offset, length)
        total = exact_div(total * remaining[symbol], length)
        remaining[symbol] -= 1

    return rank


def generate_word_raw(size, type_counts, cardinality, rank):
    remaining = list(type_counts)
    total = cardinality
    word = []

    for pos in range(size):
        length = size - pos
        selector = rank * length // total

        offset = 0
        for symbol, count in enumerate(remaining):
            if selector < offset + count:
                break
            offset += count

        word.append(symbol)
        rank -= exact_div(total * offset, length)
        total = exact_div(total * count, length)
        remaining[symbol] -= 1

    return word


def cardinality(spec):
    return spec.cardinality


def encoding_bits(spec):
    '''Number of bits needed to store any rank of spec'''
    return (spec.cardinality - 1).bit_length()


def rank(spec, obj):
    """
    Index of obj among all objects of spec, in [0, cardinality(spec)).

    obj is trusted to be well formed for spec; see is_valid.
    """
    obj = [operator.index(v) for v in obj]

    match spec.kind:
        case SpecKind.RADIX:
            result = rank_radix_raw(obj, spec.radix)
        case SpecKind.PERMUTATION:
            result = rank_perm_raw(obj)
        case SpecKind.COMBINATION:
            result = rank_combination_raw(obj, spec.zero_count)
        case SpecKind.WORD:
            result = rank_word_raw(obj, spec.type_counts, spec.cardinality)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"rank: {spec}: {obj} -> {result}")
    return result


def unrank(spec, index):
    '''Fresh list holding the object at index; IndexOutOfRange outside [0, cardinality)'''
    index = operator.index(index)
    if not 0 <= index < spec.cardinality:
        raise IndexOutOfRange(index, spec.cardinality)

    match spec.kind:
        case SpecKind.RADIX:
            result = generate_radix_raw(spec.size, spec.radix, index)
        case SpecKind.PERMUTATION:
            result = generate_perm_raw(spec.size, index)
        case SpecKind.COMBINATION:
            result = generate_combination_raw(spec.size, spec.zero_count, index)
        case SpecKind.WORD:
            result = generate_word_raw(spec.size, spec.type_counts, spec.cardinality, index)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"unrank: {spec}: {index} -> {result}")
    return result


def is_valid(spec, obj):
    '''True if obj is a member of the family spec describes'''
    obj = list(obj)
    # bools are Integral but never digits or symbols
    if len(obj) != spec.size or not all(isinstance(v, Integral) and not isinstance(v, bool) for v in obj):
        return False

    match spec.kind:
        case SpecKind.RADIX:
            return all(0 <= v < spec.radix for v in obj)
        case SpecKind.PERMUTATION:
            return sorted(obj) == list(range(spec.size))
        case SpecKind.COMBINATION:
            return set(obj) <= {0, 1} and obj.count(0) == spec.zero_count
        case SpecKind.WORD:
            counts = Counter(obj)
            return (all(0 <= v < spec.types for v in counts)
                    and all(counts[s] == c for s, c in enumerate(spec.type_counts)))


def domain_width(spec):
    '''How many distinct symbols an object of spec is drawn from'''
    match spec.kind:
        case SpecKind.RADIX:
            return spec.radix
        case SpecKind.PERMUTATION:
            return spec.size
        case SpecKind.COMBINATION:
            return 2
        case SpecKind.WORD:
            return spec.types


def _check_domain(spec, domain):
    domain = tuple(domain)
    width = domain_width(spec)
    if len(domain) != width:
        raise InvalidSpec(f"{spec} needs a domain of {width} symbols, got {len(domain)}")
    if len(set(domain)) != len(domain):
        raise InvalidSpec(f"domain symbols must be distinct: {domain}")
    return domain


def rank_items(spec, items, domain):
    '''rank() for objects spelled with domain[i] in place of i'''
    domain = _check_domain(spec, domain)
    index_map = {item: idx for idx, item in enumerate(domain)}
    return rank(spec, [index_map[e] for e in items])


def unrank_items(spec, index, domain):
    domain = _check_domain(spec, domain)
    return [domain[i] for i in unrank(spec, index)]
