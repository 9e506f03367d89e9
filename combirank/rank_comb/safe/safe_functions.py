from itertools import combinations, permutations, product

from ...specs import SpecKind


def all_objects_safe(spec):
    '''every object of spec, in rank order, by brute force'''
    match spec.kind:
        case SpecKind.RADIX:
            # product() counts big-endian, ranks are little-endian
            for digits in product(range(spec.radix), repeat=spec.size):
                yield list(reversed(digits))

        case SpecKind.PERMUTATION:
            for perm in permutations(range(spec.size)):
                yield list(perm)

        case SpecKind.COMBINATION:
            # colexicographic order of the zero positions
            zero_sets = sorted(combinations(range(spec.size), spec.zero_count), key=lambda c: c[::-1])
            for zeros in zero_sets:
                yield [0 if i in zeros else 1 for i in range(spec.size)]

        case SpecKind.WORD:
            letters = [s for s, count in enumerate(spec.type_counts) for _ in range(count)]
            for word in sorted(set(permutations(letters))):
                yield list(word)


def rank_safe(spec, obj):
    '''slow but correct version of rank'''
    obj = list(obj)
    for r, candidate in enumerate(all_objects_safe(spec)):
        if candidate == obj:
            return r


def generate_safe(spec, rank):
    '''slow but correct version of unrank'''
    for r, candidate in enumerate(all_objects_safe(spec)):
        if rank == r:
            return candidate
