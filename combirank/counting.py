from math import comb, factorial


def binomial(n, k):
    '''C(n, k), but 0 whenever k < 0 or k > n'''
    if k < 0 or k > n:
        return 0
    return comb(n, k)


def radix_cardinality(size, radix):
    return radix ** size


def permutation_cardinality(size):
    return factorial(size)


def combination_cardinality(size, zero_count):
    return binomial(size, zero_count)


def word_cardinality(size, type_counts):
    """Multinomial coefficient size! / prod(count!)"""
    total = factorial(size)
    for count in type_counts:
        # exact at every step: a partial product of factorials divides size!
        total //= factorial(count)
    return total
