"""This module provides a seedable pseudorandom source for finite field elements
and polynomials, cf. the random module of Python's standard library.

A source is a NumPy bit generator, PCG64 by default, of which only the stream
of uniformly random unsigned 64-bit integers is used. All other functions take
the source as an argument, so runs are reproducible from a given seed.

Function randbelow() uses rejection sampling, hence its output is uniformly
random in range(n) for any n below 2^64. Elements of extension fields are
generated coordinate-wise.

NB: the functions in this module are meant for tests and demos, and are not
suitable for cryptographic use.
"""

import numpy as np
from ffpoly import finfields


def default_source(seed=None):
    """Return a new bit generator seeded with seed (fresh OS entropy if seed is None)."""
    return np.random.PCG64(seed)


def getrandbits64(source):
    """Uniformly random nonnegative 64-bit integer value."""
    return int(source.random_raw())


def randbelow(source, n):
    """Uniformly random integer in range(n), for 1 <= n <= 2^64."""
    if n <= 0:
        raise ValueError('empty range for randbelow()')

    if n > 1 << 64:
        raise ValueError('range for randbelow() exceeds 64 bits')

    limit = (1 << 64) - (1 << 64) % n  # largest multiple of n not exceeding 2^64
    while (r := getrandbits64(source)) >= limit:
        pass
    return r % n


def random_element(field, source):
    """Uniformly random element of the given finite field."""
    if issubclass(field, finfields.ExtensionFieldElement):
        return field([random_element(field.base, source) for _ in range(field.ext_deg)])

    return field(randbelow(source, field.order))


def random_polynomial(poly, n, source):
    """Random polynomial with n coefficients (degree below n) of the given polynomial type."""
    return poly([random_element(poly.field, source) for _ in range(n)])
