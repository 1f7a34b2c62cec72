"""This module supports finite (Galois) fields.

Function GF creates types implementing finite fields.
Instantiate an object from a field and subsequently apply overloaded
operators such as +,-,*,/ etc., to compute with field elements.
In-place versions of the field operators are also provided.

Prime fields GF(p) are available for primes p below 2^31.
Extension fields GF(p^d) are built on top of a prime field using an
irreducible polynomial of degree d over GF(p) as modulus; their elements
are vectors of d coordinates in GF(p). Integers embed in any field as
multiples of 1; use from_int() to convert an integer in range(p^d)
with its base-p digits as coordinates, the inverse of int().
"""

import functools
import logging
import gmpy2
from ffpoly import polys

X = 'x'  # symbol for generator of extension fields
MAX_MODULUS_BITS = 31


def GF(modulus):
    """Create a finite (Galois) field for given modulus (prime number or irreducible polynomial)."""
    if isinstance(modulus, polys.Polynomial):
        return xGF(modulus)

    return pGF(modulus)


class FiniteFieldElement:
    """Abstract base class for finite field elements.

    Invariant: 'value' is reduced w.r.t. modulus.
    """

    __slots__ = 'value'

    modulus = None  # set by subclass
    order = None
    characteristic = None
    ext_deg = None
    cardinality = None

    def __init__(self, value=0, check=True):
        if check:
            value = self._intern(value)
        self.value = value

    @classmethod
    def _intern(cls, a):
        # convert a to cls internal format, if possible
        if isinstance(a, cls):
            return cls._pos(a.value)

        b = cls._coerce(a)
        if b is NotImplemented:
            raise TypeError(f'cannot convert {type(a).__name__} to {cls.__name__}')

        return b

    @classmethod
    def _coerce(cls, a):
        raise NotImplementedError('abstract method')

    @classmethod
    def from_int(cls, a):
        """Convert integer a to a field element, inverse of int() on range(order)."""
        return cls(a)

    def __int__(self):
        """Extract field element as an integer value."""
        raise NotImplementedError('abstract method')

    def __getitem__(self, key):
        raise NotImplementedError('abstract method')

    def __add__(self, other):
        """Addition."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.value, other), check=False)

    __radd__ = __add__

    def __iadd__(self, other):
        """In-place addition."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        self.value = cls._add(self.value, other)
        return self

    def __sub__(self, other):
        """Subtraction."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(self.value, other), check=False)

    def __rsub__(self, other):
        """Subtraction (with reflected arguments)."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(other, self.value), check=False)

    def __isub__(self, other):
        """In-place subtraction."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        self.value = cls._sub(self.value, other)
        return self

    def __neg__(self):
        """Negation."""
        cls = type(self)
        return cls(cls._neg(self.value), check=False)

    def __pos__(self):
        """Unary +, returns a copy."""
        cls = type(self)
        return cls(cls._pos(self.value), check=False)

    def __mul__(self, other):
        """Multiplication."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, other), check=False)

    __rmul__ = __mul__

    def __imul__(self, other):
        """In-place multiplication."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        self.value = cls._mul(self.value, other)
        return self

    def __truediv__(self, other):
        """Division."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, cls._reciprocal(other)), check=False)

    def __rtruediv__(self, other):
        """Division (with reflected arguments)."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(other, cls._reciprocal(self.value)), check=False)

    def __itruediv__(self, other):
        """In-place division."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        self.value = cls._mul(self.value, cls._reciprocal(other))
        return self

    def __pow__(self, other):
        """Exponentiation."""
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._pow(self.value, other), check=False)

    def reciprocal(self):
        """Multiplicative inverse."""
        cls = type(self)
        return cls(cls._reciprocal(self.value), check=False)

    def __eq__(self, other):
        """Equality test."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.value == other

    def __hash__(self):
        """Make finite field elements hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, int(self)))

    def __bool__(self):
        """Truth value testing.

        Return False if this field element is zero, True otherwise.
        Field elements can thus be used directly in Boolean formulas.
        """
        raise NotImplementedError('abstract method')


@functools.cache
def pGF(p):
    """Create a finite field for given prime modulus p."""
    if not isinstance(p, int):
        raise TypeError(f'int required, got {type(p).__name__}')

    if p < 2 or not gmpy2.is_prime(p):
        raise ValueError('modulus is not a prime')

    if p.bit_length() > MAX_MODULUS_BITS:
        raise ValueError(f'modulus exceeds {MAX_MODULUS_BITS} bits')

    GFp = type(f'GF({p})', (PrimeFieldElement,), {'__slots__': ()})
    GFp.__doc__ = 'Class of prime field elements.'
    GFp.modulus = p
    GFp.order = p
    GFp.characteristic = p
    GFp.ext_deg = 1
    GFp.cardinality = (p, 1)
    logging.debug(f'Create prime field {GFp.__name__}')
    return GFp


class PrimeFieldElement(FiniteFieldElement):
    """Common base class for prime field elements.

    Attribute 'value' holds the residue as an int in range(p).
    """

    __slots__ = ()

    modulus: int

    @classmethod
    def _intern(cls, a):
        if isinstance(a, str):
            try:
                a = int(a)
            except ValueError:
                raise ValueError(f'invalid literal for {cls.__name__}: {a!r}') from None

        return super()._intern(a)

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, cls):
            return a.value

        if isinstance(a, int):
            # Directly call int.__mod__() for efficiency:
            return a.__mod__(cls.modulus)

        return NotImplemented

    def __int__(self):
        """Extract field element as an (unsigned) integer value."""
        return self.value

    def __getitem__(self, key):
        """Only coordinate 0 exists for prime field elements."""
        if key != 0:
            raise IndexError('prime field element has only coordinate 0')

        return +self

    @staticmethod
    def _pos(a):
        return a

    @classmethod
    def _neg(cls, a):
        return 0 if a == 0 else cls.modulus - a

    @classmethod
    def _add(cls, a, b):
        c = a + b
        if c >= cls.modulus:
            c -= cls.modulus
        return c

    @classmethod
    def _sub(cls, a, b):
        c = a - b
        if c < 0:
            c += cls.modulus
        return c

    @classmethod
    def _mul(cls, a, b):
        return a * b % cls.modulus

    @classmethod
    def _reciprocal(cls, a):
        if a == 0:
            raise ZeroDivisionError('division by zero')

        return int(gmpy2.invert(a, cls.modulus))

    @classmethod
    def _pow(cls, a, n):
        if a == 0:
            if n < 0:
                raise ZeroDivisionError('division by zero')

            return 0 if n else 1

        p = cls.modulus
        return int(gmpy2.powmod(a, n % (p-1), p))  # a^(p-1) = 1 for nonzero a

    def __bool__(self):
        return self.value != 0

    def __repr__(self):
        return f'{self.value}'


def find_irreducible(p, d):
    """Find smallest irreducible polynomial of degree d over GF(p)."""
    return polys.FX(pGF(p)).next_irreducible(p**d - 1)


@functools.cache
def xGF(modulus):
    """Create a finite field for given irreducible polynomial over a prime field."""
    base = modulus.field
    if not issubclass(base, FiniteFieldElement):
        raise ValueError('modulus must be a polynomial over a finite field')

    if base.cardinality[1] != 1:
        raise ValueError('modulus must be a polynomial over a prime field')

    poly = type(modulus)
    if not poly.is_irreducible(modulus):
        raise ValueError('modulus is not irreducible')

    p = base.characteristic
    d = modulus.degree()
    GFq = type(f'GF({p}^{d})', (ExtensionFieldElement,), {'__slots__': ()})
    GFq.__doc__ = 'Class of extension field elements.'
    GFq.modulus = modulus
    GFq.base = base
    GFq.poly = poly
    GFq.order = p**d
    GFq.characteristic = p
    GFq.ext_deg = d
    GFq.cardinality = (p, d)
    logging.debug(f'Create extension field {GFq.__name__} with modulus {modulus}')
    return GFq


class ExtensionFieldElement(FiniteFieldElement):
    """Common base class for extension field elements.

    Attribute 'value' holds a list of exactly ext_deg coordinates in the base field,
    where value[i] is the coefficient of x^i. Coordinates above the degree are zero.
    """

    __slots__ = ()

    modulus: polys.Polynomial
    base: type
    poly: type

    @classmethod
    def _intern(cls, a):
        if isinstance(a, str):
            a = cls.poly._from_terms(a, x=X)
        return super()._intern(a)

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, cls):
            return a.value

        if isinstance(a, int):
            a = cls.base(a)  # i taken as i*1
        poly = cls.poly
        if isinstance(a, (list, tuple, cls.base, poly)):
            a = poly._coerce(a)
        else:
            return NotImplemented

        return cls._pad(poly._mod(a, cls.modulus.value))

    @classmethod
    def from_int(cls, a):
        """Convert integer a to a field element, taking its base-p digits as coordinates."""
        poly = cls.poly
        return cls(cls._pad(poly._mod(poly._from_int(a), cls.modulus.value)), check=False)

    @classmethod
    def _pad(cls, c):
        # zero all coordinates above the degree of c
        return c + [cls.base(0)] * (cls.ext_deg - len(c))

    @staticmethod
    def _shrink(a):
        d = len(a)
        while d and not a[d-1]:
            d -= 1
        return a[:d]

    def __int__(self):
        """Extract field element as an integer value, coordinates taken as digits."""
        return self.poly._to_int(self.value)

    def __getitem__(self, key):
        """Coordinate of x^key (copy)."""
        if not isinstance(key, int):
            raise IndexError('use int for indexing field elements')

        return +self.value[key]

    def __iter__(self):
        for a_i in self.value:
            yield +a_i

    def degree(self):
        """Degree as a polynomial in x (NEGATIVE_INFINITY=-1 for zero)."""
        return len(self._shrink(self.value)) - 1

    def lc(self):
        """Leading (top nonzero) coordinate, zero for zero element."""
        a = self._shrink(self.value)
        return +a[-1] if a else self.base(0)

    def to_polynomial(self):
        """Coordinates as a polynomial over the base field."""
        return self.poly(self._shrink(self.value))

    @staticmethod
    def _pos(a):
        return [+a_i for a_i in a]

    @staticmethod
    def _neg(a):
        return [-a_i for a_i in a]

    @staticmethod
    def _add(a, b):
        return [a_i + b_i for a_i, b_i in zip(a, b)]

    @staticmethod
    def _sub(a, b):
        return [a_i - b_i for a_i, b_i in zip(a, b)]

    @classmethod
    def _mul(cls, a, b):
        poly = cls.poly
        c = poly._mul(cls._shrink(a), cls._shrink(b))
        c = poly._mod(c, cls.modulus.value)
        return cls._pad(c)

    @classmethod
    def _reciprocal(cls, a):
        a = cls._shrink(a)
        if not a:
            raise ZeroDivisionError('division by zero')

        s, _ = cls.poly._inv_gcd(a, cls.modulus.value)
        return cls._pad(s)

    @classmethod
    def _pow(cls, a, n):
        if n < 0:
            a = cls._reciprocal(a)
            n = -n
        b = cls._pad([cls.base(1)])
        for i in range(n.bit_length() - 1, -1, -1):
            b = cls._mul(b, b)
            if (n >> i) & 1:
                b = cls._mul(b, a)
        return b

    def __bool__(self):
        return any(self.value)

    def __repr__(self):
        return f'[{self.poly._to_terms(self._shrink(self.value), x=X)}]'
