"""This module supports arithmetic with polynomials over finite fields.

Polynomials over a finite field F are represented as coefficient lists.
The polynomial a_0 + a_1 z + ... + a_n z^n corresponds
to the list [a_0, a_1, ... , a_n] of elements of F.
Leading coefficient a_n is nonzero, using [] for the zero polynomial.
Field F is any type created by finfields.GF(), hence either a prime
field or an extension field.

The operators +,-,*,//,%, and function divmod are overloaded,
as well as evaluation of a polynomial f at a point x by calling f(x).
Integers are converted to polynomials by taking their digits in base
F.order as coefficients, lowest digit first. Coefficients are rendered
as integers in text form, using the same digit convention (see int()).

GCD, extended GCD, modular inverse and powers are all supported, next to
formal derivatives and integrals. Lagrange interpolation is provided as
well as error-tolerant interpolation, recovering a polynomial of bounded
degree from evaluations of which a bounded number may be corrupted.
A simple irreducibility test is provided as well as a basic
routine to find the next largest irreducible polynomial.

All algorithms are the straightforward quadratic-time ones.
"""

import functools
import logging

X = 'z'  # symbol for indeterminate in polynomials
NEGATIVE_INFINITY = -1  # degree of the zero polynomial


@functools.cache
def FX(field):
    """Create type for polynomials over given finite field."""
    if not isinstance(field, type) or getattr(field, 'order', None) is None:
        raise TypeError('finite field type expected')

    FieldPolynomial = type(f'{field.__name__}[{X}]', (Polynomial,), {'__slots__': ()})
    FieldPolynomial.field = field
    logging.debug(f'Create polynomial type {FieldPolynomial.__name__}')
    return FieldPolynomial


class Polynomial:
    """Polynomials over finite field 'field' represented as lists of field elements.

    Invariant: last element of attribute 'value' is a nonzero field element (if 'value' nonempty).
    Elements in 'value' are never modified in-place, and are not shared with the caller.
    """

    __slots__ = 'value'

    field = None

    def __init__(self, value=0, check=True):
        """Initialize polynomial to given value (zero polynomial, by default)."""
        if check:
            value = self._intern(value)
        self.value = value

    @classmethod
    def _intern(cls, a):
        # convert a to cls internal format, if possible
        b = cls._coerce(a)
        if b is NotImplemented:
            raise TypeError(f'polynomial over {cls.field.__name__} expected, '
                            f'got {type(a).__name__}')

        return b

    @classmethod
    def _coerce(cls, a):
        field = cls.field
        if isinstance(a, Polynomial):
            if not isinstance(a, cls):
                raise TypeError(f'polynomial of type {cls.__name__} expected')

            return a.value

        if isinstance(a, field):
            return [+a] if a else []

        if isinstance(a, int):
            return cls._from_int(a)

        if isinstance(a, str):
            return cls._from_terms(a)

        if isinstance(a, tuple):
            a = list(a)
        if isinstance(a, list):
            a = [+a_i if isinstance(a_i, field) else field(a_i) for a_i in a]
            return cls._shrink(a)

        return NotImplemented

    def __int__(self):
        return self._to_int(self.value)

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        if isinstance(key, slice):
            raise IndexError('slicing of polynomials not supported, use list() or similar')

        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key == -1 and not self.value:
            return self.field(0)  # e.g., for zero polynomial z we get z[z.degree()] == 0

        if key < 0:
            raise IndexError('negative index not allowed for nonzero polynomials')

        try:
            v = +self.value[key]
        except IndexError:
            v = self.field(0)
        return v

    def __iter__(self):
        for a_i in self.value:
            yield +a_i

    def __call__(self, x):
        """Evaluate polynomial at given x."""
        field = self.field
        if not isinstance(x, field):
            x = field(x)
        return self._eval(self.value, x)

    @classmethod
    def _from_int(cls, a):
        field = cls.field
        q = field.order
        neg = a < 0
        if neg:
            a = -a
        c = []
        while a:
            a, r = divmod(a, q)
            c.append(-field.from_int(r) if neg else field.from_int(r))
        return c

    @classmethod
    def _to_int(cls, a):
        q = cls.field.order
        s = 0
        for a_i in reversed(a):
            s *= q
            s += int(a_i)
        return s

    @classmethod
    def _from_terms(cls, s, x=X):
        field = cls.field
        d = {}
        s = ''.join(s.split())  # remove all whitespace
        if s.startswith('[') and s.endswith(']'):
            s = s[1:-1]
        for term in s.split('+'):
            try:
                if term.find(x) == -1:
                    c = int(term)
                    i = 0
                else:
                    c, _, e = term.partition(x)
                    if c.endswith('*'):
                        c = c[:-1]
                    c = 1 if c == '' else -1 if c == '-' else int(c)
                    if e == '':
                        i = 1
                    elif e.startswith('^'):
                        i = int(e[1:])
                    else:
                        raise ValueError(f'unexpected {e!r} after {x}')
            except ValueError as exc:
                raise ValueError('ill formatted polynomial') from exc

            if i < 0:
                raise ValueError('negative exponent in polynomial')

            d[i] = d.get(i, 0) + field.from_int(c)

        m = max(d.keys(), default=-1)
        a = [field(0)] * (m+1)
        for i, c in d.items():
            a[i] = field(c)
        return cls._shrink(a)

    @staticmethod
    def _to_terms(a, x=X):
        if a == []:
            return '0'

        terms = []
        for i, a_i in enumerate(a):
            if a_i:
                c = '' if a_i == 1 else f'{int(a_i)}*'
                if i == 0:
                    terms.append(f'{int(a_i)}')  # x^0 = 1
                elif i == 1:
                    terms.append(f'{c}{x}')  # x^1 = x
                else:
                    terms.append(f'{c}{x}^{i}')
        return ' + '.join(terms)

    @staticmethod
    def _shrink(a):
        while a and not a[-1]:
            a.pop()
        return a

    @staticmethod
    def _deg(a):
        return len(a) - 1

    @classmethod
    def _lc(cls, a):
        return +a[-1] if a else cls.field(0)

    @classmethod
    def _monic(cls, a, lc_pinv=False):
        a1 = a[-1] if a else cls.field(0)
        if a and a1 != 1:
            a1 = a1.reciprocal()
            a = [a_i * a1 for a_i in a[:-1]]
            a.append(cls.field(1))
        if lc_pinv:
            return a, a1  # attach pseudoinverse of leading coefficient

        return a

    @staticmethod
    def _scale(a, c):
        if not c:
            return []

        return [a_i * c for a_i in a]

    @staticmethod
    def _neg(a):
        return [-a_i for a_i in a]

    @staticmethod
    def _pos(a):
        return a

    @classmethod
    def _add(cls, a, b):
        if len(a) < len(b):
            a, b = b, a
        # len(a) >= len(b)
        c = a[:]
        for i, b_i in enumerate(b):
            c[i] = c[i] + b_i
        return cls._shrink(c)

    @classmethod
    def _sub(cls, a, b):
        c = a + [cls.field(0)] * (len(b) - len(a))
        for i, b_i in enumerate(b):
            c[i] = c[i] - b_i
        return cls._shrink(c)

    @classmethod
    def _mul(cls, a, b):
        if len(a) > len(b):
            a, b = b, a
        # len(a) <= len(b)
        if not a:
            return []

        c = [cls.field(0)] * (len(a) + len(b) - 1)
        for i, a_i in enumerate(a):
            if a_i:
                for j, b_j in enumerate(b):
                    c[i + j] = c[i + j] + a_i * b_j
        return cls._shrink(c)

    @classmethod
    def _mod(cls, a, b):
        if b is None:  # see _powmod()
            return a

        if b == []:
            raise ZeroDivisionError('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return a

        b1 = b[-1].reciprocal()
        r = a[:]
        for i in range(m - n, -1, -1):
            q_i = r[i + n - 1] * b1
            if q_i:
                for j in range(n):
                    r[i + j] = r[i + j] - q_i * b[j]
        return cls._shrink(r)

    @classmethod
    def _divmod(cls, a, b):
        if b == []:
            raise ZeroDivisionError('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return [], a

        b1 = b[-1].reciprocal()
        q, r = [cls.field(0)] * (m - n + 1), a[:]
        for i in range(m - n, -1, -1):
            q[i] = q_i = r[i + n - 1] * b1
            if q_i:
                for j in range(n):
                    r[i + j] = r[i + j] - q_i * b[j]
        return cls._shrink(q), cls._shrink(r)

    @staticmethod
    def _eval(a, x):
        y = x * 0
        for a_i in reversed(a):
            y = x * y + a_i
        return y

    @classmethod
    def _deriv(cls, a):
        field = cls.field
        p = field.characteristic
        # integer i taken as i*1 in the field, which is zero for multiples of p
        c = [a[i] * field(i % p) for i in range(1, len(a))]
        return cls._shrink(c)

    @classmethod
    def _integr(cls, a, c):
        field = cls.field
        p = field.characteristic
        b = [c]
        b.extend(a_i / field((i+1) % p) for i, a_i in enumerate(a))
        return cls._shrink(b)

    @classmethod
    def _powmod(cls, a, n, modulus=None):
        if n == 0:
            return [cls.field(1)]

        if n < 0:
            if modulus is None:
                raise ValueError('negative exponent')

            a = cls._invert(a, modulus)
            n = -n
        a = cls._mod(a, modulus)
        b = a
        for i in range(n.bit_length()-2, -1, -1):
            b = cls._mul(b, b)
            b = cls._mod(b, modulus)
            if (n >> i) & 1:
                b = cls._mul(b, a)
                b = cls._mod(b, modulus)
        return b

    @classmethod
    def _gcd(cls, a, b):
        while b:
            a, b = b, cls._mod(a, b)
        a = cls._monic(a)
        return a

    @classmethod
    def _gcdext(cls, a, b):
        s, s1 = [cls.field(1)], []
        t, t1 = [], [cls.field(1)]
        while b:
            a, (q, b) = b, cls._divmod(a, b)
            s, s1 = s1, cls._sub(s, cls._mul(q, s1))
            t, t1 = t1, cls._sub(t, cls._mul(q, t1))
        if a:
            a, a1 = cls._monic(a, lc_pinv=True)
            s = cls._scale(s, a1)
            t = cls._scale(t, a1)
        return a, s, t

    @classmethod
    def _inv_gcd(cls, a, b):
        # invariant: a = s * a0 (mod b0) and b = s1 * a0 (mod b0)
        s, s1 = [cls.field(1)], []
        while b:
            a, (q, b) = b, cls._divmod(a, b)
            s, s1 = s1, cls._sub(s, cls._mul(q, s1))
        if a:
            a, a1 = cls._monic(a, lc_pinv=True)
            s = cls._scale(s, a1)
        return s, a

    @classmethod
    def _invert(cls, a, b):
        if b == []:
            raise ZeroDivisionError('division by zero polynomial')

        s, d = cls._inv_gcd(a, b)
        if len(d) != 1:
            raise ZeroDivisionError('inverse does not exist')

        return s

    @classmethod
    def _interpolate(cls, x, y):
        one = cls.field(1)
        f, m = [], [one]
        for x_i, y_i in zip(x, y):
            # f agrees with all points so far, m vanishes at all of them
            c = (y_i - cls._eval(f, x_i)) / cls._eval(m, x_i)
            f = cls._add(f, cls._scale(m, c))
            m = cls._mul(m, [-x_i, one])
        return f, m

    @classmethod
    def _decode(cls, a, b, k, l):
        # Extended Euclid on a=m, b=f tracking only the Bezout coefficients x2, x4 of f.
        x2, x4 = [], [cls.field(1)]
        while b:
            a, (q, b) = b, cls._divmod(a, b)
            x2, x4 = x4, cls._sub(x2, cls._mul(q, x4))
            e = cls._deg(x2)
            if x2 and cls._deg(a) - e < k and e <= l:
                h, r = cls._divmod(a, x2)
                if not r:
                    logging.debug(f'Decoded with error locator of degree {e}')
                    return h

        # remainder b = 0 pairs with x4, so f vanishes at all x_i except the roots of x4
        if cls._deg(x4) <= l:
            logging.debug(f'Decoded zero polynomial with error locator of degree {cls._deg(x4)}')
            return []

        logging.debug('Decoding failed: too many errors or inconsistent values')
        return None

    @classmethod
    def _is_irreducible(cls, a):
        q = cls.field.order
        if cls._deg(a) <= 0:
            return False

        x = cls._from_int(q)  # polynomial z
        b = x
        for _ in range(cls._deg(a) // 2):
            b = cls._powmod(b, q, modulus=a)
            if cls._gcd(cls._sub(b, x), a) != [cls.field(1)]:
                return False

        return True

    @classmethod
    def _next_irreducible(cls, a):
        q = cls.field.order
        a = cls._to_int(a)
        while True:
            a += 1
            if a % q == 0:
                a += 1
            _a = cls._from_int(a)
            if _a[-1] != 1:  # ensure monic a
                a = q**len(_a)
                continue
            if cls._is_irreducible(_a):
                break

        return _a

    @classmethod
    def from_terms(cls, s, x=X):
        """Convert string s with sum of powers of x to a polynomial."""
        return cls(cls._from_terms(s, x), check=False)

    @classmethod
    def to_terms(cls, a, x=X):
        """Convert polynomial a to a string with sum of powers of x."""
        a = cls._intern(a)
        return cls._to_terms(a, x)

    @classmethod
    def deg(cls, a):
        """Degree of polynomial a (NEGATIVE_INFINITY=-1 if a is zero polynomial)."""
        a = cls._intern(a)
        return cls._deg(a)

    def degree(self):
        """Degree of polynomial (NEGATIVE_INFINITY=-1 for zero polynomial)."""
        return self._deg(self.value)

    def lc(self):
        """Leading coefficient of polynomial (zero for zero polynomial)."""
        return self._lc(self.value)

    def monic(self, lc_pinv=False):
        """Monic version of polynomial.

        Zero polynomial remains unchanged.
        If lc_pinv is set, inverse of leading coefficient is also returned (0 for zero polynomial).
        """
        cls = type(self)
        a = cls._monic(self.value, lc_pinv=lc_pinv)
        if lc_pinv:
            a, a1 = a
            return cls(a, check=False), +a1

        return cls(a, check=False)

    def deriv(self):
        """Formal derivative of polynomial.

        Coefficient i*a_i is computed with i taken as element of the field,
        so terms vanish for i a multiple of the characteristic.
        """
        cls = type(self)
        return cls(cls._deriv(self.value), check=False)

    def integr(self, c=0):
        """Formal integral of polynomial with constant term c.

        Raises ZeroDivisionError if the degree of the polynomial is at least
        p-1 for a field of characteristic p, as i+1 vanishes for some i then.
        """
        cls = type(self)
        field = cls.field
        c = +c if isinstance(c, field) else field(c)
        return cls(cls._integr(self.value, c), check=False)

    def __neg__(self):
        cls = type(self)
        return cls(cls._neg(self.value), check=False)

    def __pos__(self):
        cls = type(self)
        return cls(cls._pos(self.value), check=False)

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.value, other), check=False)

    __radd__ = __add__

    def __sub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(self.value, other), check=False)

    def __rsub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(other, self.value), check=False)

    def __mul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, other), check=False)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(self.value, other)[0], check=False)

    def __rfloordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(other, self.value)[0], check=False)

    @classmethod
    def mod(cls, a, b):
        """Reduce polynomial a modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mod(a, b), check=False)

    def __mod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(self.value, other), check=False)

    def __rmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(other, self.value), check=False)

    @classmethod
    def divmod(cls, a, b):
        """Divide polynomial a by polynomial b with remainder, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        q, r = cls._divmod(a, b)
        return cls(q, check=False), cls(r, check=False)

    def __divmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(self.value, other)
        return cls(q, check=False), cls(r, check=False)

    def __rdivmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(other, self.value)
        return cls(q, check=False), cls(r, check=False)

    @classmethod
    def powmod(cls, a, n, b):
        """Polynomial a to the power of n modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._powmod(a, n, modulus=b), check=False)

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._powmod(self.value, other), check=False)

    @classmethod
    def gcd(cls, a, b):
        """Greatest common divisor of polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._gcd(a, b), check=False)

    @classmethod
    def gcdext(cls, a, b):
        """Extended GCD for polynomials a and b.

        Return d, s, t satisfying s a + t b = d = gcd(a,b).
        """
        a = cls._intern(a)
        b = cls._intern(b)
        d, s, t = cls._gcdext(a, b)
        return cls(d, check=False), cls(s, check=False), cls(t, check=False)

    @classmethod
    def inv_gcd(cls, a, b):
        """Extended GCD for polynomials a and b, tracking the coefficient of a only.

        Return s, d satisfying s a = d (mod b) with d = gcd(a,b) monic.
        If d = 1, s is the inverse of a modulo b.
        """
        a = cls._intern(a)
        b = cls._intern(b)
        s, d = cls._inv_gcd(a, b)
        return cls(s, check=False), cls(d, check=False)

    @classmethod
    def invert(cls, a, b):
        """Inverse of polynomial a modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._invert(a, b), check=False)

    @classmethod
    def _points(cls, x, y):
        if len(x) != len(y):
            raise ValueError(f'number of points ({len(x)}) and values ({len(y)}) differ')

        field = cls.field
        x = [+x_i if isinstance(x_i, field) else field(x_i) for x_i in x]
        y = [+y_i if isinstance(y_i, field) else field(y_i) for y_i in y]
        return x, y

    @classmethod
    def interpolate(cls, x, y):
        """Lagrange interpolation for points x with values y.

        Return f, m with f the unique polynomial of degree below n=len(x)
        satisfying f(x[i]) = y[i] for all i, and m the monic polynomial of
        degree n vanishing at all x[i]. The points x[i] must be distinct;
        a repeated point raises ZeroDivisionError.
        """
        x, y = cls._points(x, y)
        f, m = cls._interpolate(x, y)
        return cls(f, check=False), cls(m, check=False)

    @classmethod
    def interpolate_with_errors(cls, x, y, k, l):
        """Error-tolerant interpolation for points x with values y.

        Return the unique polynomial f of degree below k with f(x[i]) = y[i]
        for all but at most l indices i, using a Berlekamp-Welch style
        decoder based on the extended Euclidean algorithm.
        Return None if len(x) < 2l + k, or if no such f is found.
        """
        x, y = cls._points(x, y)
        n = len(x)
        if n < 2*l + k:
            logging.debug(f'Decoding infeasible for {n} points, degree bound {k}, {l} errors')
            return None

        f, m = cls._interpolate(x, y)
        h = cls._decode(m, f, k, l)
        if h is None:
            return None

        return cls(h, check=False)

    @classmethod
    def is_irreducible(cls, a):
        """Test polynomial a for irreducibility."""
        a = cls._intern(a)
        return cls._is_irreducible(a)

    @classmethod
    def next_irreducible(cls, a):
        """Return next monic irreducible polynomial > a, ordered as integers.

        E.g., X+1 < X^2+X+1 < X^3+X+1 < X^3+X^2+1 < ... for GF(2).
        """
        a = cls._intern(a)
        return cls(cls._next_irreducible(a), check=False)

    def __repr__(self):
        return f'[{self._to_terms(self.value)}]'

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, Polynomial) and not isinstance(other, type(self)):
            return False

        other = self._coerce(other)
        if other is NotImplemented:
            return False

        return self.value == other

    def __ne__(self, other):
        """Negated equality test."""
        return not self.__eq__(other)

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, self._to_int(self.value)))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)
