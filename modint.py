import logging  # debug logs for descriptor creation
import operator  # strict integer coercion

from number_theory import is_prime  # primality check for prime moduli

logger = logging.getLogger(__name__)

class IllegalOperationError(TypeError):  # Raised when an operation needs a capability the modulus lacks.
    pass

class Modulus:  # Ring descriptor shared by reference across ModInt values (no inverse).
    invertible = False  # Capability flag; only InvertibleModulus sets it.

    def __init_subclass__(cls, **kwargs):  # Validate constant moduli once, when the class is declared.
        super().__init_subclass__(**kwargs)
        if "MODULUS" in cls.__dict__:
            cls._check(cls.MODULUS)

    @classmethod
    def _check(cls, m):  # Reject values that cannot describe this kind of ring.
        m = operator.index(m)
        if m < 1:
            raise ValueError("modulus must be >= 1")
        return m

    def __init__(self, m=None):  # Take the runtime value, or the class-level MODULUS constant.
        if m is None:
            if getattr(type(self), "MODULUS", None) is None:
                raise ValueError(f"{type(self).__name__} requires a modulus value")
            self._m = type(self).MODULUS
        else:
            self._m = type(self)._check(m)

    def modulus(self): return self._m  # Integer modulus of the ring.

    def __eq__(self, other):  # Same ring iff same value and same capability.
        if not isinstance(other, Modulus):
            return NotImplemented
        return self._m == other._m and self.invertible == other.invertible

    def __hash__(self): return hash((self._m, self.invertible))

    def __repr__(self): return f"{type(self).__name__}({self._m})"

class InvertibleModulus(Modulus):  # Capability marker: values in this ring can be inverted.
    invertible = True

    def __init__(self, m=None):  # Only subclasses that know how to invert can be instantiated.
        if type(self).inverse_power is InvertibleModulus.inverse_power:
            raise TypeError(f"{type(self).__name__} does not define inverse_power()")
        super().__init__(m)

    def inverse_power(self):  # Exponent e with a**e == a**-1 for every unit a.
        raise NotImplementedError

class PrimeModulus(InvertibleModulus):  # Prime modulus; inversion by Fermat's little theorem.
    @classmethod
    def _check(cls, m):
        m = super()._check(m)
        if not is_prime(m):
            raise ValueError(f"modulus {m} is not prime")
        return m

    def inverse_power(self): return self._m - 2  # a**(p-2) == a**-1 mod p.

class Mod1e9p7(PrimeModulus):  # Commonly used modulus 10^9 + 7.
    MODULUS = 1_000_000_007

class Mod998244353(PrimeModulus):  # NTT-friendly prime 119 * 2^23 + 1.
    MODULUS = 998_244_353

class RuntimeModulus(Modulus):  # Plain modulus chosen at execution time.
    def __init__(self, m):
        super().__init__(m)
        logger.debug("runtime modulus %d", self._m)

class RuntimePrimeModulus(PrimeModulus):  # Prime modulus chosen at execution time; primality is checked.
    def __init__(self, m):
        super().__init__(m)
        logger.debug("runtime prime modulus %d", self._m)

MOD_1E9P7 = Mod1e9p7()  # Shared default descriptor.
MOD_998244353 = Mod998244353()

class ModInt:  # Integer kept canonical in [0, modulus) under a Modulus descriptor.
    __slots__ = ("v", "m")

    def __init__(self, x=0, modulus=None):  # Reduce an int (or same-ring ModInt) into canonical range.
        if isinstance(x, ModInt):
            if modulus is not None and modulus != x.m:
                raise ValueError("ModInt moduli differ")
            modulus, x = x.m, x.v
        self.m = MOD_1E9P7 if modulus is None else modulus
        self.v = operator.index(x) % self.m.modulus()

    @classmethod
    def _raw(cls, v, m):  # Wrap an already-canonical value without reducing.
        out = object.__new__(cls)
        out.v = v
        out.m = m
        return out

    zero = classmethod(lambda cls, modulus=MOD_1E9P7: cls._raw(0, modulus))  # Additive identity.

    one = classmethod(lambda cls, modulus=MOD_1E9P7: cls(1, modulus))  # Multiplicative identity (0 when modulus is 1).

    @property
    def modulus(self): return self.m  # Descriptor of the ring this value lives in.

    def value(self): return self.v  # Canonical integer in [0, modulus).

    def _c(self, other):  # Coerce int/same-ring operand; None when unsupported.
        if isinstance(other, ModInt):
            if other.m != self.m:
                raise ValueError(f"ModInt moduli differ: {self.m!r} vs {other.m!r}")
            return other
        if isinstance(other, int):
            return ModInt(other, self.m)
        return None

    def __add__(self, other):
        o = self._c(other)
        if o is None:
            return NotImplemented
        v = self.v + o.v
        p = self.m.modulus()
        return ModInt._raw(v - p if v >= p else v, self.m)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._c(other)
        if o is None:
            return NotImplemented
        v = self.v - o.v
        return ModInt._raw(v + self.m.modulus() if v < 0 else v, self.m)

    def __rsub__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else o - self

    def __mul__(self, other):  # Python ints are unbounded, so the product never overflows.
        o = self._c(other)
        if o is None:
            return NotImplemented
        return ModInt._raw(self.v * o.v % self.m.modulus(), self.m)

    __rmul__ = __mul__

    def __neg__(self):
        return self if self.v == 0 else ModInt._raw(self.m.modulus() - self.v, self.m)

    def __pos__(self): return self

    def pow(self, e):  # Binary exponentiation; negative exponents go through inv().
        e = operator.index(e)
        if e < 0:
            return self.inv().pow(-e)
        return ModInt._raw(pow(self.v, e, self.m.modulus()), self.m)

    def __pow__(self, e): return self.pow(e)

    def inv(self):  # Multiplicative inverse; needs an InvertibleModulus and a nonzero value.
        if not self.m.invertible:
            raise IllegalOperationError(f"{self.m!r} does not support inversion")
        if self.v == 0:
            raise ZeroDivisionError("cannot invert zero")
        return self.pow(self.m.inverse_power())

    inverse = inv

    def __truediv__(self, other):  # Division as multiply by inverse.
        o = self._c(other)
        return NotImplemented if o is None else self * o.inv()

    def __rtruediv__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else o * self.inv()

    def __eq__(self, other):  # Equality with same-ring values or ints (compared mod m).
        if isinstance(other, ModInt):
            return self.m == other.m and self.v == other.v
        if isinstance(other, int):
            return self.v == other % self.m.modulus()
        return NotImplemented

    __hash__ = None  # Equal to every int congruent mod m, so no consistent hash exists.

    def _key(self, other):  # Canonical value of the other side of a comparison.
        o = self._c(other)
        if o is None:
            raise TypeError(f"cannot compare ModInt with {type(other).__name__}")
        return o.v

    def __lt__(self, other): return self.v < self._key(other)

    def __le__(self, other): return self.v <= self._key(other)

    def __gt__(self, other): return self.v > self._key(other)

    def __ge__(self, other): return self.v >= self._key(other)

    def __bool__(self): return self.v != 0

    def __int__(self): return self.v

    def __str__(self): return str(self.v)

    def __repr__(self): return f"ModInt({self.v} mod {self.m.modulus()})"
