## Integer capability contract
## @author: Luke Li<zhongwei.li@mavs.uta.edu>
# Every algorithm in this package is written once against IntegerOps; each integer kind (python int, gmpy2.mpz,
# numpy fixed-width scalars) plugs in through a small adapter.
from abc import ABC, abstractmethod
from contextlib import contextmanager, nullcontext
from typing import Any, NamedTuple

import gmpy2
import numpy as np


class GcdResult(NamedTuple):
    ''' coef_x * x + coef_y * y == gcd; g is the power of 2 shared by both inputs '''
    coef_x: Any
    coef_y: Any
    g: Any
    gcd: Any


class IntegerOps(ABC):
    '''
        Adapter for an integer kind. The kind itself must provide total ordering and +, -, *; the adapter
        supplies identities, coercion, parity, shifts and floor division/modulo.
    '''
    kind = None
    fixed_width = False
    signed = True

    @abstractmethod
    def coerce(self, value):
        """ Converts value into this kind """
        pass

    @abstractmethod
    def is_even(self, value) -> bool:
        pass

    @property
    def zero(self):
        return self.coerce(0)

    @property
    def one(self):
        return self.coerce(1)

    def is_odd(self, value) -> bool:
        return not self.is_even(value)

    def shr(self, value):
        # floor semantics: -3 >> 1 == -2
        return value >> 1

    def shl(self, value):
        return value << 1

    def mod_floor(self, a, m):
        return a % m

    def div_floor(self, a, m):
        return a // m

    def bit_length(self, value) -> int:
        return int(value).bit_length()

    def guard(self):
        ''' Context wrapping every computation done with this kind '''
        return nullcontext()

    def __repr__(self):
        return f'{type(self).__name__}({self.kind.__name__})'


class BigIntOps(IntegerOps):
    kind = int

    def coerce(self, value):
        if isinstance(value, np.integer):
            return int(value)
        if not isinstance(value, int):
            raise TypeError(f'Expected an integer, got: {type(value).__name__}')
        return value

    def is_even(self, value) -> bool:
        return value & 1 == 0

    def bit_length(self, value) -> int:
        return value.bit_length()


class MpzOps(IntegerOps):
    kind = type(gmpy2.mpz(0))

    def coerce(self, value):
        if isinstance(value, self.kind):
            return value
        if not isinstance(value, (int, np.integer)):
            raise TypeError(f'Expected an integer, got: {type(value).__name__}')
        return gmpy2.mpz(int(value))

    def is_even(self, value) -> bool:
        return gmpy2.is_even(value)


class FixedWidthOps(IntegerOps):
    fixed_width = True

    def __init__(self, kind):
        if not issubclass(kind, np.integer):
            raise TypeError(f'{kind} is not a numpy integer type')
        self.kind = kind
        self.info = np.iinfo(kind)
        self.signed = self.info.min < 0
        self._zero, self._one = kind(0), kind(1)

    @property
    def zero(self):
        return self._zero

    @property
    def one(self):
        return self._one

    def coerce(self, value):
        if isinstance(value, np.integer):
            if type(value) is not self.kind:
                raise TypeError(f'Cannot mix {type(value).__name__} with {self.kind.__name__}')
            return value
        if not isinstance(value, int):
            raise TypeError(f'Expected an integer, got: {type(value).__name__}')
        if not self.info.min <= value <= self.info.max:
            raise OverflowError(f'{value} does not fit in {self.kind.__name__}')
        return self.kind(value)

    def is_even(self, value) -> bool:
        return value & self._one == self._zero

    def shr(self, value):
        return value >> self._one

    def shl(self, value):
        return value << self._one

    @contextmanager
    def guard(self):
        try:
            with np.errstate(over='raise', divide='raise'):
                yield
        except FloatingPointError as e:
            raise OverflowError(f'{self.kind.__name__} arithmetic overflowed: {e}') from e


BIGINT_OPS = BigIntOps()
MPZ_OPS = MpzOps()


def ops_for(*values) -> IntegerOps:
    '''
        Pick the adapter for a group of operands. A numpy scalar fixes the width for the whole group, otherwise an
        mpz promotes the group to gmpy2, otherwise plain python ints are used.
    :return: the IntegerOps adapter; operands still need `coerce`
    '''
    kinds = {type(v) for v in values if isinstance(v, np.integer)}
    if len(kinds) > 1:
        raise TypeError(f'Mixed fixed-width types: {sorted(k.__name__ for k in kinds)}')
    if kinds:
        return FixedWidthOps(kinds.pop())

    if any(isinstance(v, MPZ_OPS.kind) for v in values):
        return MPZ_OPS

    for v in values:
        if not isinstance(v, int):
            raise TypeError(f'Unsupported integer type: {type(v).__name__}')
    return BIGINT_OPS
