## Residue: an element of Z/mZ
## @author: Luke Li<zhongwei.li@mavs.uta.edu>
from typing import Optional

from .common import mod_inverse
from .errors import ModulusMismatchError, NotInvertibleError
from .modular import mod_add, mod_exp, mod_mul, mod_sub, check_modulus
from .typing import ops_for


class Residue:
    __slots__ = ('value', 'modulus')

    def __init__(self, value, modulus):
        ops = ops_for(value, modulus)
        value, modulus = ops.coerce(value), ops.coerce(modulus)
        check_modulus(ops, modulus)

        self.modulus = modulus
        self.value = ops.mod_floor(value, modulus)

    @classmethod
    def zero(cls, modulus) -> 'Residue':
        return cls(0, modulus)

    @classmethod
    def one(cls, modulus) -> 'Residue':
        return cls(1, modulus)

    def _coerce(self, other) -> 'Residue':
        ''' Residues must share the modulus; plain integers are taken as-is in this ring '''
        if isinstance(other, Residue):
            if other.modulus != self.modulus:
                raise ModulusMismatchError(self.modulus, other.modulus)
            return other
        return Residue(other, self.modulus)

    def inv(self) -> Optional['Residue']:
        r = mod_inverse(self.value, self.modulus)
        return None if r is None else Residue(r, self.modulus)

    def __add__(self, other):
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return Residue(mod_add(self.value, other.value, self.modulus), self.modulus)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return Residue(mod_sub(self.value, other.value, self.modulus), self.modulus)

    def __rsub__(self, other):
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return other.__sub__(self)

    def __neg__(self):
        return Residue.zero(self.modulus) - self

    def __mul__(self, other):
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return Residue(mod_mul(self.value, other.value, self.modulus), self.modulus)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented

        inv = other.inv()
        if inv is None:
            raise NotInvertibleError(other.value, self.modulus)
        return self * inv

    def __rtruediv__(self, other):
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return other.__truediv__(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented

        base = self
        if exponent < 0:
            base = self.inv()
            if base is None:
                raise NotInvertibleError(self.value, self.modulus)
            exponent = -exponent

        return Residue(mod_exp(base.value, exponent, self.modulus), self.modulus)

    def __eq__(self, other):
        if not isinstance(other, Residue):
            return NotImplemented
        return self.value == other.value and self.modulus == other.modulus

    def __hash__(self):
        return hash((int(self.value), int(self.modulus)))

    def __repr__(self):
        return f"{self.value} (mod {self.modulus})"

    def __int__(self):
        return int(self.value)
