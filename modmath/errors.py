## Errors raised by the modular arithmetic routines
## @author: Luke Li<zhongwei.li@mavs.uta.edu>


class ModularArithmeticError(Exception):
    pass


class InvalidModulusError(ModularArithmeticError, ValueError):
    ''' Modulus is zero (or negative): the operation has no meaningful result '''

    def __init__(self, modulus):
        super().__init__(f'Modulus must be a positive integer, got: {modulus}')
        self.modulus = modulus


class NonPositiveOperandError(ModularArithmeticError, ValueError):
    ''' Extended gcd is only defined for strictly positive operands '''

    def __init__(self, x, y):
        super().__init__(f'Both operands must be strictly positive, got: x={x}, y={y}')
        self.x, self.y = x, y


class NegativeExponentError(ModularArithmeticError, ValueError):

    def __init__(self, exponent):
        super().__init__(f'Negative exponents are not supported, got: {exponent}')
        self.exponent = exponent


class ModulusMismatchError(ModularArithmeticError, ValueError):

    def __init__(self, m1, m2):
        super().__init__(f'Cannot combine residues mod {m1} and mod {m2}')
        self.moduli = (m1, m2)


class NotInvertibleError(ModularArithmeticError, ZeroDivisionError):

    def __init__(self, value, modulus):
        super().__init__(f'{value} has no inverse mod {modulus}')
        self.value, self.modulus = value, modulus
