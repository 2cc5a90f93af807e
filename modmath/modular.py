## Modular exponentiation, multiplication, addition, subtraction and division
## @author: Luke Li<zhongwei.li@mavs.uta.edu>
# Every operation validates its modulus on entry: a zero (or negative) modulus raises InvalidModulusError before any
# arithmetic is done.
from typing import Optional
import logging

from .common import DEFAULT_MUL_OPT, PROFILE, mod_inverse
from .errors import InvalidModulusError, NegativeExponentError
from .mont import Montgomery
from .typing import IntegerOps, ops_for
from .utils import profiler

logger = logging.getLogger(__name__)

MUL_OPTS = ('auto', 'direct')


def check_modulus(ops: IntegerOps, modulus):
    if modulus <= ops.zero:
        raise InvalidModulusError(modulus)


def _prepare(*values):
    ops = ops_for(*values)
    return ops, [ops.coerce(v) for v in values]


@profiler(num_runs=100, enabled=PROFILE)
def mod_exp(base, exponent, modulus):
    '''
        Right-to-left square-and-multiply
    :param base: any integer, reduced into [0, modulus) first
    :param exponent: non-negative integer
    :param modulus: positive integer
    :return: base ** exponent mod modulus, in [0, modulus)
    :raise InvalidModulusError: modulus <= 0
    :raise NegativeExponentError: exponent < 0 (and modulus != 1)
    '''
    ops, (base, exponent, modulus) = _prepare(base, exponent, modulus)
    check_modulus(ops, modulus)

    # every integer is congruent to 0 mod 1
    if modulus == ops.one:
        return ops.zero

    if exponent < ops.zero:
        raise NegativeExponentError(exponent)

    with ops.guard():
        result = ops.one
        base = ops.mod_floor(base, modulus)

        while exponent > ops.zero:
            if ops.is_odd(exponent):
                result = ops.mod_floor(result * base, modulus)

            base = ops.mod_floor(base * base, modulus)
            exponent = ops.shr(exponent)

    assert ops.zero <= result < modulus, f'mod_exp result {result} escaped [0, {modulus})'
    return result


def mod_add(x, y, modulus):
    ''' (x + y) mod modulus '''
    ops, (x, y, modulus) = _prepare(x, y, modulus)
    check_modulus(ops, modulus)

    with ops.guard():
        return ops.mod_floor(x + y, modulus)


def mod_sub(x, y, modulus):
    ''' (x - y) mod modulus '''
    ops, (x, y, modulus) = _prepare(x, y, modulus)
    check_modulus(ops, modulus)

    with ops.guard():
        return ops.mod_floor(x - y, modulus)


def _direct_mul(ops, x, y, modulus):
    return ops.mod_floor(x * y, modulus)


def _mont_mul(ops, x, y, modulus):
    # No precomputation is reused across calls: correct, not faster
    mont = Montgomery(int(modulus))
    t = mont.multiply(int(ops.mod_floor(x, modulus)), int(ops.mod_floor(y, modulus)))
    return ops.coerce(t)


def get_multiplier(ops: IntegerOps, modulus, mul_opt: str):
    '''
        'direct': always (x * y) % modulus
        'auto': Montgomery reduction for an odd arbitrary-precision modulus (R = 2**n is then co-prime to it), direct
                otherwise. Fixed-width kinds always multiply directly.
    '''
    if mul_opt not in MUL_OPTS:
        raise ValueError(f'Unknown multiplication option specified: {mul_opt}')

    if mul_opt == 'direct' or ops.fixed_width or ops.is_even(modulus):
        return _direct_mul

    return _mont_mul


@profiler(num_runs=100, enabled=PROFILE)
def mod_mul(x, y, modulus, mul_opt: Optional[str] = None):
    '''
        (x * y) mod modulus
    :param mul_opt: 'auto' or 'direct', defaults to DEFAULT_MUL_OPT of the configuration
        !!NOTE: for fixed-width kinds the product must fit the type, otherwise OverflowError is raised
    '''
    ops, (x, y, modulus) = _prepare(x, y, modulus)
    check_modulus(ops, modulus)

    mul = get_multiplier(ops, modulus, mul_opt or DEFAULT_MUL_OPT)
    logger.debug(f'mod_mul mod {modulus} via {mul.__name__}')

    with ops.guard():
        return mul(ops, x, y, modulus)


def mod_div(x, y, modulus):
    '''
        x * y^{-1} mod modulus
    :return: the quotient, or None when y has no inverse mod modulus
    '''
    ops, (x, y, modulus) = _prepare(x, y, modulus)
    check_modulus(ops, modulus)

    inv = mod_inverse(ops.mod_floor(y, modulus), modulus)
    if inv is None:
        return None

    return mod_mul(x, inv, modulus)
