## Common arithmetics: gcd family and modular inverse
## @author: Luke Li<zhongwei.li@mavs.uta.edu>
# references:
# [1] [Handbook of Applied Cryptography, ch. 14](https://cacr.uwaterloo.ca/hac/about/chap14.pdf), Alg. 14.61
import logging

from .errors import NonPositiveOperandError
from .typing import BIGINT_OPS, GcdResult, ops_for
from .utils import load_config, profiler

logger = logging.getLogger(__name__)

# Convenient lambdas
ith_bit = lambda n, i: (n >> i) & 1  # get the i-th bit of number n
is_power_of_two = lambda n: n > 0 and (n & (n - 1)) == 0  # check if n is power of 2

# Configuration
config = load_config()
DEFAULT_MUL_OPT = config.get('DEFAULT_MUL_OPT', 'auto')
PROFILE = bool(config.get('PROFILE', False))


def xgcd(a, b):
    '''
        ax + by = gcd(a,b), classical extended Euclid without recursion
    :param a:
    :param b:
    :return: x, y and gcd(a,b)
        !!NOTE: x, and y could be negative numbers
    '''
    x0, x1, y0, y1 = 1, 0, 0, 1
    while b != 0:
        q = a // b
        a, b = b, a % b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return x0, y0, a


def bin_gcd(a, b):
    ''' Binary gcd of two positive integers, no coefficients '''
    ops = ops_for(a, b)
    u, v, e = ops.coerce(a), ops.coerce(b), ops.one
    if u <= ops.zero or v <= ops.zero:
        raise NonPositiveOperandError(a, b)

    with ops.guard():
        while ops.is_even(u) and ops.is_even(v):
            u, v, e = ops.shr(u), ops.shr(v), ops.shl(e)

        while u != ops.zero:
            while ops.is_even(u):
                u = ops.shr(u)
            while ops.is_even(v):
                v = ops.shr(v)

            if u >= v:
                u -= v
            else:
                v -= u

        return e * v


def _binary_xgcd(ops, x, y) -> GcdResult:
    ''' Alg. 14.61 of [1] on positive x, y of the kind handled by ops '''
    zero, one = ops.zero, ops.one

    with ops.guard():
        # strip the common power of 2
        xx, yy, g = x, y, one
        while ops.is_even(xx) and ops.is_even(yy):
            xx, yy, g = ops.shr(xx), ops.shr(yy), ops.shl(g)

        u, v = xx, yy
        a, b, c, d = one, zero, zero, one

        while u != zero:
            while ops.is_even(u):
                u = ops.shr(u)

                if ops.is_even(a) and ops.is_even(b):
                    a, b = ops.shr(a), ops.shr(b)
                else:
                    a, b = ops.shr(a + yy), ops.shr(b - xx)

            while ops.is_even(v):
                v = ops.shr(v)

                if ops.is_even(c) and ops.is_even(d):
                    c, d = ops.shr(c), ops.shr(d)
                else:
                    c, d = ops.shr(c + yy), ops.shr(d - xx)

            if u >= v:
                u, a, b = u - v, a - c, b - d
            else:
                v, c, d = v - u, c - a, d - b

        return GcdResult(coef_x=c, coef_y=d, g=g, gcd=g * v)


def _wide_extended_gcd(x, y):
    '''
        Validate x, y and run the extended gcd. Intermediates grow to about twice the inputs, so fixed-width kinds
        are widened to python int for the loop.
    :return: (ops of the caller's kind, GcdResult in the working kind)
    '''
    ops = ops_for(x, y)
    x, y = ops.coerce(x), ops.coerce(y)

    if x <= ops.zero or y <= ops.zero:
        raise NonPositiveOperandError(x, y)

    if ops.fixed_width:
        return ops, _binary_xgcd(BIGINT_OPS, int(x), int(y))
    return ops, _binary_xgcd(ops, x, y)


@profiler(num_runs=100, enabled=PROFILE)
def extended_gcd(x, y) -> GcdResult:
    '''
        Binary extended gcd, see [1] Alg. 14.61. Uses shifts, additions and subtractions only.

        The coefficients are NOT unique: any (a, b) with a*x + b*y == gcd is a solution, and this returns just one.
        Nor are they bounded by the inputs: coef_x may exceed y.
    :param x: strictly positive integer
    :param y: strictly positive integer
    :return: GcdResult(coef_x, coef_y, g, gcd), coef_x * x + coef_y * y == gcd
    :raise NonPositiveOperandError: if x <= 0 or y <= 0
    :raise OverflowError: a fixed-width kind cannot hold one of the coefficients
    '''
    ops = ops_for(x, y)
    if not ops.signed:
        raise TypeError(f'Extended gcd coefficients can be negative, {ops.kind.__name__} is unsigned')

    ops, res = _wide_extended_gcd(x, y)
    if ops.fixed_width:
        return GcdResult(*(ops.coerce(v) for v in res))
    return res


def valid_solution(x, y, coef_x, coef_y, gcd) -> bool:
    ''' Whether (coef_x, coef_y) solves coef_x * x + coef_y * y == gcd '''
    return coef_x * x + coef_y * y == gcd


@profiler(num_runs=100, enabled=PROFILE)
def mod_inverse(x, modulus):
    '''
        Return r such that x*r = 1 mod modulus
    :param x: the given number
    :param modulus: the modulo
    :return: r in [0, modulus), or None when gcd(x, modulus) != 1 or either input is not positive.
        Every integer is its own inverse mod 1, so modulus == 1 gives 0.
    '''
    ops = ops_for(x, modulus)
    x, modulus = ops.coerce(x), ops.coerce(modulus)

    if modulus == ops.one:
        return ops.zero

    try:
        _, res = _wide_extended_gcd(x, modulus)
    except NonPositiveOperandError:
        logger.debug(f'No inverse for x={x} mod {modulus}: non-positive operand')
        return None

    if res.gcd != 1:
        return None

    m = int(modulus) if ops.fixed_width else modulus
    # coef_x can sit below -m or above m, one floor reduction lands it in [0, m)
    r = res.coef_x % m

    assert 0 <= r < m, f'inverse {r} escaped [0, {m})'
    return ops.coerce(r)


def co_prime(a, b):
    return _wide_extended_gcd(a, b)[1].gcd == 1


def lcm(a, b):
    ''' Least common multiple of two positive integers '''
    ops, res = _wide_extended_gcd(a, b)
    with ops.guard():
        return ops.div_floor(ops.coerce(a), ops.coerce(res.gcd)) * ops.coerce(b)
