## Modular arithmetic over fixed-width and arbitrary-precision integers
## @author: Luke Li<zhongwei.li@mavs.uta.edu>
import logging

from .common import (config, xgcd, bin_gcd, extended_gcd, valid_solution, mod_inverse, co_prime, lcm)
from .errors import (ModularArithmeticError, InvalidModulusError, NonPositiveOperandError, NegativeExponentError,
                     ModulusMismatchError, NotInvertibleError)
from .modular import mod_exp, mod_add, mod_sub, mod_mul, mod_div
from .mont import Montgomery
from .residue import Residue
from .typing import GcdResult, IntegerOps, BigIntOps, MpzOps, FixedWidthOps, ops_for

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(config.get('LOG_LEVEL', 'WARNING'))

__version__ = '0.1.0'
