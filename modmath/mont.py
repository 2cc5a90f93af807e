## Montgomery context over Z_N for an odd N
## @author: Luke Li<zhongwei.li@mavs.uta.edu>
# Used by mod_mul for odd arbitrary-precision moduli. Building a context costs more than the single multiplication it
# serves, so this path gives the same results as the direct one without being faster.
# references:
# [1] [Montgomery modular multiplication](https://en.wikipedia.org/wiki/Montgomery_modular_multiplication)
# [2] [Topics in Computational Number Theory Inspired by Peter L. Montgomery](https://www.cambridge.org/core/books/topics-in-computational-number-theory-inspired-by-peter-l-montgomery/4F7A9AE2CE219D490B7D253558CF6F00)
import logging

from .common import co_prime

logger = logging.getLogger(__name__)


class Montgomery:
    def __init__(self, mod: int):
        mod = int(mod)
        if mod <= 0 or not mod & 1:
            raise ValueError(f'The modulus must be a positive odd number, got: {mod}')

        self.N = mod  # modulo
        self.n = mod.bit_length()  # 2 ** n > modulo
        self.R = 1 << self.n  # the smallest power of 2 greater than N
        self._RMASK = self.R - 1  # (&_RMASK) substitutes for (%R) operation

        # R is a power of 2 and N is odd, so R^{-1} mod N exists
        assert co_prime(self.R, self.N), f'R={self.R} and N={self.N} are not co-prime'

        self.N_ = self.mont_const(self.n)  # N' for RR'-NN'=1
        self.R2 = self.__pre_calc_R2()  # R^2 % N
        logger.debug(f'Montgomery context built: N={self.N}, R=2**{self.n}')

    def __pre_calc_R2(self):
        # Use n rounds of modulo addition to get R^2 % N, where R = 2^n
        # refer: [2] p.19
        ci = self.R % self.N  # c0 = R
        for _ in range(self.n):
            ci = (ci + ci) % self.N

        return ci

    def mont_const(self, w):
        '''
            a.k.a Montgomery constant N', for rr'-NN'=1, where r=2^w
            refer: [2] p.18, Alg. 2.3
        :return: -N^{-1} mod 2^w
        '''
        y = 1
        for i in range(2, w + 1):
            if y * self.N & ((1 << i) - 1) == 1:
                continue

            y += (1 << i - 1)

        return ((1 << w) - y) & ((1 << w) - 1)  # r - y

    def REDC(self, u: int) -> int:
        '''
            Montgomery reduction (REDC) of number u
            ref: [1]
        :param u: 0 <= u < R*N
        :return: u * R^{-1} mod N
        '''
        if u < 0 or u > self.R * self.N - 1:
            raise ValueError('Given number is out of montgomery reduction range')

        k = u * self.N_ & self._RMASK
        t = (u + k * self.N) >> self.n

        return self.correction(t)

    def correction(self, r):
        assert r < 2 * self.N, f'{r} is not ready for the Montgomery correction step'
        return r if r < self.N else r - self.N

    def enter_domain(self, a: int) -> int:
        return self.REDC((a % self.N) * self.R2)

    def exit_domain(self, a: int) -> int:
        return self.REDC(a)

    def multiply(self, a: int, b: int) -> int:
        ''' a * b mod N for a, b in [0, N), via REDC(REDC(a*R^2) * b) '''
        return self.REDC(self.enter_domain(a) * (b % self.N))
