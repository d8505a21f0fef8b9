import logging  # debug log for the chosen base
import os  # env-var lookup
import random  # base selection

from fenwick import Bit  # prefix sums of hash terms
from modint import MOD_1E9P7, IllegalOperationError, ModInt  # hash arithmetic

logger = logging.getLogger(__name__)

SEED_ENV = "COMLIB_ROLLING_HASH_SEED"  # Pin the random base for reproducible runs.

def _rng():  # Seeded PRNG when SEED_ENV is set, otherwise OS entropy.
    seed = os.environ.get(SEED_ENV)
    if seed:
        return random.Random(int(seed))
    return random.SystemRandom()

class RollingHash:  # Polynomial hash of a mutable string with O(log n) substring hashes.
    """Hash `h = sum(ord(c_i) * x**i)` over a prime-field ring.

    The terms live in a Bit, so the hash of `s[l:r]` is the range sum divided
    by `x**l`, and replacing one character is one point update. `x` is random
    per instance to make adversarial collisions unlikely.
    """

    def __init__(self, text, x=None, modulus=MOD_1E9P7):
        if not modulus.invertible:
            raise IllegalOperationError(f"RollingHash needs an invertible modulus, got {modulus!r}")
        if x is None:
            x = ModInt(_rng().randrange(1, modulus.modulus()), modulus)
            logger.debug("rolling hash base x=%d", int(x))
        self.x = ModInt(x, modulus)
        self.chars = list(text)
        terms = []
        p = ModInt.one(modulus)
        for c in self.chars:
            terms.append(p * ord(c))
            p *= self.x
        self.hashes = Bit(terms, identity=ModInt.zero(modulus))

    @property
    def modulus(self): return self.x.m

    @property
    def text(self): return "".join(self.chars)

    def __len__(self): return len(self.chars)

    def get_hash(self, start=0, stop=None):  # Hash of text[start:stop], normalised to start at x**0.
        return self.hashes.range_query(start, stop) / self.x.pow(start)

    def set_char(self, index, ch):  # Replace one character: add x**i * (new - old).
        if not 0 <= index < len(self.chars):
            raise IndexError(f"index {index} out of range for text of length {len(self.chars)}")
        if len(ch) != 1:
            raise ValueError("expected a single character")
        old = self.chars[index]
        self.chars[index] = ch
        self.hashes.update(index, self.x.pow(index) * (ord(ch) - ord(old)))
