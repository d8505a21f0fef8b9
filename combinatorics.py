from dataclasses import dataclass  # lightweight immutable subset handle

def next_permutation(seq):  # In-place lexicographic successor; False (and reset to sorted) after the last one.
    n = len(seq)
    if n <= 1:
        return False
    i = n - 1
    while i > 0 and seq[i - 1] >= seq[i]:
        i -= 1
    if i == 0:
        seq.reverse()
        return False
    j = n - 1
    while not seq[i - 1] < seq[j]:  # suffix is non-increasing, so the first hit from the back is the smallest larger item
        j -= 1
    seq[i - 1], seq[j] = seq[j], seq[i - 1]
    seq[i:] = seq[i:][::-1]
    return True

@dataclass(frozen=True, order=True)
class Subset:  # Subset of {0, ..., n-1} encoded as a bit mask (bit i <=> item i).
    mask: int

    def select(self, items):  # Yield the items whose positions are in the subset.
        mask = self.mask
        for item in items:
            if not mask:
                return
            if mask & 1:
                yield item
            mask >>= 1

    def is_empty(self): return self.mask == 0

    def contains(self, i): return (self.mask >> i) & 1 == 1

    __contains__ = contains

    def __len__(self): return bin(self.mask).count("1")

def subsets(n):  # All 2**n subsets of {0, ..., n-1}, in mask order.
    if n < 0:
        raise ValueError("n must be non-negative")
    return (Subset(mask) for mask in range(1 << n))
