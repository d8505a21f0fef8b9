import operator  # default combination (+) and its inverse (-)

class Bit:  # Binary indexed (Fenwick) tree over an associative, invertible operator.
    """Point update / prefix aggregate in O(log n).

    `tree` is 1-indexed internally: `tree[i]` combines logical positions
    `[i - lowbit(i), i)` (0-indexed). The public API is 0-indexed.
    `op` must be associative and commutative with `inverse(op(a, b), b) == a`;
    `identity` is its neutral element.
    """

    def __init__(self, values=(), op=operator.add, inverse=operator.sub, identity=0):  # Bulk build in O(n).
        self.op = op
        self.inverse = inverse
        self.identity = identity
        self.tree = [identity] + list(values)
        n = len(self.tree) - 1
        for i in range(1, n + 1):
            j = i + (i & -i)
            if j <= n:
                self.tree[j] = op(self.tree[j], self.tree[i])

    @classmethod
    def with_size(cls, n, op=operator.add, inverse=operator.sub, identity=0):  # n positions, all identity.
        if n < 0:
            raise ValueError("size must be non-negative")
        return cls([identity] * n, op=op, inverse=inverse, identity=identity)

    def __len__(self): return len(self.tree) - 1

    def _check_index(self, index):  # 0 <= index < n, else IndexError.
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range for Bit of size {len(self)}")

    def update(self, index, delta):  # Combine delta into position `index`.
        self._check_index(index)
        i = index + 1
        while i < len(self.tree):
            self.tree[i] = self.op(self.tree[i], delta)
            i += i & -i

    add = update

    def sub(self, index, delta):  # Remove delta from position `index` via the inverse operator.
        self._check_index(index)
        i = index + 1
        while i < len(self.tree):
            self.tree[i] = self.inverse(self.tree[i], delta)
            i += i & -i

    def query(self, prefix_length):  # Combination of positions [0, prefix_length).
        if not 0 <= prefix_length <= len(self):
            raise IndexError(f"prefix length {prefix_length} out of range for Bit of size {len(self)}")
        out = self.identity
        i = prefix_length
        while i > 0:
            out = self.op(out, self.tree[i])
            i -= i & -i
        return out

    def range_query(self, start=0, stop=None):  # Combination of positions [start, stop).
        stop = len(self) if stop is None else stop
        if not 0 <= start <= stop <= len(self):
            raise IndexError(f"range [{start}, {stop}) out of range for Bit of size {len(self)}")
        if start == 0:
            return self.query(stop)
        return self.inverse(self.query(stop), self.query(start))

    def get(self, index):  # Logical value at one position.
        self._check_index(index)
        return self.range_query(index, index + 1)

    def __getitem__(self, index):
        if index < 0:
            index += len(self)
        return self.get(index)

    def values(self):  # Logical array in O(n log n).
        return [self.get(i) for i in range(len(self))]

    def __eq__(self, other):
        if not isinstance(other, Bit):
            return NotImplemented
        return self.tree == other.tree

    __hash__ = None  # Mutable.

    def __repr__(self): return f"Bit({self.values()!r})"

FenwickTree = Bit  # Conventional name.
