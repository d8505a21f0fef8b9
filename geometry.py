import math  # float lengths
from enum import Enum  # orientation tags
from fractions import Fraction  # exact affine coordinates

from number_theory import gcd  # homogeneous normalisation

class Orientation(Enum):  # Turn direction of an ordered point triple.
    COUNTERCLOCKWISE = 1
    COLLINEAR = 0
    CLOCKWISE = -1

def _reduce(values):  # Divide integer values by their common gcd (all-zero stays all-zero).
    g = 0
    for v in values:
        g = gcd(g, v)
    return [v // g for v in values] if g > 1 else list(values)

class Point:  # Exact plane point in homogeneous integer coordinates (x/z, y/z).
    __slots__ = ("hx", "hy", "hz")

    def __init__(self, x, y, z=1):  # Normalise so gcd(x, y, z) == 1 and z > 0.
        x, y, z = int(x), int(y), int(z)
        if z == 0:
            raise ValueError("point at infinity (z == 0)")
        if z < 0:
            x, y, z = -x, -y, -z
        self.hx, self.hy, self.hz = _reduce((x, y, z))

    @classmethod
    def from_coordinates(cls, x, y):  # Build from ints or Fractions.
        x, y = Fraction(x), Fraction(y)
        z = x.denominator * y.denominator // gcd(x.denominator, y.denominator)
        return cls(x.numerator * (z // x.denominator), y.numerator * (z // y.denominator), z)

    @property
    def x(self): return Fraction(self.hx, self.hz)

    @property
    def y(self): return Fraction(self.hy, self.hz)

    def to_float_pair(self): return (self.hx / self.hz, self.hy / self.hz)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.hx, self.hy, self.hz) == (other.hx, other.hy, other.hz)

    def __hash__(self): return hash((self.hx, self.hy, self.hz))

    def __repr__(self):
        if self.hz == 1:
            return f"Point({self.hx}, {self.hy})"
        return f"Point({self.x}, {self.y})"

def as_point(p):  # Accept Point or an (x, y) pair.
    return p if isinstance(p, Point) else Point.from_coordinates(*p)

def orientation(p0, p1, p2):  # Sign of the signed area spanned by p0 -> p1 -> p2.
    p0, p1, p2 = as_point(p0), as_point(p1), as_point(p2)
    cross = (p1.x - p0.x) * (p2.y - p0.y) - (p2.x - p0.x) * (p1.y - p0.y)
    if cross > 0:
        return Orientation.COUNTERCLOCKWISE
    if cross < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR

class Line:  # Points (x, y) with a*x + b*y + c == 0, integer coefficients.
    __slots__ = ("a", "b", "c")

    def __init__(self, a, b, c):  # Normalise: coprime, first nonzero coefficient positive.
        a, b, c = int(a), int(b), int(c)
        if a == 0 and b == 0:
            raise ValueError("degenerate line (a == b == 0)")
        if a < 0 or (a == 0 and b < 0):
            a, b, c = -a, -b, -c
        self.a, self.b, self.c = _reduce((a, b, c))

    @classmethod
    def spanned_by(cls, p1, p2):  # Line through two distinct points.
        p1, p2 = as_point(p1), as_point(p2)
        if p1 == p2:
            raise ValueError("a line needs two distinct points")
        return cls(
            p2.hz * p1.hy - p1.hz * p2.hy,
            p1.hz * p2.hx - p2.hz * p1.hx,
            p1.hx * p2.hy - p2.hx * p1.hy,
        )

    def contains(self, p):
        p = as_point(p)
        return self.a * p.hx + self.b * p.hy + self.c * p.hz == 0

    def intersect(self, other):  # Point, the line itself when identical, or None when parallel.
        x = other.c * self.b - self.c * other.b
        y = self.c * other.a - other.c * self.a
        z = self.a * other.b - other.a * self.b
        if z != 0:
            return Point(x, y, z)
        if x == 0 and y == 0:
            return self
        return None

    def closest_point_to(self, p):  # Orthogonal projection of p onto the line.
        p = as_point(p)
        a, b, c = self.a, self.b, self.c
        return Point(
            b * (b * p.hx - a * p.hy) - a * c * p.hz,
            a * (a * p.hy - b * p.hx) - b * c * p.hz,
            (a * a + b * b) * p.hz,
        )

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return (self.a, self.b, self.c) == (other.a, other.b, other.c)

    def __hash__(self): return hash((self.a, self.b, self.c))

    def __repr__(self): return f"Line({self.a}, {self.b}, {self.c})"

class Segment:  # Closed segment between two distinct points; endpoint order is irrelevant for equality.
    __slots__ = ("p1", "p2")

    def __init__(self, p1, p2):
        p1, p2 = as_point(p1), as_point(p2)
        if p1 == p2:
            raise ValueError("degenerate segment")
        self.p1, self.p2 = p1, p2

    @classmethod
    def between(cls, p1, p2):  # None instead of ValueError for equal endpoints.
        p1, p2 = as_point(p1), as_point(p2)
        return None if p1 == p2 else cls(p1, p2)

    def to_line(self): return Line.spanned_by(self.p1, self.p2)

    def intersect(self, other):  # None, a Point, or the overlapping Segment.
        side = (orientation(self.p1, self.p2, other.p1), orientation(self.p1, self.p2, other.p2))
        if side[0] == side[1] != Orientation.COLLINEAR:
            return None
        if side == (Orientation.COLLINEAR, Orientation.COLLINEAR):
            key = (lambda p: p.x) if self.p1.x != self.p2.x else (lambda p: p.y)
            s1, e1 = sorted((self.p1, self.p2), key=key)
            s2, e2 = sorted((other.p1, other.p2), key=key)
            start = max(s1, s2, key=key)
            end = min(e1, e2, key=key)
            if key(start) < key(end):
                return Segment(start, end)
            if key(start) == key(end):
                return start
            return None
        side = (orientation(other.p1, other.p2, self.p1), orientation(other.p1, other.p2, self.p2))
        if side[0] == side[1]:  # both strictly on one side; both collinear was handled above
            return None
        return self.to_line().intersect(other.to_line())

    def sq_len(self):
        dx = self.p2.x - self.p1.x
        dy = self.p2.y - self.p1.y
        return dx * dx + dy * dy

    def length(self): return math.sqrt(self.sq_len())

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return {self.p1, self.p2} == {other.p1, other.p2}

    def __hash__(self): return hash(frozenset((self.p1, self.p2)))

    def __repr__(self): return f"Segment({self.p1!r}, {self.p2!r})"

class Polygon:  # Closed polygon given by its vertices in order.
    def __init__(self, points):
        self.points = [as_point(p) for p in points]
        if not self.points:
            raise ValueError("polygon cannot be empty")

    def segments(self):  # Edges (p[-1], p[0]), (p[0], p[1]), ...
        prev = self.points[-1]
        for p in self.points:
            yield prev, p
            prev = p

    def area(self):  # Signed area (shoelace); positive for counter-clockwise vertices.
        twice = sum((p.x * q.y - q.x * p.y for p, q in self.segments()), Fraction(0))
        return twice / 2

    def __len__(self): return len(self.points)

    def __repr__(self): return f"Polygon({self.points!r})"

def convex_hull(points):  # Monotone chain; counter-clockwise, keeps points on hull edges. None if all points coincide.
    pts = sorted({as_point(p) for p in points}, key=lambda p: (p.x, p.y))
    if len(pts) <= 1:
        return None
    lower, upper = [], []
    for p in pts:
        while len(lower) >= 2 and orientation(lower[-2], lower[-1], p) == Orientation.CLOCKWISE:
            lower.pop()
        lower.append(p)
        while len(upper) >= 2 and orientation(upper[-2], upper[-1], p) == Orientation.COUNTERCLOCKWISE:
            upper.pop()
        upper.append(p)
    upper.reverse()
    return Polygon(lower + upper[1:-1])
