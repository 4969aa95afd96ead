import math


class Vec3:
    __slots__ = ("x", "y", "z")

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other):
        return Vec3(self.x + other.x,
                    self.y + other.y,
                    self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x,
                    self.y - other.y,
                    self.z - other.z)

    def __mul__(self, t):
        # 스칼라 곱만 허용
        return Vec3(self.x * t, self.y * t, self.z * t)

    __rmul__ = __mul__

    def __truediv__(self, t):
        return Vec3(self.x / t, self.y / t, self.z / t)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self):
        return math.sqrt(self.dot(self))

    def normalize(self):
        # 길이 0 벡터는 영벡터 그대로 반환
        l = self.length()
        if l == 0:
            return Vec3(0, 0, 0)
        return self / l

    def reflect(self, normal):
        # 반사 벡터: r = 2 * n * dot(v, n) - v  (v는 표면에서 바깥을 향함)
        return normal * (2 * self.dot(normal)) - self

    def is_finite(self):
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    @classmethod
    def from_seq(cls, values):
        x, y, z = values
        return cls(x, y, z)

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


class Ray:
    """방향 벡터는 정규화하지 않는다 (교차 계산이 길이에 무관)"""

    def __init__(self, origin: Vec3, direction: Vec3):
        self.origin = origin
        self.direction = direction

    def point_at_parameter(self, t):
        return self.origin + self.direction * t

    def __repr__(self):
        return f"Ray({self.origin!r}, {self.direction!r})"
