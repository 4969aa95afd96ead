import math
from typing import Optional

from core.errors import InvalidMaterial


def _clamp_channel(value) -> int:
    return int(max(0, min(255, value)))


class Color:
    """8비트 RGB 색. 모든 채널은 항상 [0, 255] 범위로 고정된다."""

    __slots__ = ("r", "g", "b")

    def __init__(self, r=0, g=0, b=0):
        self.r = _clamp_channel(r)
        self.g = _clamp_channel(g)
        self.b = _clamp_channel(b)

    def illuminate(self, intensity: float) -> "Color":
        """채널별로 intensity 배 (255에서 잘리고 소수점 이하는 버림)"""
        return Color(self.r * intensity, self.g * intensity, self.b * intensity)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __hash__(self):
        return hash((self.r, self.g, self.b))

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b})"


BLACK = Color(0, 0, 0)


class Material:
    def __init__(self,
                 color: Color = Color(255, 255, 255),
                 specular: Optional[int] = None,
                 reflective: float = 0.0):
        """
        color: 기본 색
        specular: Phong 스페큘러 지수 (None이면 스페큘러 없음)
        reflective: 반사 강도 (0~1), 최종 색 중 반사 광선이 차지하는 비율
        """
        if not 0.0 <= reflective <= 1.0:
            raise InvalidMaterial(f"reflective must be within [0, 1], got {reflective}")
        if specular is not None and not (specular > 0 and math.isfinite(specular)):
            raise InvalidMaterial(f"specular exponent must be positive, got {specular}")

        self.color = color
        self.specular = specular
        self.reflective = float(reflective)

    def __repr__(self):
        return (f"Material(color={self.color!r}, specular={self.specular!r}, "
                f"reflective={self.reflective!r})")


class HitRecord:
    """가장 가까운 교차 결과: 맞은 구체와 광선 파라미터 t"""

    __slots__ = ("sphere", "t")

    def __init__(self, sphere, t: float):
        self.sphere = sphere
        self.t = t

    def __iter__(self):
        yield self.sphere
        yield self.t

    def __repr__(self):
        return f"HitRecord(sphere={self.sphere!r}, t={self.t:.6f})"
