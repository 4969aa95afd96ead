import math
from typing import Optional, Tuple

from core.errors import DegenerateGeometry
from core.math import Vec3, Ray
from core.material import Material


class Sphere:
    def __init__(self, center: Vec3, radius: float, material: Material):
        if not (radius > 0 and math.isfinite(radius)):
            raise DegenerateGeometry(f"sphere radius must be positive and finite, got {radius}")
        if not center.is_finite():
            raise DegenerateGeometry(f"sphere center must be finite, got {center!r}")
        self.center = center
        self.radius = float(radius)
        self.material = material

    def intersect(self, ray: Ray) -> Optional[Tuple[float, float]]:
        """
        a*t^2 + b*t + c = 0 의 두 근을 그대로 반환 (정렬/범위 필터링 없음).
        판별식이 음수이면 None.
        방향 벡터 길이가 0이거나 근이 유한하지 않으면 교차 없음으로 처리.
        """
        co = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        if a == 0:
            return None
        b = 2 * co.dot(ray.direction)
        c = co.dot(co) - self.radius * self.radius

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b + sqrt_d) / (2 * a)
        t2 = (-b - sqrt_d) / (2 * a)
        if not (math.isfinite(t1) and math.isfinite(t2)):
            return None
        return t1, t2

    def normal_at(self, point: Vec3) -> Vec3:
        # 바깥쪽 단위 법선
        return (point - self.center).normalize()

    def __repr__(self):
        return f"Sphere(center={self.center!r}, radius={self.radius}, material={self.material!r})"
