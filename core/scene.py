import math
import logging
from typing import Iterable, Optional, Tuple
from dataclasses import dataclass
from core.math import Ray
from core.material import Color, HitRecord, BLACK
from core.geometry import Sphere
from core.light import Light
from core.errors import InvalidLightConfiguration, InvalidDimensions, InvalidRecursionDepth

logger = logging.getLogger(__name__)

# 부동소수점 합산 오차 허용치 (0.2 + 0.6 + 0.2 같은 합은 통과)
INTENSITY_TOLERANCE = 1e-9


@dataclass
class RenderSettings:
    width: int = 640
    height: int = 480
    max_depth: int = 3

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(
                f"width and height must be positive, got {self.width}x{self.height}")
        if self.max_depth < 0:
            raise InvalidRecursionDepth(f"max_depth must be >= 0, got {self.max_depth}")


class Scene:
    """구체와 조명의 불변 모음. 렌더링 중에는 읽기만 한다."""

    def __init__(self,
                 spheres: Iterable[Sphere],
                 lights: Iterable[Light],
                 background: Color = BLACK):
        self._spheres: Tuple[Sphere, ...] = tuple(spheres)
        self._lights: Tuple[Light, ...] = tuple(lights)
        self._background = background
        self._validate_lights()

    @property
    def spheres(self) -> Tuple[Sphere, ...]:
        return self._spheres

    @property
    def lights(self) -> Tuple[Light, ...]:
        return self._lights

    @property
    def background(self) -> Color:
        return self._background

    def total_intensity(self) -> float:
        return math.fsum(light.intensity for light in self._lights)

    def _validate_lights(self):
        for light in self._lights:
            if not math.isfinite(light.intensity) or light.intensity < 0:
                raise InvalidLightConfiguration(
                    f"light intensity must be finite and non-negative: {light!r}")
        total = self.total_intensity()
        if total > 1.0 + INTENSITY_TOLERANCE:
            # 과노출로 이어지는 설정
            raise InvalidLightConfiguration(
                f"total light intensity {total:.4f} exceeds 1.0 (would lead to overexposure)")
        logger.debug("씬 생성: 구체 %d개, 조명 %d개, 조명 합 %.3f",
                     len(self._spheres), len(self._lights), total)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """(t_min, t_max) 범위 안에서 가장 가까운 교차. 동률이면 먼저 나온 구체."""
        closest_so_far = t_max
        closest_sphere = None

        for sphere in self._spheres:
            roots = sphere.intersect(ray)
            if roots is None:
                continue
            for t in roots:
                if t_min < t < closest_so_far:
                    closest_so_far = t
                    closest_sphere = sphere

        if closest_sphere is None:
            return None
        return HitRecord(closest_sphere, closest_so_far)
