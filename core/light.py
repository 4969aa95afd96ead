"""
조명 종류 (Ambient / Point / Directional)와 한 점에서의 조명 세기 계산.

조명은 닫힌 합 타입으로 표현한다. 각 변형은 자기에게 필요한 필드만 가지므로
위치 없는 Point 조명 같은 잘못된 조합은 만들 수 없다.
"""
from dataclasses import dataclass
from typing import Optional, Union

from core.math import Vec3, Ray

SHADOW_EPSILON = 1e-3


@dataclass(frozen=True)
class AmbientLight:
    intensity: float


@dataclass(frozen=True)
class PointLight:
    intensity: float
    position: Vec3

    def direction_from(self, point: Vec3) -> Vec3:
        return self.position - point


@dataclass(frozen=True)
class DirectionalLight:
    intensity: float
    # 표면에서 광원 쪽을 향하는 방향 (정규화하지 않음)
    direction: Vec3

    def direction_from(self, point: Vec3) -> Vec3:
        return self.direction


Light = Union[AmbientLight, PointLight, DirectionalLight]


def compute_lighting(scene, point: Vec3, normal: Vec3, view: Vec3, specular: Optional[int]) -> float:
    """
    point: 셰이딩할 표면 위의 점
    normal: 바깥쪽 단위 법선
    view: 표면에서 광선 원점을 향하는 방향
    specular: 스페큘러 지수 (None이면 스페큘러 항 생략)

    반환값은 0 이상의 세기이며 1로 자르지 않는다 (자르는 것은 색 계산에서).
    """
    intensity = 0.0
    for light in scene.lights:
        if isinstance(light, AmbientLight):
            intensity += light.intensity
            continue

        to_light = light.direction_from(point)

        # 그림자: 광원 방향으로 무한대까지 아무 구체든 막으면 이 조명은 기여 없음
        # (Point 조명 뒤쪽에 있는 구체도 그림자를 만든다)
        if scene.hit(Ray(point, to_light), SHADOW_EPSILON, float('inf')) is not None:
            continue

        # Diffuse
        n_dot_l = normal.dot(to_light)
        if n_dot_l > 0:
            intensity += light.intensity * n_dot_l / (normal.length() * to_light.length())

        # Specular (Phong)
        if specular is not None:
            reflection = normal * (2 * normal.dot(to_light)) - to_light
            r_dot_v = reflection.dot(view)
            if r_dot_v > 0:
                intensity += light.intensity * (r_dot_v / (reflection.length() * view.length())) ** specular

    return intensity
