import time
import logging
from typing import List
import numpy as np

from core.math import Ray
from core.material import Color
from core.scene import Scene, RenderSettings
from core.camera import Camera
from core.light import compute_lighting
from core.errors import RenderCancelled
from renderers.base_renderer import BaseRenderer, RendererFactory

logger = logging.getLogger(__name__)

# 반사 광선이 자기 자신과 교차하지 않도록 하는 최소 t
REFLECTION_EPSILON = 1e-3
# 카메라 광선은 투영면 너머부터 추적
PRIMARY_T_MIN = 1.0


class CPURenderer(BaseRenderer):
    """CPU 기반 재귀 레이트레이싱 렌더러"""

    def __init__(self):
        super().__init__("cpu_raytracer")

    def get_capabilities(self) -> List[str]:
        return [
            "ray_tracing",
            "shadows",
            "reflection",
            "specular",
        ]

    def render(self, scene: Scene, camera: Camera, settings: RenderSettings, cancel_event=None) -> np.ndarray:
        """
        메인 렌더링 함수.
        픽셀 (x, y)는 화면 중심 기준 좌표이고 결과 그리드의 [y + h//2, x + w//2]에 들어간다.
        cancel_event (threading.Event 등)가 설정되면 다음 행 시작 전에 RenderCancelled.
        """
        settings.validate()
        width, height = settings.width, settings.height

        start_time = time.time()
        logger.info("CPU 렌더링 시작: %dx%d, 최대 깊이 %d", width, height, settings.max_depth)

        pixels = np.zeros((height, width, 3), dtype=np.uint8)
        half_w = width // 2
        half_h = height // 2

        for row in range(height):
            if cancel_event is not None and cancel_event.is_set():
                raise RenderCancelled(f"render cancelled at row {row} of {height}")

            y = row - half_h
            for col in range(width):
                x = col - half_w
                ray = camera.get_ray(x, y, width, height)
                color = self.trace_ray(scene, ray, PRIMARY_T_MIN, float('inf'), settings.max_depth)
                pixels[row, col] = (color.r, color.g, color.b)

            if row % 50 == 0:
                logger.debug("CPU is working for you...: %d rows left", height - row)

        elapsed = time.time() - start_time
        logger.info("CPU 렌더링 완료: %.2f초", elapsed)
        return pixels

    def trace_ray(self, scene: Scene, ray: Ray, t_min: float, t_max: float, depth: int) -> Color:
        """광선 하나의 색. depth가 0 이하이면 더 이상 반사하지 않는다."""
        rec = scene.hit(ray, t_min, t_max)
        if rec is None:
            return scene.background

        sphere, t = rec
        mat = sphere.material

        point = ray.point_at_parameter(t)
        normal = sphere.normal_at(point)
        view = -ray.direction

        # 1) 로컬 셰이딩 (Ambient + Diffuse + Specular + Shadow)
        intensity = compute_lighting(scene, point, normal, view, mat.specular)
        local_color = mat.color.illuminate(intensity)

        if depth <= 0 or mat.reflective <= 0:
            return local_color

        # 2) Reflection: 단위 법선이 아니라 정규화하지 않은 P - C 기준으로 반사
        reflected_dir = view.reflect(point - sphere.center)
        reflected_color = self.trace_ray(scene, Ray(point, reflected_dir),
                                         REFLECTION_EPSILON, float('inf'), depth - 1)

        return local_color.illuminate(1 - mat.reflective) + reflected_color.illuminate(mat.reflective)


# 렌더러 등록
RendererFactory.register("cpu_raytracer", CPURenderer)
