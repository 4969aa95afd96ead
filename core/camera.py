from typing import Optional
from core.math import Vec3, Ray

# 카메라에서 투영면까지의 거리
PROJECTION_PLANE_DISTANCE = 0.5


class Camera:
    def __init__(self,
                 origin: Optional[Vec3] = None,
                 projection_plane: float = PROJECTION_PLANE_DISTANCE):
        self.origin = origin if origin is not None else Vec3(0, 0, 0)
        self.projection_plane = projection_plane

    def canvas_to_viewport(self, x: int, y: int, width: int, height: int) -> Vec3:
        """화면 중심 기준 픽셀 좌표 (x, y)를 정규화하지 않은 광선 방향으로 변환"""
        aspect_ratio = width / height
        return Vec3(x / width * aspect_ratio, y / height, self.projection_plane)

    def get_ray(self, x: int, y: int, width: int, height: int) -> Ray:
        return Ray(self.origin, self.canvas_to_viewport(x, y, width, height))

    def __repr__(self):
        return f"Camera(origin={self.origin!r}, projection_plane={self.projection_plane})"
