from core.math import Vec3
from core.material import Color, Material, BLACK
from core.geometry import Sphere
from core.light import AmbientLight, PointLight, DirectionalLight
from core.scene import Scene
from core.camera import Camera


class BasicSceneBuilder:
    """기본 씬: 빨강/파랑/초록 구체와 거대한 흰색 바닥 구체, 조명 3개"""

    def __init__(self):
        # y축이 아래쪽을 향하므로 바닥 구체는 +y 쪽에 있다
        self.camera_origin = Vec3(0, -1, 1)
        self.floor_radius = 10000.0

    def build_scene(self) -> Scene:
        """완전한 기본 씬을 생성"""
        materials = self._create_materials()

        spheres = [
            Sphere(Vec3(0, -2, 9), 3, materials['red']),
            Sphere(Vec3(2, 0, 4), 1, materials['blue']),
            Sphere(Vec3(-2, 0, 4), 1, materials['green']),
            Sphere(Vec3(0, self.floor_radius + 1, 0), self.floor_radius, materials['floor']),
        ]

        # 조명 강도 합은 1.0 이하여야 함
        lights = [
            AmbientLight(0.2),
            PointLight(0.6, Vec3(2, -5, 0)),
            DirectionalLight(0.2, Vec3(1, -4, 4)),
        ]

        return Scene(spheres, lights, background=BLACK)

    def create_camera(self) -> Camera:
        return Camera(self.camera_origin)

    def _create_materials(self) -> dict:
        return {
            'red': Material(color=Color(255, 0, 0), specular=500, reflective=0.2),
            'blue': Material(color=Color(0, 0, 255), specular=500, reflective=0.3),
            'green': Material(color=Color(0, 255, 0), specular=10, reflective=0.4),
            'floor': Material(color=Color(255, 255, 255), specular=1000, reflective=0.5),
        }
