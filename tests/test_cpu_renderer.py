import threading
import unittest

import numpy as np

from core.math import Vec3, Ray
from core.material import Color, Material
from core.geometry import Sphere
from core.light import AmbientLight, PointLight
from core.scene import Scene, RenderSettings
from core.camera import Camera
from core.errors import InvalidDimensions, InvalidRecursionDepth, RenderCancelled
from renderers.base_renderer import RendererFactory
from renderers.cpu_renderer import CPURenderer
from scene_builders.basic_scene_builder import BasicSceneBuilder

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)


def _mirror_scene(reflective: float) -> Scene:
    # 카메라 앞의 빨간 거울 구체와, 카메라 뒤에서 거울에만 비치는 초록 구체
    mirror = Sphere(Vec3(0.0, 0.0, 5.0), 1.0, Material(RED, reflective=reflective))
    behind = Sphere(Vec3(0.0, 0.0, -5.0), 1.0, Material(GREEN))
    return Scene([mirror, behind], [AmbientLight(1.0)])


def _center(pixels: np.ndarray) -> tuple:
    height, width, _ = pixels.shape
    return tuple(int(c) for c in pixels[height // 2, width // 2])


class CameraTests(unittest.TestCase):
    def test_center_pixel_looks_straight_ahead(self) -> None:
        camera = Camera(Vec3(0.0, 0.0, 0.0))
        self.assertEqual(camera.canvas_to_viewport(0, 0, 8, 6), Vec3(0.0, 0.0, 0.5))

    def test_viewport_mapping_applies_aspect_ratio(self) -> None:
        camera = Camera(Vec3(0.0, 0.0, 0.0))
        direction = camera.canvas_to_viewport(-100, 50, 200, 100)
        self.assertAlmostEqual(direction.x, -1.0)
        self.assertAlmostEqual(direction.y, 0.5)
        self.assertEqual(direction.z, 0.5)

    def test_default_origins_are_independent(self) -> None:
        first = Camera()
        second = Camera()
        self.assertEqual(first.origin, Vec3(0.0, 0.0, 0.0))
        self.assertIsNot(first.origin, second.origin)
        first.origin.x = 3.0
        self.assertEqual(second.origin, Vec3(0.0, 0.0, 0.0))

    def test_ray_starts_at_camera_origin(self) -> None:
        camera = Camera(Vec3(0.0, -1.0, 1.0), projection_plane=1.0)
        ray = camera.get_ray(0, 0, 4, 4)
        self.assertEqual(ray.origin, Vec3(0.0, -1.0, 1.0))
        self.assertEqual(ray.direction, Vec3(0.0, 0.0, 1.0))


class TraceRayTests(unittest.TestCase):
    def setUp(self) -> None:
        self.renderer = CPURenderer()

    def test_miss_returns_background(self) -> None:
        scene = Scene([Sphere(Vec3(0.0, 0.0, 5.0), 1.0, Material(RED))],
                      [AmbientLight(1.0)], background=Color(10, 20, 30))
        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
        self.assertEqual(self.renderer.trace_ray(scene, ray, 1.0, float("inf"), 3), Color(10, 20, 30))

    def test_reflection_blends_local_and_reflected(self) -> None:
        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 0.5))
        color = self.renderer.trace_ray(_mirror_scene(0.5), ray, 1.0, float("inf"), 1)
        self.assertEqual(color, Color(127, 127, 0))

    def test_reflection_uses_unnormalized_center_offset(self) -> None:
        traced = []

        class RecordingRenderer(CPURenderer):
            def trace_ray(self, scene, ray, t_min, t_max, depth):
                traced.append(ray)
                return super().trace_ray(scene, ray, t_min, t_max, depth)

        # 반지름 2 구체를 비스듬히 맞추면 P - C 의 길이가 반사 방향에 드러난다
        mirror = Sphere(Vec3(0.0, 0.0, 0.0), 2.0, Material(RED, reflective=0.5))
        scene = Scene([mirror], [AmbientLight(1.0)])
        ray = Ray(Vec3(1.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0))
        RecordingRenderer().trace_ray(scene, ray, 1.0, float("inf"), 1)

        self.assertEqual(len(traced), 2)
        reflected = traced[1]
        self.assertAlmostEqual(reflected.origin.x, 1.0)
        self.assertAlmostEqual(reflected.origin.z, -3 ** 0.5)
        self.assertAlmostEqual(reflected.direction.x, 2 * 3 ** 0.5)
        self.assertAlmostEqual(reflected.direction.y, 0.0)
        self.assertAlmostEqual(reflected.direction.z, -5.0)

    def test_zero_depth_returns_local_color(self) -> None:
        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 0.5))
        color = self.renderer.trace_ray(_mirror_scene(0.5), ray, 1.0, float("inf"), 0)
        self.assertEqual(color, RED)

    def test_local_color_is_scaled_by_lighting(self) -> None:
        sphere = Sphere(Vec3(0.0, 0.0, 5.0), 1.0, Material(Color(200, 100, 50)))
        scene = Scene([sphere], [AmbientLight(0.2), PointLight(0.3, Vec3(0.0, 0.0, -10.0))])
        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0))
        self.assertEqual(self.renderer.trace_ray(scene, ray, 1.0, float("inf"), 3), Color(100, 50, 25))


class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.renderer = CPURenderer()
        self.camera = Camera(Vec3(0.0, 0.0, 0.0))

    def test_grid_matches_requested_dimensions(self) -> None:
        scene = Scene([], [AmbientLight(1.0)])
        for width, height in ((4, 4), (5, 3), (1, 7)):
            pixels = self.renderer.render(scene, self.camera, RenderSettings(width, height))
            self.assertEqual(pixels.shape, (height, width, 3))
            self.assertEqual(pixels.dtype, np.uint8)

    def test_empty_scene_is_all_background(self) -> None:
        scene = Scene([], [AmbientLight(1.0)], background=Color(9, 8, 7))
        pixels = self.renderer.render(scene, self.camera, RenderSettings(6, 4))
        self.assertTrue(np.all(pixels == np.array([9, 8, 7], dtype=np.uint8)))

    def test_ambient_only_center_pixel_is_base_color(self) -> None:
        sphere = Sphere(Vec3(0.0, 0.0, 3.0), 1.0, Material(Color(200, 100, 50), specular=100))
        scene = Scene([sphere], [AmbientLight(1.0)])
        pixels = self.renderer.render(scene, self.camera, RenderSettings(8, 6))
        self.assertEqual(_center(pixels), (200, 100, 50))
        # 구석 픽셀은 구체를 벗어나 배경색
        self.assertEqual(tuple(int(c) for c in pixels[0, 0]), (0, 0, 0))

    def test_reflectiveness_shifts_color_toward_reflected_sphere(self) -> None:
        centers = [
            _center(self.renderer.render(_mirror_scene(r), self.camera, RenderSettings(4, 4)))
            for r in (0.0, 0.25, 0.5, 0.75, 1.0)
        ]
        self.assertEqual(centers[0], (255, 0, 0))
        self.assertEqual(centers[-1], (0, 255, 0))
        for previous, current in zip(centers, centers[1:]):
            self.assertLess(current[0], previous[0])
            self.assertGreater(current[1], previous[1])

    def test_zero_depth_ignores_reflectiveness(self) -> None:
        settings = RenderSettings(6, 6, max_depth=0)
        reflective = self.renderer.render(_mirror_scene(0.9), self.camera, settings)
        matte = self.renderer.render(_mirror_scene(0.0), self.camera, settings)
        self.assertTrue(np.array_equal(reflective, matte))

    def test_render_is_deterministic(self) -> None:
        builder = BasicSceneBuilder()
        scene = builder.build_scene()
        camera = builder.create_camera()
        settings = RenderSettings(16, 12)
        first = self.renderer.render(scene, camera, settings)
        second = self.renderer.render(scene, camera, settings)
        self.assertTrue(np.array_equal(first, second))
        self.assertGreater(int(first.sum()), 0)

    def test_invalid_dimensions_are_rejected(self) -> None:
        scene = Scene([], [])
        with self.assertRaises(InvalidDimensions):
            self.renderer.render(scene, self.camera, RenderSettings(0, 10))
        with self.assertRaises(InvalidDimensions):
            self.renderer.render(scene, self.camera, RenderSettings(10, -1))

    def test_negative_depth_is_rejected(self) -> None:
        with self.assertRaises(InvalidRecursionDepth):
            self.renderer.render(Scene([], []), self.camera, RenderSettings(2, 2, max_depth=-1))

    def test_cancelled_render_raises(self) -> None:
        cancel = threading.Event()
        cancel.set()
        with self.assertRaises(RenderCancelled):
            self.renderer.render(Scene([], []), self.camera, RenderSettings(2, 2), cancel_event=cancel)

    def test_render_image_matches_grid(self) -> None:
        scene = _mirror_scene(0.5)
        image = self.renderer.render_image(scene, self.camera, RenderSettings(8, 6))
        self.assertEqual(image.size, (8, 6))
        self.assertEqual(image.mode, "RGB")
        self.assertEqual(image.getpixel((4, 3)), (127, 127, 0))


class RendererFactoryTests(unittest.TestCase):
    def test_cpu_renderer_is_registered(self) -> None:
        self.assertIn("cpu_raytracer", RendererFactory.list_available())
        renderer = RendererFactory.create("cpu_raytracer")
        self.assertIsInstance(renderer, CPURenderer)
        self.assertTrue(renderer.supports("shadows"))
        self.assertFalse(renderer.supports("refraction"))

    def test_unknown_renderer_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RendererFactory.create("gpu_pathtracer")


if __name__ == "__main__":
    unittest.main()
