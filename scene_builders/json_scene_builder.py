"""JSON 파일에서 씬과 카메라를 읽어오는 빌더.

형식::

    {
      "background": [0, 0, 0],
      "camera": {"origin": [0, -1, 1], "projection_plane": 0.5},
      "spheres": [
        {"center": [0, -2, 9], "radius": 3, "color": [255, 0, 0],
         "specular": 500, "reflective": 0.2}
      ],
      "lights": [
        {"type": "ambient", "intensity": 0.2},
        {"type": "point", "intensity": 0.6, "position": [2, -5, 0]},
        {"type": "directional", "intensity": 0.2, "direction": [1, -4, 4]}
      ]
    }
"""
import json
import logging
from typing import Any, Dict

from core.math import Vec3
from core.material import Color, Material, BLACK
from core.geometry import Sphere
from core.light import AmbientLight, PointLight, DirectionalLight, Light
from core.scene import Scene
from core.camera import Camera, PROJECTION_PLANE_DISTANCE
from core.errors import SceneFormatError

logger = logging.getLogger(__name__)


def load_scene(json_path: str) -> Dict[str, Any]:
    """JSON 씬 파일을 dict로 읽는다"""
    try:
        with open(json_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise SceneFormatError(f"{json_path}: invalid JSON ({e})") from e


def validate_scene(data: Dict[str, Any]) -> None:
    """씬 최상위 구조 검사 (spheres, lights 목록과 camera 객체)"""
    if not isinstance(data, dict):
        raise SceneFormatError("scene must be a JSON object")
    for key in ("spheres", "lights"):
        if not isinstance(data.get(key), list):
            raise SceneFormatError(f"scene must have a '{key}' list")
    if "camera" in data and not isinstance(data["camera"], dict):
        raise SceneFormatError("'camera' must be an object")


def _vec3(value, what: str) -> Vec3:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise SceneFormatError(f"{what} must be a list of 3 numbers, got {value!r}")
    try:
        return Vec3(*value)
    except (TypeError, ValueError) as e:
        raise SceneFormatError(f"{what} must be a list of 3 numbers, got {value!r}") from e


def _color(value, what: str) -> Color:
    r, g, b = _vec3(value, what)
    return Color(r, g, b)


def _number(value, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneFormatError(f"{what} must be a number, got {value!r}")
    return float(value)


def _require(entry: Dict[str, Any], key: str, what: str):
    if key not in entry:
        raise SceneFormatError(f"{what} is missing '{key}'")
    return entry[key]


def _sphere(entry: Dict[str, Any], index: int) -> Sphere:
    what = f"spheres[{index}]"
    if not isinstance(entry, dict):
        raise SceneFormatError(f"{what} must be an object")
    specular = entry.get("specular")
    if specular is not None:
        _number(specular, f"{what}.specular")
    material = Material(
        color=_color(_require(entry, "color", what), f"{what}.color"),
        specular=specular,
        reflective=_number(entry.get("reflective", 0.0), f"{what}.reflective"),
    )
    return Sphere(_vec3(_require(entry, "center", what), f"{what}.center"),
                  _number(_require(entry, "radius", what), f"{what}.radius"),
                  material)


def _light(entry: Dict[str, Any], index: int) -> Light:
    what = f"lights[{index}]"
    if not isinstance(entry, dict):
        raise SceneFormatError(f"{what} must be an object")
    kind = _require(entry, "type", what)
    intensity = _number(_require(entry, "intensity", what), f"{what}.intensity")

    if kind == "ambient":
        return AmbientLight(intensity)
    if kind == "point":
        return PointLight(intensity, _vec3(_require(entry, "position", what), f"{what}.position"))
    if kind == "directional":
        return DirectionalLight(intensity, _vec3(_require(entry, "direction", what), f"{what}.direction"))
    raise SceneFormatError(f"{what}: unknown light type {kind!r}")


class JsonSceneBuilder:
    """dict 또는 JSON 파일로부터 씬을 만든다"""

    def __init__(self, data: Dict[str, Any]):
        validate_scene(data)
        self.data = data

    @classmethod
    def from_file(cls, json_path: str) -> "JsonSceneBuilder":
        logger.info("씬 파일 로드: %s", json_path)
        return cls(load_scene(json_path))

    def build_scene(self) -> Scene:
        spheres = [_sphere(entry, i) for i, entry in enumerate(self.data["spheres"])]
        lights = [_light(entry, i) for i, entry in enumerate(self.data["lights"])]
        background = BLACK
        if "background" in self.data:
            background = _color(self.data["background"], "background")
        return Scene(spheres, lights, background=background)

    def create_camera(self) -> Camera:
        camera = self.data.get("camera", {})
        origin = Vec3(0, 0, 0)
        if "origin" in camera:
            origin = _vec3(camera["origin"], "camera.origin")
        plane = _number(camera.get("projection_plane", PROJECTION_PLANE_DISTANCE), "camera.projection_plane")
        return Camera(origin, plane)
