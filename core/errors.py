class RaytracerError(Exception):
    """레이트레이서 전체 예외의 베이스 클래스"""


class InvalidLightConfiguration(RaytracerError, ValueError):
    """조명 강도 합이 1.0을 넘거나 음수 강도가 있는 경우"""


class InvalidDimensions(RaytracerError, ValueError):
    """이미지 가로/세로가 0 이하인 경우"""


class InvalidRecursionDepth(RaytracerError, ValueError):
    """최대 재귀 깊이가 음수인 경우"""


class DegenerateGeometry(RaytracerError, ValueError):
    """반지름이 0 이하이거나 유한하지 않은 구체"""


class InvalidMaterial(RaytracerError, ValueError):
    """반사율이 [0, 1] 범위를 벗어나거나 스페큘러 지수가 0 이하인 재질"""


class SceneFormatError(RaytracerError, ValueError):
    """JSON 씬 파일 형식 오류"""


class RenderCancelled(RaytracerError):
    """렌더링 도중 취소 요청을 받은 경우"""
