import sys
import time
import logging
import argparse
from scene_builders.basic_scene_builder import BasicSceneBuilder
from scene_builders.json_scene_builder import JsonSceneBuilder
from renderers.base_renderer import RendererFactory
from core.scene import RenderSettings
from core.errors import RaytracerError

# 렌더러 모듈 import (등록을 위해)
import renderers.cpu_renderer  # noqa: F401


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Basic recursive sphere ray tracer')
    parser.add_argument('--renderer', '-r',
                        choices=RendererFactory.list_available(),
                        default='cpu_raytracer',
                        help='렌더러 선택')
    parser.add_argument('--scene',
                        default='basic',
                        help="씬 선택: basic (기본 씬) 또는 JSON 씬 파일 경로")
    parser.add_argument('--width', '-w', type=int, default=640,
                        help='이미지 가로 크기')
    parser.add_argument('--height', type=int, default=480,
                        help='이미지 세로 크기')
    parser.add_argument('--depth', '-d', type=int, default=3,
                        help='최대 반사 재귀 깊이')
    parser.add_argument('--output', '-o', default='output.png',
                        help='출력 파일명')
    parser.add_argument('--show', action='store_true',
                        help='렌더링 후 이미지 표시')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='디버그 로그 출력')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    settings = RenderSettings(
        width=args.width,
        height=args.height,
        max_depth=args.depth,
    )

    try:
        # 씬 생성
        print(f"장면 생성 중: {args.scene}")
        if args.scene == 'basic':
            scene_builder = BasicSceneBuilder()
        else:
            scene_builder = JsonSceneBuilder.from_file(args.scene)
        scene = scene_builder.build_scene()
        camera = scene_builder.create_camera()

        # 렌더러 생성
        print(f"렌더러 생성: {args.renderer}")
        renderer = RendererFactory.create(args.renderer)
        print(f"지원 기능: {', '.join(renderer.get_capabilities())}")

        start_time = time.time()
        image = renderer.render_image(scene, camera, settings)
        end_time = time.time()

        # 결과 저장
        image.save(args.output)
        print(f"이미지 저장: {args.output}")
    except (RaytracerError, OSError, ValueError) as e:
        print(f"렌더링 실패: {e}", file=sys.stderr)
        return 1

    elapsed = end_time - start_time
    minutes = int(elapsed // 60)
    seconds = elapsed % 60
    print(f"총 실행 시간: {minutes}분 {seconds:.2f}초")

    if args.show:
        image.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
