# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional

from pathtracer.config import DEFAULT_QUALITY, QUALITY_LEVELS, RenderSettings
from pathtracer.errors import PathTracerError
from pathtracer.logging_config import setup_logging
from pathtracer.renderer import Renderer, gamma_correct, save_image, write_ppm
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a scene with a Monte Carlo path tracer.",
    )
    parser.add_argument("--scene", default="cornell_box", choices=sorted(SCENES),
                        help="scene to render (default: %(default)s)")
    parser.add_argument("--quality", default=DEFAULT_QUALITY, choices=sorted(QUALITY_LEVELS),
                        help="samples/depth preset (default: %(default)s)")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, default=1.0,
                        help="width / height (default: %(default)s)")
    parser.add_argument("--samples", type=int, dest="samples_per_pixel",
                        help="samples per pixel, overrides the preset")
    parser.add_argument("--max-depth", type=int, help="bounce limit, overrides the preset")
    parser.add_argument("--seed", type=int, help="master random seed")
    parser.add_argument("--workers", type=int, help="number of worker processes")
    parser.add_argument("--texture", help="image file for the earth scene")
    parser.add_argument("--output", "-o", default="-",
                        help="output path; '-' writes PPM to stdout (default)")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", default=None, help="also log to this file")
    return parser


class Application:
    """Builds the scene, renders it and writes the image."""

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.settings = RenderSettings.from_quality(
            args.quality,
            width=args.width,
            aspect_ratio=args.aspect_ratio,
            samples_per_pixel=args.samples_per_pixel,
            max_depth=args.max_depth,
            seed=args.seed,
            workers=args.workers,
        )
        scene_kwargs = {}
        if args.texture is not None:
            if args.scene != "earth":
                logger.warning("--texture is only used by the earth scene")
            else:
                scene_kwargs["texture_path"] = args.texture
        # Scene randomness comes from the master seed too, so renders are repeatable.
        self.scene = build_scene(args.scene, self.settings.aspect_ratio,
                                 random.Random(self.settings.seed), **scene_kwargs)
        self.renderer = Renderer(self.settings)

    def run(self):
        image = self.renderer.render(self.scene.world, self.scene.camera, self.scene.background)
        image8 = gamma_correct(image)
        if self.args.output == "-":
            write_ppm(image8, sys.stdout)
            sys.stdout.flush()
        else:
            save_image(image8, self.args.output)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("pathtracer", args.log_level, args.log_file)

    try:
        app = Application(args)
        app.run()
    except (PathTracerError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
