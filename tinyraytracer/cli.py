"""
cli.py - Command-line entry point

Renders the demo scene (or the gradient test pattern) and writes it
to an image file.

Project: Tiny Ray Tracer
"""

import argparse
import logging
import sys
from typing import List, Optional

from .camera import Camera
from .config import RenderSettings
from .framebuffer import OutputWriteError, write_image
from .render import create_default_scene, render, render_gradient


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser, with defaults taken from RenderSettings.

    Returns
    -------
    argparse.ArgumentParser
        Parser for the tinyraytracer command line
    """
    defaults = RenderSettings()
    parser = argparse.ArgumentParser(
        prog="tinyraytracer",
        description="Render flat-colored spheres to an image",
    )
    parser.add_argument('--width', type=int, default=defaults.width, help='Image width')
    parser.add_argument('--height', type=int, default=defaults.height, help='Image height')
    parser.add_argument('--fov', type=float, default=defaults.fov_degrees,
                        help='Vertical field of view in degrees')
    parser.add_argument('-o', '--output', type=str, default=defaults.output,
                        help='Output image (.ppm, or any format Pillow can write)')
    parser.add_argument('--gradient', action='store_true',
                        help='Render the gradient test pattern instead of the scene')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run a render from command-line arguments.

    Returns
    -------
    int
        Process exit status: 0 on success, 1 if the image cannot be written
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = RenderSettings.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if settings.gradient:
        framebuffer = render_gradient(settings.width, settings.height)
    else:
        camera = Camera(settings.width, settings.height, fov=settings.fov)
        framebuffer = render(create_default_scene(), camera)

    try:
        write_image(framebuffer, settings.output)
    except OutputWriteError as e:
        logger.error("%s", e)
        return 1

    logger.info("Image saved to %s", settings.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
