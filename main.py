import argparse
import logging
import sys
from pathlib import Path

import pygame

from tilechecker.config import ORDERS, load_settings, parse_timeout
from tilechecker.errors import TileCheckerError
from tilechecker.imaging import save_pixels
from tilechecker.pipeline import run_pipeline
from tilechecker.scene import default_scene

logger = logging.getLogger("tilechecker")


WINDOW_SIZE = 600
PLANE_SIZE = 512
BACKGROUND = (40, 40, 40)
BORDER = (130, 151, 105)


class PlaneViewer:
    def __init__(self, scene):
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption("Tile Checker")
        self.scene = scene

        offset = (WINDOW_SIZE - PLANE_SIZE) // 2
        for obj in scene.objects.values():
            if obj.rect is None:
                obj.rect = pygame.Rect(offset, offset, PLANE_SIZE, PLANE_SIZE)

    def draw(self):
        self.screen.fill(BACKGROUND)
        for obj in self.scene.objects.values():
            if obj.main_texture is not None:
                scaled = pygame.transform.scale(obj.main_texture, obj.rect.size)
                self.screen.blit(scaled, obj.rect.topleft)
            pygame.draw.rect(self.screen, BORDER, obj.rect, 1)
        pygame.display.flip()

    def run(self):
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            self.draw()
            clock.tick(30)
        pygame.quit()


def timeout_arg(value):
    try:
        return parse_timeout(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Download tiles and show a checker pattern of the first two"
    )
    parser.add_argument("--api-url", default=settings.api_url, help="Tile list endpoint")
    parser.add_argument(
        "--data-dir",
        default=str(settings.data_root),
        help="Persistent root; tiles go to <data-dir>/Tiles",
    )
    parser.add_argument(
        "--order",
        choices=ORDERS,
        default=settings.order,
        help="Order used to pick the two checker tiles from disk",
    )
    parser.add_argument(
        "--timeout",
        type=timeout_arg,
        default=settings.timeout,
        help="Per-request timeout (seconds)",
    )
    parser.add_argument("--output", help="Also write the checker pattern to this PNG")
    parser.add_argument(
        "--no-window", action="store_true", help="Skip the pygame preview window"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings.api_url = args.api_url
    settings.data_root = Path(args.data_dir)
    settings.order = args.order
    settings.timeout = args.timeout

    scene = default_scene()
    try:
        plane = scene.find(settings.plane_name)
    except TileCheckerError as e:
        logger.error("%s", e)
        sys.exit(1)

    try:
        result = run_pipeline(settings, target=plane)
    except TileCheckerError:
        # already logged by the pipeline
        sys.exit(1)

    if args.output:
        save_pixels(result.checker, args.output)
        logger.info("Wrote %s", args.output)

    if not args.no_window:
        PlaneViewer(scene).run()


if __name__ == "__main__":
    main()
