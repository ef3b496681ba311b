"""Plays the scripted Sub-Zero animation in a window."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import pygame

from kombatecs.animation import DEMO_SEQUENCE, demo_frames

WINDOW_SIZE = (800, 600)
DEFAULT_IMAGE = "res/Sub-Zero.png"
DEFAULT_DELAY_MS = 70


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kombatecs", description="Play the Sub-Zero animation demo."
    )
    parser.add_argument(
        "--image", default=DEFAULT_IMAGE, help="path of the sprite sheet"
    )
    parser.add_argument(
        "--delay",
        type=_non_negative_int,
        default=DEFAULT_DELAY_MS,
        help="milliseconds between frames",
    )
    return parser.parse_args(argv)


def run(image_path: str = DEFAULT_IMAGE, delay_ms: int = DEFAULT_DELAY_MS) -> int:
    """Show the demo until it ends or the window is closed; return frames drawn."""
    pygame.display.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("MK")
        sheet = pygame.image.load(image_path).convert_alpha()

        drawn = 0
        for source, dest in demo_frames(DEMO_SEQUENCE):
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            frame = pygame.Surface((int(source.w), int(source.h)), pygame.SRCALPHA)
            frame.blit(
                sheet,
                (0, 0),
                area=pygame.Rect(int(source.x), int(source.y), int(source.w), int(source.h)),
            )
            scaled = pygame.transform.scale(frame, (int(dest.w), int(dest.h)))
            screen.fill((0, 0, 0))
            screen.blit(scaled, (int(dest.x), int(dest.y)))
            pygame.display.flip()
            drawn += 1
            if delay_ms:
                pygame.time.delay(delay_ms)
        return drawn
    finally:
        pygame.display.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        run(args.image, args.delay)
    except (pygame.error, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())