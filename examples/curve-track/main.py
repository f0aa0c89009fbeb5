"""
tick-curve Track
Top-down view of a 3D Catmull-Rom track: a cart follows the curve in train
(constant speed) or time mode, facing its direction of travel.
"""

import dataclasses
import logging
import math
import sys

import pygame

from tick_curve import (
    TIME,
    TRAIN,
    AnimatorConfig,
    CurveAnimator,
    Marker,
    SignalBus,
    create_debug_markers,
    signals,
)

# --- Configuration ---
WIDTH, HEIGHT = 1024, 768
FPS = 60
TITLE = "tick-curve Track"
WORLD_SCALE = 90.0  # pixels per world unit
MARKER_COUNT = 80
CART_SIZE = 14.0
SPEED_STEP = 0.5

TRACK = [
    (-4.0, 0.0, -2.5),
    (-1.5, 0.4, -3.5),
    (2.0, 1.0, -3.0),
    (4.5, 0.6, -0.5),
    (3.0, 0.0, 2.5),
    (0.0, -0.5, 1.0),
    (-3.0, 0.2, 3.0),
    (-4.5, 0.0, 0.5),
]

# Colors
BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
CONTROL_COLOR = (255, 160, 0)
CART_COLOR = (255, 0, 200)
OUTLINE_COLOR = (255, 255, 255)

logger = logging.getLogger("curve-track")


def to_screen(point: tuple[float, float, float]) -> tuple[int, int]:
    """Project world (x, z) onto the screen; y only tints markers."""
    x, _, z = point
    return int(WIDTH / 2 + x * WORLD_SCALE), int(HEIGHT / 2 + z * WORLD_SCALE)


def hex_to_rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


class Cart:
    """Movable entity driven by the animator attachment."""

    def __init__(self) -> None:
        self.position = TRACK[0]
        self.heading = 0.0

    def look_at(self, point: tuple[float, float, float]) -> None:
        dx = point[0] - self.position[0]
        dz = point[2] - self.position[2]
        if dx or dz:
            self.heading = math.atan2(dz, dx)


class MarkerLayer:
    """Marker sink that keeps debug markers around for drawing."""

    def __init__(self) -> None:
        self.markers: list[Marker] = []

    def add_markers(self, markers: list[Marker]) -> None:
        self.markers.extend(markers)

    def draw(self, screen: pygame.Surface) -> None:
        for m in self.markers:
            shade = max(0.4, min(1.0, 0.7 + m.position[1] * 0.3))
            color = tuple(int(c * shade) for c in hex_to_rgb(m.color))
            radius = max(1, int(m.size * WORLD_SCALE))
            pygame.draw.circle(screen, color, to_screen(m.position), radius)


def build_animator(config: AnimatorConfig, bus: SignalBus, cart: Cart) -> CurveAnimator:
    return CurveAnimator(TRACK, config, bus=bus).attach_to(cart)


def draw_cart(screen: pygame.Surface, cart: Cart) -> None:
    cx, cy = to_screen(cart.position)
    h = cart.heading
    tip = (cx + math.cos(h) * CART_SIZE, cy + math.sin(h) * CART_SIZE)
    left = (cx + math.cos(h + 2.5) * CART_SIZE * 0.7, cy + math.sin(h + 2.5) * CART_SIZE * 0.7)
    right = (cx + math.cos(h - 2.5) * CART_SIZE * 0.7, cy + math.sin(h - 2.5) * CART_SIZE * 0.7)
    pygame.draw.polygon(screen, CART_COLOR, [tip, left, right])
    pygame.draw.polygon(screen, OUTLINE_COLOR, [tip, left, right], 1)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    bus = SignalBus()
    laps = [0]
    bus.subscribe(signals.CURVE_LOOP, lambda name, data: laps.__setitem__(0, laps[0] + 1))
    bus.subscribe(
        signals.CURVE_COMPLETE,
        lambda name, data: logger.info("finished at distance %.2f", data["distance"]),
    )

    cart = Cart()
    config = AnimatorConfig(speed=2.0, loop=True)
    animator = build_animator(config, bus, cart).play()

    layer = MarkerLayer()
    create_debug_markers(animator, layer, count=MARKER_COUNT, size=0.04)

    running = True
    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if animator.state == "playing":
                        animator.pause()
                    elif animator.state == "paused":
                        animator.resume()
                    else:
                        animator.play()
                elif event.key == pygame.K_r:
                    animator.reset()
                    laps[0] = 0
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    animator.speed += SPEED_STEP
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    animator.speed = max(0.0, animator.speed - SPEED_STEP)
                elif event.key in (pygame.K_m, pygame.K_l):
                    if event.key == pygame.K_m:
                        mode = TIME if config.mode == TRAIN else TRAIN
                        config = dataclasses.replace(config, mode=mode)
                    else:
                        config = dataclasses.replace(config, loop=not config.loop)
                    speed = animator.speed
                    animator = build_animator(config, bus, cart).play()
                    animator.speed = speed
                    laps[0] = 0

        # --- Update ---
        animator.update(dt)
        bus.flush()

        # --- Draw ---
        screen.fill(BG_COLOR)
        layer.draw(screen)
        for p in TRACK:
            pygame.draw.circle(screen, CONTROL_COLOR, to_screen(p), 5, 1)
        draw_cart(screen, cart)

        # --- HUD ---
        hud_lines = [
            f"State: {animator.state:<8}  Mode: {config.mode:<5}  Loop: {'ON' if config.loop else 'OFF'}"
            f"  Speed: {animator.speed:.1f}  Laps: {laps[0]}",
            f"Progress: {animator.progress:.3f}  Distance: {animator.distance_traveled:.2f}"
            f" / {animator.total_length:.2f}   FPS: {pg_clock.get_fps():.0f}",
            "Space=Play/Pause  R=Reset  M=Mode  L=Loop  +/-=Speed  Esc=Quit",
        ]
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, 8 + i * 20))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
