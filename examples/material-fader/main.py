"""Material Fader - fades a material property on a key press.

Exercises tick-fade with a pygame host.

Controls:
  Space   Trigger fade (direction toggles each press)
  Esc     Quit

Example:
  python main.py --property _Glow --kind float --max 1 --ease ease_out_quad
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_fade import Ease, FaderSettings, MaterialFader, PropertyKind

from game.scene import Panel, Scene, SceneHost, build_scene
from ui.constants import (
    BG_COLOR,
    DIM_TEXT,
    FPS,
    PANEL_BORDER,
    PANEL_GAP,
    PANEL_H,
    PANEL_W,
    SCREEN_H,
    SCREEN_W,
    STATUS_H,
    TEXT_COLOR,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--property", default="_EmissionColor", help="material property name")
    parser.add_argument(
        "--kind", default="color", choices=[k.value for k in PropertyKind]
    )
    parser.add_argument("--min", type=float, default=0.0, dest="minimum_value")
    parser.add_argument("--max", type=float, default=1.0, dest="maximum_value")
    parser.add_argument("--duration", type=float, default=1.0, help="seconds")
    parser.add_argument("--ease", default="linear", choices=[e.value for e in Ease])
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def panel_color(panel: Panel, settings: FaderSettings) -> tuple[int, int, int]:
    """Color to draw a panel with, from its first faded material."""
    for material in panel.materials:
        value = material.properties.get(settings.property_name)
        if value is None:
            continue
        if settings.property_kind is PropertyKind.COLOR:
            r, g, b, _a = value
        else:
            base = material.properties.get("_EmissionColor", (1.0, 1.0, 1.0, 1.0))
            r, g, b = (c * value for c in base[:3])
        rgb = [max(0, min(255, int(c * 255))) for c in (r, g, b)]
        return rgb[0], rgb[1], rgb[2]
    return (60, 60, 70)


def draw_scene(
    screen: pygame.Surface, scene: Scene, settings: FaderSettings, font: pygame.font.Font
) -> None:
    total_w = len(scene.panels) * PANEL_W + (len(scene.panels) - 1) * PANEL_GAP
    x = (SCREEN_W - total_w) // 2
    y = (SCREEN_H - STATUS_H - PANEL_H) // 2
    for panel in scene.panels:
        rect = pygame.Rect(x, y, PANEL_W, PANEL_H)
        pygame.draw.rect(screen, panel_color(panel, settings), rect)
        pygame.draw.rect(screen, PANEL_BORDER, rect, 2)
        label = font.render(panel.name, True, TEXT_COLOR)
        screen.blit(label, (x + 6, y + PANEL_H + 6))
        x += PANEL_W + PANEL_GAP


def draw_status(
    screen: pygame.Surface, fader: MaterialFader, font: pygame.font.Font
) -> None:
    s = fader.settings
    state = "running" if fader.running else "idle"
    text = (
        f"{s.property_name} [{s.property_kind.value}] {s.ease.value} "
        f"{s.duration:g}s  next: {fader.direction.value}  {state}  (Space)"
    )
    screen.blit(font.render(text, True, DIM_TEXT), (10, SCREEN_H - STATUS_H + 10))


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = FaderSettings.from_mapping(
        {
            "property_name": args.property,
            "property_kind": args.kind,
            "minimum_value": args.minimum_value,
            "maximum_value": args.maximum_value,
            "duration": args.duration,
            "ease": args.ease,
            "trigger": pygame.K_SPACE,
        }
    )

    scene = build_scene()
    fader = MaterialFader(settings, SceneHost(), scene)
    fader.start()

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Material Fader - tick-fade demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        fader.poll(pygame.key.get_pressed()[settings.trigger])
        fader.tick(dt)

        screen.fill(BG_COLOR)
        draw_scene(screen, scene, settings, font)
        draw_status(screen, fader, font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
