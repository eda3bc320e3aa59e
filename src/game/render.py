# src/game/render.py
from __future__ import annotations
from typing import Optional

import pygame

from .config import (
    COLOR_FG, COLOR_PLAYER, COLOR_OBSTACLE, COLOR_COIN, COLOR_ROAD, COLOR_CURB,
    COLOR_PANEL, COLOR_PANEL_EDGE, COLOR_PANEL_TEXT,
)
from .simulation import Snapshot

# obstacle artwork stand-ins: one tint per variant
VARIANT_TINTS = ((183, 28, 28), (198, 40, 40), (150, 30, 45), (170, 60, 20))


def draw_sky(surf: pygame.Surface, snap: Snapshot):
    """Vertical gradient from sky.top to sky.bottom, plus the sun/moon disc."""
    w, h = surf.get_size()
    top, bottom = snap.sky.top, snap.sky.bottom
    for y in range(h):
        t = y / max(1, h - 1)
        color = tuple(int(top[i] + (bottom[i] - top[i]) * t) for i in range(3))
        pygame.draw.line(surf, color, (0, y), (w, y))
    pygame.draw.circle(surf, snap.sky.sun, snap.sky.sun_pos, int(snap.sky.sun_radius))


def draw_layers(surf: pygame.Surface, snap: Snapshot):
    for layer in snap.layers:
        shade = 60 - layer.index * 8
        color = (shade, shade, shade, int(255 * (0.12 + layer.index * 0.08)))
        for tile in layer.tiles:
            r = tile.to_pygame()
            # leave a gap between buildings so tiles read as separate blocks
            r.width = max(1, r.width - 6)
            block = pygame.Surface(r.size, pygame.SRCALPHA)
            block.fill(color)
            surf.blit(block, r.topleft)


def draw_ground(surf: pygame.Surface, snap: Snapshot):
    w, h = surf.get_size()
    road_y = int(snap.ground_y + snap.character.height + 6)
    pygame.draw.rect(surf, COLOR_ROAD, pygame.Rect(0, road_y, w, max(0, h - road_y)))
    pygame.draw.rect(surf, COLOR_CURB, pygame.Rect(0, road_y - 8, w, 8))


def draw_entities(surf: pygame.Surface, snap: Snapshot):
    for ob in snap.obstacles:
        pygame.draw.rect(surf, VARIANT_TINTS[ob.variant % len(VARIANT_TINTS)], ob.rect.to_pygame())
    for c in snap.coins:
        r = c.rect.to_pygame()
        pygame.draw.ellipse(surf, COLOR_COIN, r)
    pygame.draw.rect(surf, COLOR_PLAYER if not snap.terminal else COLOR_OBSTACLE,
                     snap.character.to_pygame())


def draw_frame(surf: pygame.Surface, snap: Snapshot,
               font: Optional[pygame.font.Font] = None, best: Optional[int] = None):
    """Full frame for a snapshot. HUD text needs a font; without one only the world is drawn."""
    draw_sky(surf, snap)
    draw_layers(surf, snap)
    draw_ground(surf, snap)
    draw_entities(surf, snap)

    if font is None:
        return
    hud = f"Bank Balance: {snap.balance}"
    if best is not None:
        hud += f"   High: {best}"
    surf.blit(font.render(hud, True, COLOR_FG), (12, 10))

    if snap.terminal:
        w, h = surf.get_size()
        panel = pygame.Rect((w - 240) // 2, (h - 80) // 2, 240, 80)
        pygame.draw.rect(surf, COLOR_PANEL, panel, border_radius=10)
        pygame.draw.rect(surf, COLOR_PANEL_EDGE, panel, width=2, border_radius=10)
        lines = ["Game Over", "Restart (R)  New seed (N)"]
        for i, msg in enumerate(lines):
            txt = font.render(msg, True, COLOR_PANEL_TEXT)
            screen_y = panel.centery - txt.get_height() - 4 if i == 0 else panel.centery + 4
            surf.blit(txt, (panel.centerx - txt.get_width() // 2, screen_y))
