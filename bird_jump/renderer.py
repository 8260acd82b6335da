"""Drawing. Everything here reads a Snapshot and writes pixels, nothing flows back into the game."""

import pygame

from . import config
from .session import ENDED, IDLE, RUNNING


def restart_button_rect(viewport_size):
    """Where the restart button sits on the game-over screen. The host hit-tests clicks against it."""
    width, height = viewport_size
    rect = pygame.Rect((0, 0), config.BUTTON_SIZE)
    rect.center = (width // 2, height // 2 + 80)
    return rect


class Renderer:
    """Draws background, obstacles, bird and the screen for the current state."""

    def __init__(self):
        self.fonts = {}  # size -> Font, created on first use once pygame.font is up

    def font(self, size):
        if size not in self.fonts:
            self.fonts[size] = pygame.font.SysFont(None, size)
        return self.fonts[size]

    def text(self, surf, text, size, center):
        """Blit one line of text centered on ``center``."""
        rendered = self.font(size).render(text, True, config.TEXT_COLOR)
        surf.blit(rendered, rendered.get_rect(center=center))

    def draw(self, surf, snap):
        self.draw_background(surf, snap.viewport)

        if snap.state != IDLE:
            self.draw_obstacles(surf, snap)
        self.draw_bird(surf, snap.bird)

        if snap.state == RUNNING:
            width, _ = snap.viewport
            self.text(surf, str(snap.score), 64, (width // 2, 50))
        elif snap.state == IDLE:
            self.draw_start_screen(surf, snap.viewport)
        elif snap.state == ENDED:
            self.draw_game_over(surf, snap)

    def draw_background(self, surf, viewport_size):
        """Flat sky with two cloud clusters, one on each side."""
        width, height = viewport_size
        surf.fill(config.SKY_COLOR)

        # alpha only blends through a separate surface
        clouds = pygame.Surface((width, height), pygame.SRCALPHA)
        for cx, cy, r in ((100, 100, 30), (140, 100, 40), (180, 100, 30)):
            pygame.draw.circle(clouds, config.CLOUD_COLOR, (cx, cy), r)
        for dx, cy, r in ((150, 200, 40), (100, 220, 50), (50, 200, 30)):
            pygame.draw.circle(clouds, config.CLOUD_COLOR, (width - dx, cy), r)
        surf.blit(clouds, (0, 0))

    def draw_obstacles(self, surf, snap):
        """Render each obstacle pair with a wider cap at the gap edges."""
        _, height = snap.viewport
        width = snap.obstacle_width
        for x, gap_top in snap.obstacles:
            x = int(x)
            bottom_y = int(gap_top + snap.gap_size)

            pygame.draw.rect(surf, config.OBSTACLE_COLOR, (x, 0, width, int(gap_top)))
            pygame.draw.rect(surf, config.OBSTACLE_COLOR, (x, bottom_y, width, height - bottom_y))

            pygame.draw.rect(surf, config.CAP_COLOR, (x - 2, int(gap_top) - config.CAP_HEIGHT, width + 4, config.CAP_HEIGHT))
            pygame.draw.rect(surf, config.CAP_COLOR, (x - 2, bottom_y, width + 4, config.CAP_HEIGHT))

    def draw_bird(self, surf, circle):
        x, y, r = circle
        center = (int(x), int(y))
        pygame.draw.circle(surf, config.BIRD_COLOR, center, r)

        # little shine/eye up and to the right
        shine = pygame.Surface((8, 8), pygame.SRCALPHA)
        pygame.draw.circle(shine, config.BIRD_SHINE, (4, 4), 4)
        surf.blit(shine, (center[0] + 5 - 4, center[1] - 5 - 4))

    def draw_start_screen(self, surf, viewport_size):
        width, height = viewport_size
        self._overlay(surf, viewport_size)
        self.text(surf, "Bird Jump", 72, (width // 2, height // 2 - 60))
        self.text(surf, "Press SPACE, click or tap to start", 32, (width // 2, height // 2 + 10))

    def draw_game_over(self, surf, snap):
        width, height = snap.viewport
        self._overlay(surf, snap.viewport)
        self.text(surf, "Game Over", 72, (width // 2, height // 2 - 60))
        self.text(surf, f"Score: {snap.final_score}", 40, (width // 2, height // 2))

        button = restart_button_rect(snap.viewport)
        pygame.draw.rect(surf, config.BUTTON_COLOR, button, border_radius=12)
        self.text(surf, "Restart", 36, button.center)

    def _overlay(self, surf, viewport_size):
        overlay = pygame.Surface(viewport_size, pygame.SRCALPHA)
        overlay.fill(config.OVERLAY_COLOR)
        surf.blit(overlay, (0, 0))
