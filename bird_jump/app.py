"""pygame host: the window, input translation and frame scheduling around a Session."""

import logging

import pygame

from . import config
from .renderer import Renderer, restart_button_rect
from .session import ENDED, Session

logger = logging.getLogger(__name__)


class App:
    """Owns the window and drives the Session one frame at a time.

    While the last ``tick()`` asked to continue, frames are paced by the clock.
    After the session halts (game over) the loop blocks on the event queue and
    does no work until some input arrives.
    """

    def __init__(self, width=config.WIDTH, height=config.HEIGHT, fps=config.FPS, rng=None):
        # initialize pygame and create the window
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Bird Jump")
        self.clock = pygame.time.Clock()
        self.fps = fps

        self.session = Session(width, height, rng=rng, on_game_over=self._game_over)
        self.renderer = Renderer()

        self.running = True
        self.looping = True

    def _game_over(self, final_score):
        pygame.display.set_caption(f"Bird Jump - score {final_score}")

    # -----------------------------
    # INPUT
    # -----------------------------
    def handle_event(self, event):
        """Translate one pygame event into session input. Returns False when the app should quit."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_SPACE:
                self.session.press()
            elif event.key == pygame.K_r:
                self.session.restart()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # touches also arrive as FINGERDOWN, skip the emulated mouse click
            if event.button == 1 and not getattr(event, "touch", False):
                self.pointer_down(event.pos)
        elif event.type == pygame.FINGERDOWN:
            width, height = self.session.viewport.size
            self.pointer_down((int(event.x * width), int(event.y * height)))
        return self.running

    def pointer_down(self, pos):
        """Click or tap. On the game-over screen only the restart button reacts."""
        if self.session.state == ENDED:
            if restart_button_rect(self.session.viewport.size).collidepoint(pos):
                self.session.restart()
            return
        self.session.press()

    def resize(self, width, height):
        self.screen = pygame.display.get_surface()
        self.session.resize(width, height)

    # -----------------------------
    # RUN / QUIT
    # -----------------------------
    def frame(self, events, now_ms):
        """Handle the events gathered for this frame, then advance and draw."""
        for event in events:
            if not self.handle_event(event):
                return
        self.looping = self.session.tick(now_ms)
        self.draw()

    def draw(self):
        self.renderer.draw(self.screen, self.session.snapshot())
        pygame.display.flip()

    def run(self):
        """Main loop."""
        logger.info("window %dx%d at %d fps", *self.session.viewport.size, self.fps)
        while self.running:
            if self.looping:
                self.clock.tick(self.fps)
                events = pygame.event.get()
            else:
                # halted: nothing moves until the player does something
                events = [pygame.event.wait()]
            self.frame(events, pygame.time.get_ticks())
        self.quit()

    def quit(self):
        logger.info("quitting")
        pygame.quit()
