"""Session controller: owns the simulation and runs the Idle -> Running -> Ended state machine.

The host calls ``tick()`` once per display frame while it returns True, and
forwards input as ``press()`` (start / jump) and ``restart()`` (the dedicated
restart control). A crash is an ordinary transition to ENDED, never an error.
"""

import logging
from collections import namedtuple

from . import config
from .bird import Bird
from .obstacles import ObstacleField
from .physics import select_profile
from .viewport import Viewport

logger = logging.getLogger(__name__)

# game states
IDLE = "IDLE"
RUNNING = "RUNNING"
ENDED = "ENDED"

# Read-only view handed to the renderer each frame.
Snapshot = namedtuple(
    "Snapshot",
    ["state", "score", "final_score", "bird", "obstacles", "obstacle_width", "gap_size", "viewport"],
)


class Session:
    """Holds bird, obstacle field, viewport and the active physics profile."""

    def __init__(self, width=config.WIDTH, height=config.HEIGHT, rng=None, on_score=None, on_game_over=None):
        self.viewport = Viewport(width, height)
        self.profile = select_profile(width)
        self.bird = Bird(profile=self.profile)
        self.field = ObstacleField(profile=self.profile, rng=rng)

        self.state = IDLE
        self.score = 0
        self.final_score = None
        self.frame_count = 0

        # score display collaborators, both receive plain ints
        self.on_score = on_score
        self.on_game_over = on_game_over

        self.bird.reset(height, self.profile)

    # -----------------------------
    # INPUT
    # -----------------------------
    def press(self):
        """Start/jump input. Starts the game from IDLE (and counts as the first jump), ignored once ENDED."""
        if self.state == IDLE:
            self.start()
            self.bird.jump()
        elif self.state == RUNNING:
            self.bird.jump()

    def restart(self):
        """Dedicated restart control, only meaningful on the game-over screen."""
        if self.state != ENDED:
            return
        self.start()

    def start(self):
        """Reset path shared by the first start and every restart."""
        previous = self.state
        self.score = 0
        self.final_score = None
        self.frame_count = 0
        self.bird.reset(self.viewport.height, self.profile)
        self.field.reset(self.profile)
        self.state = RUNNING
        logger.info("%s -> %s (%s physics)", previous, RUNNING, self.profile.name)
        self._emit_score()

    def resize(self, width, height):
        """Viewport changed: pick the profile for the new width and retarget live objects in place."""
        self.viewport.width = width
        self.viewport.height = height
        profile = select_profile(width)
        if profile is not self.profile:
            logger.info("switching to %s physics at %dx%d", profile.name, width, height)
        self.profile = profile
        self.bird.apply_profile(profile)
        self.field.apply_profile(profile)

    # -----------------------------
    # FRAME
    # -----------------------------
    def tick(self, now_ms=0):
        """Run one frame. Returns False once the frame loop should stop."""
        if self.state == IDLE:
            self.bird.sway(self.viewport.height, now_ms)
            return True
        if self.state != RUNNING:
            return False

        result = self.field.advance(self.bird, self.viewport)
        hit_floor = self.bird.integrate(self.viewport.height)
        self.frame_count += 1

        if result.points:
            self.score += result.points
            self._emit_score()

        if result.crashed or hit_floor:
            self.end()
            return False
        return True

    def end(self):
        self.state = ENDED
        self.final_score = self.score
        logger.info("%s -> %s after %d frames, final score %d", RUNNING, ENDED, self.frame_count, self.final_score)
        if self.on_game_over is not None:
            self.on_game_over(self.final_score)

    def _emit_score(self):
        if self.on_score is not None:
            self.on_score(self.score)

    # -----------------------------
    # VIEW
    # -----------------------------
    def snapshot(self):
        return Snapshot(
            state=self.state,
            score=self.score,
            final_score=self.final_score,
            bird=self.bird.get_circle(),
            obstacles=tuple((o.x, o.gap_top) for o in self.field),
            obstacle_width=self.field.width,
            gap_size=self.field.gap_size,
            viewport=self.viewport.size,
        )
