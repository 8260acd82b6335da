import logging
import math
import random
from collections import deque, namedtuple

from . import config
from .physics import DESKTOP_PHYSICS

logger = logging.getLogger(__name__)

# Outcome of one Obstacle Field frame: did the bird hit something, and how many obstacles it cleared.
FieldResult = namedtuple("FieldResult", ["crashed", "points"])


class Obstacle:
    """An obstacle pair (top and bottom barrier) described by the top edge of its gap."""

    def __init__(self, x, gap_top):
        self.x = float(x)
        self.gap_top = gap_top
        self.passed = False  # whether the bird has passed the obstacle (for scoring)

    def move(self, speed):
        self.x -= speed

    def trailing_edge(self, width):
        return self.x + width

    def overlaps(self, bird, width):
        """True when the bird's circle overlaps this obstacle's column."""
        return bird.x + bird.radius > self.x and bird.x - bird.radius < self.x + width

    def collides_with(self, bird, width, gap_size):
        """Axis-aligned test: inside the column the whole bird must fit in the gap."""
        if not self.overlaps(bird, width):
            return False
        inside_gap = bird.y - bird.radius >= self.gap_top and bird.y + bird.radius <= self.gap_top + gap_size
        return not inside_gap

    def cleared_by(self, bird, width):
        return self.trailing_edge(width) < bird.x - bird.radius

    def __repr__(self):
        return f"Obstacle(x={self.x:.1f}, gap_top={self.gap_top}, passed={self.passed})"


class ObstacleField:
    """Ordered obstacles, oldest (left-most) first.

    All obstacles scroll at the same speed, so spawn order is also left to right
    order and off-screen obstacles can always be pruned from the front.
    """

    def __init__(self, profile=DESKTOP_PHYSICS, width=config.OBSTACLE_WIDTH, spawn_distance=config.SPAWN_DISTANCE, rng=None):
        self.obstacles = deque()
        self.width = width
        self.spawn_distance = spawn_distance
        self.scroll_speed = profile.scroll_speed
        self.gap_size = profile.gap_size
        self.rng = rng if rng is not None else random.Random()

    def __iter__(self):
        return iter(self.obstacles)

    def __len__(self):
        return len(self.obstacles)

    def apply_profile(self, profile):
        """Retarget speed and gap size of the live field in place."""
        self.scroll_speed = profile.scroll_speed
        self.gap_size = profile.gap_size

    def reset(self, profile):
        self.obstacles.clear()
        self.apply_profile(profile)

    # -----------------------------
    # SPAWNING
    # -----------------------------
    def should_spawn(self, viewport_width):
        if not self.obstacles:
            return True
        return viewport_width - self.obstacles[-1].x >= self.spawn_distance

    def random_gap_top(self, viewport_height):
        """Integer gap top drawn uniformly between 10% and 60% of the height, both ends included."""
        low = viewport_height * config.GAP_TOP_MIN
        high = viewport_height * config.GAP_TOP_MAX
        return math.floor(self.rng.random() * (high - low + 1) + low)

    def spawn(self, viewport):
        obstacle = Obstacle(viewport.width, self.random_gap_top(viewport.height))
        self.obstacles.append(obstacle)
        logger.debug("spawned %r", obstacle)
        return obstacle

    # -----------------------------
    # FRAME UPDATE
    # -----------------------------
    def advance(self, bird, viewport):
        """Spawn, scroll, collide, score and prune for one frame.

        Returns a FieldResult. Scoring still happens on a crashing frame; the
        caller decides what a crash means.
        """
        if self.should_spawn(viewport.width):
            self.spawn(viewport)

        crashed = False
        points = 0
        for obstacle in self.obstacles:
            obstacle.move(self.scroll_speed)

            if obstacle.collides_with(bird, self.width, self.gap_size):
                crashed = True

            if not obstacle.passed and obstacle.cleared_by(bird, self.width):
                obstacle.passed = True
                points += 1

        self.prune()
        return FieldResult(crashed, points)

    def prune(self):
        """Drop obstacles whose trailing edge went past the left edge. Returns how many were removed."""
        removed = 0
        while self.obstacles and self.obstacles[0].trailing_edge(self.width) < 0:
            self.obstacles.popleft()
            removed += 1
        if removed:
            logger.debug("pruned %d obstacle(s), %d left", removed, len(self.obstacles))
        return removed
