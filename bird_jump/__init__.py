"""
Bird Jump

A Flappy-Bird style arcade game:
- a bird falls under gravity and jumps on SPACE, click or touch
- obstacle pairs scroll in from the right with a random gap
- one point for every obstacle the bird clears
- physics switch between a desktop and a slower mobile profile on resize

The simulation (bird, obstacles, session) has no pygame dependency; pygame is
only used by the renderer and the window host in ``bird_jump.app``.
"""

__version__ = "1.0.0"
