# -----------------------------
# CONFIGURATION / CONSTANTS
# -----------------------------
WIDTH, HEIGHT = 1024, 720  # initial window size, the window is resizable
FPS = 60  # physics is tuned per frame, not per second

# Bird
BIRD_X = 50
BIRD_START_Y = 150
BIRD_RADIUS = 15

# Idle sway animation on the start screen
SWAY_PERIOD_MS = 500.0
SWAY_AMPLITUDE = 10

# Obstacles
OBSTACLE_WIDTH = 60
SPAWN_DISTANCE = 300  # distance from the right edge to the newest obstacle before the next spawn
GAP_TOP_MIN = 0.10  # fractions of the viewport height
GAP_TOP_MAX = 0.60

# Physics profiles
MOBILE_BREAKPOINT = 768  # viewports narrower than this use the mobile profile

DESKTOP_GRAVITY = 0.165
DESKTOP_JUMP_IMPULSE = -4.95  # negative is upwards
DESKTOP_SCROLL_SPEED = 2.2
DESKTOP_GAP_SIZE = 180

MOBILE_SLOWDOWN = 0.2  # gravity and scroll speed on mobile
MOBILE_JUMP_SCALE = 0.6  # tuned by hand, a 0.2 jump does not clear the gaps
MOBILE_GAP_SIZE = 200

# Visuals
SKY_COLOR = (116, 185, 255)
CLOUD_COLOR = (255, 255, 255, 102)
OBSTACLE_COLOR = (0, 184, 148)
CAP_COLOR = (85, 239, 196)
CAP_HEIGHT = 20
BIRD_COLOR = (255, 118, 117)
BIRD_SHINE = (255, 255, 255, 153)
TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 140)
BUTTON_COLOR = (9, 132, 227)
BUTTON_SIZE = (180, 56)
