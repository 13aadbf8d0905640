import os

WIDTH = 800
HEIGHT = 600
FULLSCREEN = False
CAPTION = "Square Dodge"
BACKGROUND = (18, 18, 24)
# Host loop rate; the simulation itself ticks at FPS through the scheduler
DISPLAY_FPS = 60
VSYNC = False
# Longest wall-clock step fed to the scheduler after a stall (ms)
MAX_FRAME_MS = 250

# Simulation tick rate (Hz)
FPS = 30
NUM_OBSTACLES = 100
# Obstacle batch refresh period (ms)
SPAWN_PERIOD_MS = 3 * 1000
# Per-axis speed range in surface units per tick
MIN_SPEED = 0.1
MAX_SPEED = 2
MIN_WIDTH = 2
MAX_WIDTH = 10
# How far beyond the surface edges obstacles may spawn
SPAWN_OFFSET = MAX_WIDTH * 10
# None keeps every on-surface survivor across refreshes
MAX_OBSTACLES = None

PLAYER_SPEED = MAX_SPEED
PLAYER_WIDTH = MAX_WIDTH
PLAYER_COLOR = "red"

# Drop shadow drawn beneath every rectangle
SHADOW_OFFSET = 2
SHADOW_COLOR = (0, 0, 0, 140)

BEST_SCORE_KEY = "bestScore"
BEST_SCORE_PATH = os.path.join(os.path.expanduser("~"), ".square_dodge.json")
