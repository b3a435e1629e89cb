"""Module-wide constants for the canvas command brain."""

# Parameter ranges (inclusive)
INTENSITY_RANGE = (0.1, 3.0)
SPEED_RANGE = (0.1, 3.0)
PARTICLE_RANGE = (500, 8000)

# Relative steps for increase/decrease
INTENSITY_STEP = 0.5
SPEED_STEP = 0.5
PARTICLE_STEP = 1000

# Fixed targets for non-relative verbs
BURST_PARTICLES = 7000
SWARM_PARTICLES = 5000
CHAOS_SPEED = 2.5

STYLES = ("neural", "quantum", "cosmic", "plasma")

# Matcher scoring
EXACT_POINTS = 2.0
SUBSTRING_POINTS = 1.0
FUZZY_POINTS = 0.5
DEFAULT_MIN_CONFIDENCE = 0.3
DEFAULT_FUZZY_THRESHOLD = 0.7

# Category evaluation order doubles as action order
CATEGORY_ORDER = ("mood", "style", "color", "intensity", "particles", "speed")
CATEGORY_WEIGHTS: dict[str, float] = {
    "mood": 0.9,
    "style": 0.8,
    "color": 0.7,
    "intensity": 0.6,
    "particles": 0.6,
    "speed": 0.6,
}

MAX_NORMALIZE_PASSES = 4

DEFAULT_DEBUG = False
DEFAULT_CACHE_SIZE = 128
DEFAULT_CACHE_TTL_S = 30.0
DEFAULT_LOG_MAX_BYTES = 1_000_000
DEFAULT_DEBOUNCE_MS = 250
DEFAULT_QUEUE_MAXSIZE = 32

# Unrecognized-input hints, keyed by the substrings that trigger them
HINTS_BY_TOPIC: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("color", "colour"), ('"make it red"', '"blue colors"', '"bright white"')),
    (("style", "mode"), ('"neural style"', '"quantum mode"', '"cosmic dance"')),
    (("feel", "mood"), ('"angry mood"', '"calm feeling"', '"energetic vibe"')),
)
HINT_PREFIX = "I think you want to change something! Try: "
GENERIC_HINT = (
    "I didn't quite understand that. Try: 'make it brighter', "
    "'quantum style', 'angry mood', or 'more particles'"
)

HELP_TEXT = """\
CANVAS COMMANDS

STYLES:    "neural style", "quantum mode", "cosmic dance", "plasma storm"
COLORS:    "make it red", "blue colors", "white glow", "dark purple"
INTENSITY: "brighter", "dimmer", "maximum power", "barely visible"
PARTICLES: "more particles", "particle explosion", "fewer dots"
SPEED:     "faster", "slower", "freeze it", "chaos mode"
MOODS:     "angry", "calm", "happy", "mysterious", "energetic"

GESTURES:
  THUMBS_UP   -> brighter and more energy
  THUMBS_DOWN -> dimmer and calmer
  OPEN_HAND   -> more particles
  FIST        -> fewer particles
  PEACE       -> change style

Try: "create an angry red plasma storm" or "make it calm and blue"
"""

# MediaPipe hand landmark layout
HAND_POINTS = 21
WRIST = 0
THUMB_TIP = 4
INDEX_TIP = 8
MIDDLE_TIP = 12
RING_TIP = 16
PINKY_TIP = 20
THUMB_EXTENSION_MARGIN = 0.1
