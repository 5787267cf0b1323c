"""Configuration constants for contour-based hand detection."""


# =============================================================================
# HAND MODEL CAPACITY
# =============================================================================
NUM_FINGERS = 5
MAX_FINGERS = NUM_FINGERS + 1
MAX_DEFECTS = 8


# =============================================================================
# FINGERTIP HEURISTICS
# =============================================================================
# Candidates this close to the bottom edge belong to the wrist/forearm
BOTTOM_MARGIN_PX = 10

# Shorter contours are not usable
MIN_CONTOUR_POINTS = 3


# =============================================================================
# SKIN SEGMENTATION
# =============================================================================
SKIN_HSV_LOWER = (0, 55, 90)
SKIN_HSV_UPPER = (28, 175, 230)
SMOOTH_KERNEL = 11
MEDIAN_KERNEL = 11
MASK_BLUR_KERNEL = 3
MORPH_KERNEL_SIZE = 9
CONTOUR_APPROX_EPSILON = 2.0


# =============================================================================
# RECORDING
# =============================================================================
VIDEO_FILE = "video.avi"
VIDEO_FOURCC = "MJPG"
DEFAULT_FPS = 10


# =============================================================================
# DISPLAY
# =============================================================================
OUTPUT_WINDOW = "output"
THRESHOLD_WINDOW = "thresholded"
OUTPUT_WINDOW_POS = (50, 50)
THRESHOLD_WINDOW_POS = (700, 50)
QUIT_KEYS = (ord("q"), 27)

# BGR colors
COLOR_RED = (0, 0, 255)
COLOR_GREEN = (0, 255, 0)
COLOR_BLUE = (255, 0, 0)
COLOR_YELLOW = (0, 255, 255)
COLOR_PURPLE = (255, 0, 255)
COLOR_GREY = (200, 200, 200)

CENTER_MARKER_RADIUS = 5
FINGER_MARKER_RADIUS = 10
FINGER_MARKER_THICKNESS = 3
DEFECT_MARKER_RADIUS = 2
DEFECT_MARKER_THICKNESS = 2
