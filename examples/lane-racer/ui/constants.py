"""Layout constants and color palettes."""

from lane_racer.config import FIELD_H, FIELD_W, LANE_WIDTH, LANES, ROAD_X

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = FIELD_W
SCREEN_H = FIELD_H
ROAD_W = LANES * LANE_WIDTH
ROAD_LEFT = ROAD_X
DASH_LEN = 40
DASH_GAP = 30
BUTTON_H = 70

# Colors
BG_COLOR = (20, 20, 30)
ROAD_COLOR = (45, 45, 55)
LANE_LINE = (200, 200, 200)
SHOULDER = (255, 200, 0)
OVERLAY = (0, 0, 0, 170)
TEXT_COLOR = (230, 230, 240)
TEXT_DIM = (130, 130, 150)
HIGHLIGHT = (255, 220, 80)
BUTTON_COLOR = (255, 255, 255, 50)

# Semantic name -> color. Render code never uses raw colors for gameplay objects.
PALETTE: dict[str, tuple[int, int, int]] = {
    "player": (0, 200, 255),
    "plain": (230, 60, 60),
    "slow": (150, 90, 40),
    "weaving": (200, 80, 220),
    "burst": (255, 130, 0),
    "warning": (255, 255, 0),
    "coin": (255, 215, 0),
    "heal": (60, 220, 90),
    "boost": (0, 160, 255),
    "crash": (255, 70, 40),
    "near_miss": (255, 255, 120),
    "text": TEXT_COLOR,
}

# Blue/orange scheme that survives red-green color blindness.
COLORBLIND_PALETTE: dict[str, tuple[int, int, int]] = {
    **PALETTE,
    "player": (0, 114, 178),
    "plain": (213, 94, 0),
    "slow": (204, 121, 167),
    "weaving": (240, 228, 66),
    "burst": (230, 159, 0),
    "coin": (240, 228, 66),
    "heal": (86, 180, 233),
    "boost": (0, 158, 115),
    "crash": (213, 94, 0),
    "near_miss": (255, 255, 255),
}


def palette(colorblind: bool) -> dict[str, tuple[int, int, int]]:
    return COLORBLIND_PALETTE if colorblind else PALETTE
