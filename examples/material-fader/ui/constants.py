"""Layout constants and color definitions."""

FPS = 60

SCREEN_W = 720
SCREEN_H = 360
STATUS_H = 36

PANEL_W = 140
PANEL_H = 200
PANEL_GAP = 30

BG_COLOR = (20, 20, 30)
PANEL_BORDER = (50, 50, 70)
TEXT_COLOR = (200, 200, 210)
DIM_TEXT = (120, 120, 140)
