"""
Colors shared by the renderer. Kept free of arcade so the rules can be tested headless.
"""

BG = (18, 18, 22)
TEXT_C = (230, 235, 255)
DIM_C = (120, 130, 160)
PLAYER_C = (80, 200, 120)
BULLET_C = (255, 255, 180)
BUTTON_C = (50, 60, 90)
BUTTON_EDGE_C = (160, 200, 255)
SELECTED_C = (240, 210, 80)
HEALTH_BG_C = (60, 60, 60)
HEALTH_C = (80, 200, 120)
HEALTH_LOW_C = (220, 80, 80)
ENEMY_COLORS = ((220, 80, 80), (240, 150, 60), (180, 80, 220))


def enemy_color(level: int):
    """Enemy fill by difficulty level: below 5, below 10, then everything above"""
    if level < 5:
        return ENEMY_COLORS[0]
    if level < 10:
        return ENEMY_COLORS[1]
    return ENEMY_COLORS[2]
