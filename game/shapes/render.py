"""
Arcade drawing for every screen.

Game logic works in surface coordinates (origin top-left, y down); arcade
draws with the origin bottom-left, so every y goes through ``flip_y``.
"""

from __future__ import annotations

import arcade

from .entities import ShapeKind
from .geometry import shape_outline
from .palette import (
    TEXT_C, DIM_C, PLAYER_C, BULLET_C, BUTTON_C, BUTTON_EDGE_C, SELECTED_C,
    HEALTH_BG_C, HEALTH_C, HEALTH_LOW_C, enemy_color,
)
from .screens import Button, Screen, ScreenController
from .session import GameSession
from .utils import clamp, flip_y

INSTRUCTIONS = (
    "Move with LEFT/RIGHT or A/D",
    "Shoot with SPACE",
    "Destroy enemies before they reach the bottom",
    "Each escaped enemy costs 34 health; losing all health costs a life",
    "Enemies get faster and more frequent every 10 seconds",
    "Press ESC to return to the menu",
)


def draw_shape(kind: ShapeKind, cx: float, cy: float, size: float, color, height: float):
    points = shape_outline(kind, cx, cy, size)
    if points is None:
        arcade.draw_circle_filled(cx, flip_y(cy, height), size, color)
        return
    arcade.draw_polygon_filled([(x, flip_y(y, height)) for x, y in points], color)


def draw_label(text: str, x: float, y: float, height: float, size: int = 28, color=TEXT_C):
    arcade.draw_text(text, x, flip_y(y, height), color, size,
                     anchor_x="center", anchor_y="center")


def draw_button(button: Button, height: float):
    left, right, top, bottom = button.lrtb
    b, t = flip_y(bottom, height), flip_y(top, height)
    arcade.draw_lrbt_rectangle_filled(left, right, b, t, BUTTON_C)
    arcade.draw_lrbt_rectangle_outline(left, right, b, t, BUTTON_EDGE_C, 3)
    draw_label(button.label, button.x, button.y, height, 30)


# ----------------------------
# Screens
# ----------------------------

def draw_menu(ctl: ScreenController):
    s = ctl.session
    draw_label("SHAPE SHOOTER", s.width / 2, s.height * 0.22, s.height, 72)
    for button in ctl.menu_buttons.values():
        draw_button(button, s.height)


def draw_instructions(ctl: ScreenController):
    s = ctl.session
    draw_label("How to play", s.width / 2, s.height * 0.2, s.height, 56)
    for i, line in enumerate(INSTRUCTIONS):
        draw_label(line, s.width / 2, s.height * 0.35 + i * 70, s.height, 30)


def draw_shape_select(ctl: ScreenController):
    s = ctl.session
    draw_label("Choose your shape", s.width / 2, s.height * 0.2, s.height, 56)

    for slot in ctl.shape_slots:
        half = slot.box / 2
        selected = slot.shape is ctl.selected_shape
        edge = SELECTED_C if selected else DIM_C
        arcade.draw_lrbt_rectangle_outline(
            slot.x - half, slot.x + half,
            flip_y(slot.y + half, s.height), flip_y(slot.y - half, s.height),
            edge, 4 if selected else 2,
        )
        draw_shape(slot.shape, slot.x, slot.y, slot.box * 0.3, PLAYER_C, s.height)
        draw_label(slot.shape.value, slot.x, slot.y + half + 30, s.height, 20, DIM_C)

    if ctl.continue_visible:
        draw_button(ctl.select_buttons["continue"], s.height)
    draw_button(ctl.select_buttons["quit"], s.height)


def draw_play(session: GameSession):
    h = session.height
    p = session.player
    draw_shape(p.shape, p.x, p.y, p.radius, PLAYER_C, h)

    for b in session.bullets:
        arcade.draw_circle_filled(b.x, flip_y(b.y, h), b.radius, BULLET_C)

    color = enemy_color(session.level)
    for e in session.enemies:
        arcade.draw_lrbt_rectangle_filled(
            e.x, e.x + e.size, flip_y(e.y + e.size, h), flip_y(e.y, h), color)

    draw_hud(session)


def draw_hud(session: GameSession):
    h = session.height

    # Health bar
    bar_w, bar_h = 400, 30
    x0, top = 30, 30
    b, t = flip_y(top + bar_h, h), flip_y(top, h)
    arcade.draw_lrbt_rectangle_filled(x0, x0 + bar_w, b, t, HEALTH_BG_C)
    fill = bar_w * clamp(session.health_fraction, 0, 1)
    if fill > 0:
        color = HEALTH_C if session.health_fraction > 0.34 else HEALTH_LOW_C
        arcade.draw_lrbt_rectangle_filled(x0, x0 + fill, b, t, color)
    arcade.draw_text(f"Health: {session.health}", x0, flip_y(top + bar_h + 35, h), TEXT_C, 22)

    arcade.draw_text(f"Score: {session.score}", session.width - 30, flip_y(45, h),
                     TEXT_C, 28, anchor_x="right")
    arcade.draw_text(f"Level: {session.level}", session.width - 30, flip_y(90, h),
                     TEXT_C, 24, anchor_x="right")
    arcade.draw_text(f"Lives: {session.lives}", session.width - 30, flip_y(130, h),
                     TEXT_C, 24, anchor_x="right")


def draw_game_over(ctl: ScreenController):
    s = ctl.session
    draw_label("GAME OVER", s.width / 2, s.height * 0.25, s.height, 80, HEALTH_LOW_C)
    draw_label(f"Final score: {s.score}", s.width / 2, s.height * 0.37, s.height, 40)
    draw_label(f"Reached level {s.level}", s.width / 2, s.height * 0.44, s.height, 28, DIM_C)
    for button in ctl.game_over_buttons.values():
        draw_button(button, s.height)


def draw_quit(ctl: ScreenController):
    s = ctl.session
    draw_label("Thanks for playing!", s.width / 2, s.height * 0.45, s.height, 64)
    draw_label("You can close this window now.", s.width / 2, s.height * 0.55, s.height, 28, DIM_C)


SCREEN_DRAWERS = {
    Screen.MENU: draw_menu,
    Screen.INSTRUCTIONS: draw_instructions,
    Screen.SHAPE_SELECT: draw_shape_select,
    Screen.PLAY: lambda ctl: draw_play(ctl.session),
    Screen.GAME_OVER: draw_game_over,
}


def draw_controller(ctl: ScreenController):
    """Draw whatever the active screen shows"""
    if ctl.halted:
        draw_quit(ctl)
        return
    SCREEN_DRAWERS[ctl.screen](ctl)
