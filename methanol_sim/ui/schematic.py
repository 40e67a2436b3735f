"""Process flow diagram rendered with Pillow: SOEC stack feeding the methanol reactor."""

from __future__ import annotations

from typing import Dict

import streamlit as st
from PIL import Image, ImageDraw, ImageColor

from methanol_sim.ui.display import DisplaySlot


# Color palette
BG = (15, 20, 35)
PIPE = (100, 140, 180)
EQUIP = (50, 70, 100)
EQUIP_BORDER = (80, 120, 160)
TEXT_COLOR = (200, 215, 235)
GREEN = (50, 200, 100)

WIDTH, HEIGHT = 900, 420


def _box(draw, xy, title):
    x0, y0, _, _ = xy
    draw.rounded_rectangle(xy, radius=12, fill=EQUIP, outline=EQUIP_BORDER, width=2)
    draw.text((x0 + 10, y0 + 8), title, fill=TEXT_COLOR)


def _heat_indicator(draw, x, y, fill_pct):
    """Small vertical gauge; redder as the fill rises."""
    frac = max(0.0, min(1.0, fill_pct / 100.0))
    draw.rectangle([x, y, x + 14, y + 80], outline=EQUIP_BORDER)
    h = int(78 * frac)
    color = (int(120 + 115 * frac), int(170 - 80 * frac), 60)
    draw.rectangle([x + 1, y + 79 - h, x + 13, y + 79], fill=color)


def _draw_badge(draw, x, y, text, color):
    """Draw a status badge."""
    tw = len(text) * 9 + 20
    draw.rounded_rectangle([x, y, x + tw, y + 26], radius=6, fill=color)
    draw.text((x + 10, y + 5), text, fill=(0, 0, 0))


def draw_schematic(slots: Dict[str, DisplaySlot]) -> Image.Image:
    """Draw the flow diagram for one snapshot."""
    img = Image.new("RGB", (WIDTH, HEIGHT), BG)
    draw = ImageDraw.Draw(img)

    # --- Feeds (left) ---
    draw.line([40, 140, 150, 140], fill=PIPE, width=3)
    draw.text((40, 120), "STEAM", fill=GREEN)
    draw.line([40, 290, 520, 290], fill=PIPE, width=3)
    draw.text((40, 270), "CO2", fill=GREEN)

    # --- SOEC stack ---
    soec = (150, 80, 330, 200)
    _box(draw, soec, "SOEC STACK")
    draw.text((165, 110), slots["soec_temp"].text, fill=TEXT_COLOR)
    _heat_indicator(draw, 300, 105, slots["soec_temp"].fill or 0.0)

    # H2 line: SOEC -> mixer
    draw.line([330, 140, 520, 140], fill=PIPE, width=3)
    draw.line([520, 140, 520, 290], fill=PIPE, width=3)
    draw.text((380, 120), "H2", fill=GREEN)
    draw.text((530, 200), f"H2/CO2 {slots['ratio'].text}", fill=TEXT_COLOR)

    # --- Methanol reactor ---
    reactor = (600, 220, 780, 360)
    _box(draw, reactor, "MeOH REACTOR")
    draw.line([520, 290, 600, 290], fill=PIPE, width=3)
    draw.text((615, 250), slots["reactor_temp"].text, fill=TEXT_COLOR)
    draw.text((615, 270), slots["pressure"].text, fill=TEXT_COLOR)
    draw.text((615, 290), f"Cat {slots['catalyst'].text}", fill=TEXT_COLOR)
    _heat_indicator(draw, 750, 245, slots["reactor_temp"].fill or 0.0)

    # Product
    draw.line([780, 290, 880, 290], fill=PIPE, width=3)
    draw.text((790, 270), "METHANOL", fill=GREEN)

    # --- HUD ---
    hud = [f"Conv {slots['conversion'].text}", f"Sel {slots['selectivity'].text}"]
    if "performance" in slots:
        hud.append(f"Perf {slots['performance'].text}")
    x_pos = 20
    for item in hud:
        draw.text((x_pos, HEIGHT - 25), item, fill=TEXT_COLOR)
        x_pos += 180

    # --- Status badge ---
    status = slots["status"]
    _draw_badge(draw, 30, 20, status.text, ImageColor.getrgb(status.color))

    return img


def render_schematic(slots: Dict[str, DisplaySlot]) -> None:
    """Render the process flow diagram with status overlay."""
    st.image(draw_schematic(slots), use_container_width=True)
