#!/usr/bin/env python3
"""
Design tokens - CSS artifacts derived from a resolved DesignDNA.

Nothing here reads state beyond the DNA passed in and the fixed tables in
design_catalog.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Mapping
from urllib.parse import quote

from config import setup_logging
from design_catalog import (
    ADVANCED_LAYOUT_OPTIONS,
    BORDER_RADIUS_VALUES,
    CARD_STYLES,
    COLOR_PALETTES,
    CTA_STYLES,
    FONT_PAIRS,
    HERO_STYLES,
    LAYOUT_CLASS_PREFIXES,
    SECTION_ORDER_VARIATIONS,
    SHADOW_VALUES,
    SPACING_SCALE_VALUES,
    TYPOGRAPHY_SCALE_VALUES,
)
from design_dna import DesignDNA, DesignStyle

logger = setup_logging("design_tokens")

GOOGLE_FONTS_BASE = "https://fonts.googleapis.com/css2"
FONT_WEIGHTS = (400, 500, 600, 700)

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_WHITESPACE = re.compile(r"\s+")

_WAVE_PATH = (
    "M0,96L48,112C96,128,192,160,288,160C384,160,480,128,576,122.7"
    "C672,117,768,139,864,154.7C960,171,1056,181,1152,165.3"
    "C1248,149,1344,107,1392,85.3L1440,64L1440,320L1392,320"
    "C1344,320,1248,320,1152,320C1056,320,960,320,864,320"
    "C768,320,672,320,576,320C480,320,384,320,288,320"
    "C192,320,96,320,48,320L0,320Z"
)

_NOISE_SVG = (
    "data:image/svg+xml,%3Csvg viewBox='0 0 400 400' xmlns='http://www.w3.org/2000/svg'%3E"
    "%3Cfilter id='noiseFilter'%3E%3CfeTurbulence type='fractalNoise' baseFrequency='0.9' "
    "numOctaves='3' stitchTiles='stitch'/%3E%3C/filter%3E"
    "%3Crect width='100%25' height='100%25' filter='url(%23noiseFilter)'/%3E%3C/svg%3E"
)


def hex_to_rgb(hex_color: str) -> tuple:
    """Parse ``#rrggbb`` (or ``#rgb``) into an (r, g, b) tuple."""
    match = _HEX_COLOR.match(hex_color.strip())
    if not match:
        raise ValueError(f"Not a hex color: {hex_color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def light_color(hex_color: str, alpha: float = 0.1) -> str:
    """Translucent variant of a color for hover and tint backgrounds."""
    try:
        r, g, b = hex_to_rgb(hex_color)
    except ValueError:
        logger.warning("Cannot derive light color from %r, using black", hex_color)
        r, g, b = 0, 0, 0
    return f"rgba({r}, {g}, {b}, {alpha})"


def _lookup(table: Mapping[str, str], key: str, default: str, token: str) -> str:
    value = table.get(key)
    if value is None:
        logger.warning("No %s value for %r, using %r", token, key, default)
        return default
    return value


def _shadow_value(shadow_style: str, primary: str) -> str:
    if shadow_style == "colored":
        return f"0 10px 25px {primary}30"
    return _lookup(SHADOW_VALUES, shadow_style, "none", "shadow")


def generate_css_variables(dna: DesignDNA) -> str:
    """Render the DNA as CSS custom property declarations, one per line."""
    colors = dna.colors
    declarations: List[str] = [
        f"--color-primary: {colors.primary};",
        f"--color-primary-light: {light_color(colors.primary)};",
        f"--color-secondary: {colors.secondary};",
        f"--color-accent: {colors.accent};",
        f"--color-background: {colors.background};",
        f"--color-text: {colors.text};",
        f"--color-text-on-primary: {colors.text_on_primary};",
        f"--gradient-primary: {dna.gradients.primary};",
        f"--gradient-hero: {dna.gradients.hero};",
        f"--gradient-accent: {dna.gradients.accent};",
        f"--font-heading: '{dna.fonts.heading}', sans-serif;",
        f"--font-body: '{dna.fonts.body}', sans-serif;",
    ]

    adv = dna.advanced_layout
    if dna.is_advanced and adv is not None:
        declarations.extend([
            f"--border-radius: {_lookup(BORDER_RADIUS_VALUES, adv.border_radius, '0', 'border radius')};",
            f"--spacing-scale: {_lookup(SPACING_SCALE_VALUES, adv.spacing_scale, '1', 'spacing scale')};",
            f"--typography-scale: {_lookup(TYPOGRAPHY_SCALE_VALUES, adv.typography_scale, '1', 'typography scale')};",
            f"--shadow: {_shadow_value(adv.shadow_style, colors.primary)};",
        ])

    return "\n".join(declarations)


def build_style_block(dna: DesignDNA, selector: str = ":root") -> str:
    """Wrap the custom properties in a rule ready for a <style> tag."""
    body = "\n".join(f"  {line}" for line in generate_css_variables(dna).splitlines())
    return f"{selector} {{\n{body}\n}}"


def get_google_fonts_url(dna: DesignDNA) -> str:
    """Google Fonts css2 request for the heading and body fonts."""
    families = [dna.fonts.heading]
    if dna.fonts.body != dna.fonts.heading:
        families.append(dna.fonts.body)

    weights = ";".join(str(w) for w in FONT_WEIGHTS)
    params = "&".join(
        f"family={_WHITESPACE.sub('+', name)}:wght@{weights}" for name in families
    )
    return f"{GOOGLE_FONTS_BASE}?{params}&display=swap"


def get_advanced_layout_classes(dna: DesignDNA) -> Dict[str, str]:
    """Class name per layout element; empty outside advanced mode."""
    adv = dna.advanced_layout
    if not dna.is_advanced or adv is None:
        return {}

    return {
        key: f"{prefix}-{getattr(adv, axis)}"
        for key, prefix, axis in LAYOUT_CLASS_PREFIXES
    }


def get_background_pattern_css(pattern: str, primary_color: str) -> str:
    """CSS declarations drawing the background pattern in the primary color."""
    if pattern == "dots":
        return (
            f"background-image: radial-gradient({primary_color}20 1px, transparent 1px); "
            "background-size: 20px 20px;"
        )
    if pattern == "grid":
        return (
            f"background-image: linear-gradient({primary_color}10 1px, transparent 1px), "
            f"linear-gradient(90deg, {primary_color}10 1px, transparent 1px); "
            "background-size: 40px 40px;"
        )
    if pattern == "waves":
        fill = quote(primary_color, safe="-_.!~*'()")
        svg = (
            "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 1440 320'%3E"
            f"%3Cpath fill='{fill}' fill-opacity='0.1' d='{_WAVE_PATH}'%3E%3C/path%3E%3C/svg%3E"
        )
        return f'background-image: url("{svg}");'
    if pattern == "gradient-mesh":
        return (
            f"background: radial-gradient(at 40% 20%, {primary_color}30 0px, transparent 50%), "
            f"radial-gradient(at 80% 0%, {primary_color}20 0px, transparent 50%), "
            f"radial-gradient(at 0% 50%, {primary_color}25 0px, transparent 50%);"
        )
    if pattern == "noise":
        return f'background-image: url("{_NOISE_SVG}"); opacity: 0.05;'

    if pattern != "none":
        logger.warning("Unknown background pattern %r", pattern)
    return ""


def calculate_unique_combinations(design_style: Any) -> int:
    """Number of distinct designs the catalogs can produce in a mode."""
    style = DesignStyle.parse(design_style)
    sizes = [len(COLOR_PALETTES), len(FONT_PAIRS)]

    if style is DesignStyle.BASIC:
        sizes += [len(HERO_STYLES), len(CARD_STYLES), len(CTA_STYLES)]
    else:
        sizes += [len(options) for options in ADVANCED_LAYOUT_OPTIONS.values()]
        sizes.append(len(SECTION_ORDER_VARIATIONS))

    return math.prod(sizes)
