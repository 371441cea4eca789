#!/usr/bin/env python3
"""
Design DNA - deterministic visual identity for each site.

A site's domain and target keyword are hashed into several independent
seeds, and each seed picks one entry from a style catalog. Two modes:

- basic: palette, font pair and three small layout choices
- advanced: basic plus thirteen structural layout axes and a section order
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from design_catalog import (
    ANIMATION_STYLES,
    BACKGROUND_PATTERNS,
    BORDER_RADII,
    BUTTON_STYLES,
    CARD_LAYOUTS,
    CARD_STYLES,
    COLOR_PALETTES,
    CTA_PLACEMENTS,
    CTA_STYLES,
    FONT_PAIRS,
    FOOTER_STYLES,
    HERO_STYLES,
    HERO_VARIANTS,
    IMAGE_STYLES,
    NAV_STYLES,
    SECTION_ORDER_VARIATIONS,
    SHADOW_STYLES,
    SPACING_SCALES,
    TYPOGRAPHY_SCALES,
    FontPair,
    Palette,
)
from seed_hash import hash_string, reverse_text


class DesignStyle(str, Enum):
    BASIC = "basic"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value: Any) -> "DesignStyle":
        """Accept an enum member or its string value, case-insensitively."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown design style: {value!r}")


@dataclass(frozen=True)
class Gradients:
    primary: str
    hero: str
    accent: str


@dataclass(frozen=True)
class BasicLayout:
    hero_style: str
    card_style: str
    cta_style: str


@dataclass(frozen=True)
class AdvancedLayout:
    """Structural layout choices used only in advanced mode."""
    hero_variant: str
    section_order: Tuple[str, ...]
    card_layout: str
    nav_style: str
    footer_style: str
    spacing_scale: str
    animation_style: str
    border_radius: str
    shadow_style: str
    background_pattern: str
    cta_placement: str
    typography_scale: str
    image_style: str
    button_style: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heroVariant": self.hero_variant,
            "sectionOrder": list(self.section_order),
            "cardLayout": self.card_layout,
            "navStyle": self.nav_style,
            "footerStyle": self.footer_style,
            "spacingScale": self.spacing_scale,
            "animationStyle": self.animation_style,
            "borderRadius": self.border_radius,
            "shadowStyle": self.shadow_style,
            "backgroundPattern": self.background_pattern,
            "ctaPlacement": self.cta_placement,
            "typographyScale": self.typography_scale,
            "imageStyle": self.image_style,
            "buttonStyle": self.button_style,
        }


@dataclass(frozen=True)
class DesignDNA:
    """Resolved visual identity for one site."""
    design_style: DesignStyle
    colors: Palette
    gradients: Gradients
    fonts: FontPair
    layout: BasicLayout
    advanced_layout: Optional[AdvancedLayout] = None

    def __post_init__(self):
        is_advanced = self.design_style is DesignStyle.ADVANCED
        if is_advanced != (self.advanced_layout is not None):
            raise ValueError("advanced_layout must be set exactly when design_style is advanced")

    @property
    def is_advanced(self) -> bool:
        return self.design_style is DesignStyle.ADVANCED

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys the page templates read."""
        data: Dict[str, Any] = {
            "designStyle": self.design_style.value,
            "colors": {
                "primary": self.colors.primary,
                "secondary": self.colors.secondary,
                "accent": self.colors.accent,
                "background": self.colors.background,
                "text": self.colors.text,
                "textOnPrimary": self.colors.text_on_primary,
            },
            "gradients": {
                "primary": self.gradients.primary,
                "hero": self.gradients.hero,
                "accent": self.gradients.accent,
            },
            "fonts": {
                "heading": self.fonts.heading,
                "body": self.fonts.body,
            },
            "layout": {
                "heroStyle": self.layout.hero_style,
                "cardStyle": self.layout.card_style,
                "ctaStyle": self.layout.cta_style,
            },
        }
        if self.advanced_layout is not None:
            data["advancedLayout"] = self.advanced_layout.to_dict()
        return data


_COLOR_KEYS = {
    "primary": "primary",
    "secondary": "secondary",
    "accent": "accent",
    "background": "background",
    "text": "text",
    "textOnPrimary": "text_on_primary",
    "text_on_primary": "text_on_primary",
}

_FONT_KEYS = {"heading": "heading", "body": "body"}


def _present_values(raw: Any, key_map: Dict[str, str]) -> Dict[str, str]:
    """Keep mapped keys whose value is a non-empty string."""
    values: Dict[str, str] = {}
    if not isinstance(raw, dict):
        return values
    for key, value in raw.items():
        name = key_map.get(key)
        if name and isinstance(value, str) and value.strip():
            values[name] = value.strip()
    return values


@dataclass
class DesignOverride:
    """Partial colors/fonts supplied by an external design generator.

    Keys may be camelCase or snake_case; unknown keys and empty or
    non-string values are dropped on construction.
    """
    colors: Dict[str, str] = field(default_factory=dict)
    fonts: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.colors = _present_values(self.colors, _COLOR_KEYS)
        self.fonts = _present_values(self.fonts, _FONT_KEYS)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DesignOverride":
        """Build from a partial design dict, bare or wrapped in ``designDNA``.

        Layout keys are ignored.
        """
        if not data:
            return cls()
        if isinstance(data.get("designDNA"), dict):
            data = data["designDNA"]
        return cls(colors=data.get("colors") or {}, fonts=data.get("fonts") or {})

    def is_empty(self) -> bool:
        return not self.colors and not self.fonts


def build_gradients(colors: Palette) -> Gradients:
    """Gradients always derive from the palette they are shown with."""
    return Gradients(
        primary=f"linear-gradient(135deg, {colors.primary} 0%, {colors.secondary} 100%)",
        hero=(
            f"linear-gradient(135deg, {colors.primary} 0%, "
            f"{colors.secondary} 50%, {colors.accent} 100%)"
        ),
        accent=f"linear-gradient(135deg, {colors.accent} 0%, {colors.primary} 100%)",
    )


def palette_index(domain: str, keyword: str) -> int:
    return hash_string(domain + keyword) % len(COLOR_PALETTES)


def font_pair_index(domain: str) -> int:
    return hash_string(reverse_text(domain)) % len(FONT_PAIRS)


def generate_advanced_layout(domain: str, keyword: str) -> AdvancedLayout:
    """Pick every structural axis from five seeds, alone or summed in pairs."""
    s1 = hash_string(domain)
    s2 = hash_string(keyword + domain)
    s3 = hash_string(reverse_text(domain))
    s4 = hash_string(domain + keyword + "layout")
    s5 = hash_string(reverse_text(keyword) + domain)

    return AdvancedLayout(
        hero_variant=HERO_VARIANTS[s1 % len(HERO_VARIANTS)],
        section_order=SECTION_ORDER_VARIATIONS[s2 % len(SECTION_ORDER_VARIATIONS)],
        card_layout=CARD_LAYOUTS[s3 % len(CARD_LAYOUTS)],
        nav_style=NAV_STYLES[s4 % len(NAV_STYLES)],
        footer_style=FOOTER_STYLES[(s1 + s2) % len(FOOTER_STYLES)],
        spacing_scale=SPACING_SCALES[s5 % len(SPACING_SCALES)],
        animation_style=ANIMATION_STYLES[(s3 + s4) % len(ANIMATION_STYLES)],
        border_radius=BORDER_RADII[(s1 + s3) % len(BORDER_RADII)],
        shadow_style=SHADOW_STYLES[(s2 + s4) % len(SHADOW_STYLES)],
        background_pattern=BACKGROUND_PATTERNS[(s1 + s5) % len(BACKGROUND_PATTERNS)],
        cta_placement=CTA_PLACEMENTS[(s2 + s5) % len(CTA_PLACEMENTS)],
        typography_scale=TYPOGRAPHY_SCALES[(s3 + s5) % len(TYPOGRAPHY_SCALES)],
        image_style=IMAGE_STYLES[(s4 + s5) % len(IMAGE_STYLES)],
        button_style=BUTTON_STYLES[(s1 + s4) % len(BUTTON_STYLES)],
    )


def generate_design_dna(
    domain: str,
    keyword: str = "",
    design_style: Any = DesignStyle.BASIC,
) -> DesignDNA:
    """Resolve the design DNA for a domain and keyword.

    Pure and total: any pair of strings resolves, and the same inputs
    always give the same descriptor.
    """
    style = DesignStyle.parse(design_style)

    palette = COLOR_PALETTES[palette_index(domain, keyword)]
    fonts = FONT_PAIRS[font_pair_index(domain)]

    # keyword + domain, not domain + keyword: keeps layout apart from palette.
    layout_seed = hash_string(keyword + domain)
    layout = BasicLayout(
        hero_style=HERO_STYLES[layout_seed % len(HERO_STYLES)],
        card_style=CARD_STYLES[(layout_seed >> 2) % len(CARD_STYLES)],
        cta_style=CTA_STYLES[(layout_seed >> 4) % len(CTA_STYLES)],
    )

    advanced_layout = None
    if style is DesignStyle.ADVANCED:
        advanced_layout = generate_advanced_layout(domain, keyword)

    return DesignDNA(
        design_style=style,
        colors=palette,
        gradients=build_gradients(palette),
        fonts=fonts,
        layout=layout,
        advanced_layout=advanced_layout,
    )


def merge_design_override(dna: DesignDNA, override: Optional[DesignOverride]) -> DesignDNA:
    """Return a new DNA with override colors/fonts applied field by field.

    Gradients are rebuilt from the merged colors. Layout never changes.
    """
    if override is None:
        return dna

    color_values = _present_values(override.colors, _COLOR_KEYS)
    font_values = _present_values(override.fonts, _FONT_KEYS)
    if not color_values and not font_values:
        return dna

    colors = replace(dna.colors, **color_values)
    fonts = replace(dna.fonts, **font_values)

    return replace(
        dna,
        colors=colors,
        gradients=build_gradients(colors),
        fonts=fonts,
    )
