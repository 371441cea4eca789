#!/usr/bin/env python3
"""
Style catalogs for design DNA resolution.

Every catalog is a fixed tuple. Resolution picks ``seed % len(catalog)``,
so reordering or resizing any catalog changes the look of every site
already generated from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class Palette:
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    text_on_primary: str


@dataclass(frozen=True)
class FontPair:
    heading: str
    body: str


def _palette(
    primary: str,
    secondary: str,
    accent: str,
    background: str,
    text: str,
    text_on_primary: str = "#ffffff",
) -> Palette:
    return Palette(
        primary=primary,
        secondary=secondary,
        accent=accent,
        background=background,
        text=text,
        text_on_primary=text_on_primary,
    )


COLOR_PALETTES: Tuple[Palette, ...] = (
    # Blues
    _palette("#2563eb", "#1e40af", "#f59e0b", "#eff6ff", "#1e293b"),
    _palette("#0ea5e9", "#0284c7", "#f97316", "#f0f9ff", "#0f172a"),
    _palette("#3b82f6", "#2563eb", "#eab308", "#dbeafe", "#1e293b"),
    # Greens
    _palette("#16a34a", "#15803d", "#f59e0b", "#f0fdf4", "#14532d"),
    _palette("#22c55e", "#16a34a", "#ef4444", "#dcfce7", "#166534"),
    _palette("#10b981", "#059669", "#8b5cf6", "#ecfdf5", "#064e3b"),
    # Purples
    _palette("#8b5cf6", "#7c3aed", "#f59e0b", "#f5f3ff", "#4c1d95"),
    _palette("#a855f7", "#9333ea", "#22c55e", "#faf5ff", "#581c87"),
    _palette("#6366f1", "#4f46e5", "#f97316", "#eef2ff", "#3730a3"),
    # Oranges
    _palette("#f97316", "#ea580c", "#3b82f6", "#fff7ed", "#7c2d12"),
    _palette("#fb923c", "#f97316", "#8b5cf6", "#ffedd5", "#9a3412", "#1e293b"),
    _palette("#f59e0b", "#d97706", "#2563eb", "#fffbeb", "#78350f", "#1e293b"),
    # Reds
    _palette("#ef4444", "#dc2626", "#22c55e", "#fef2f2", "#7f1d1d"),
    _palette("#f43f5e", "#e11d48", "#3b82f6", "#fff1f2", "#881337"),
    # Teals
    _palette("#14b8a6", "#0d9488", "#f59e0b", "#f0fdfa", "#134e4a"),
    _palette("#06b6d4", "#0891b2", "#f97316", "#ecfeff", "#164e63"),
    # Pinks
    _palette("#ec4899", "#db2777", "#22c55e", "#fdf2f8", "#831843"),
    _palette("#d946ef", "#c026d3", "#f59e0b", "#fdf4ff", "#701a75"),
    # Cyans
    _palette("#22d3ee", "#06b6d4", "#f43f5e", "#cffafe", "#155e75", "#1e293b"),
    # Indigos
    _palette("#4f46e5", "#4338ca", "#f59e0b", "#e0e7ff", "#312e81"),
    # Slates (professional)
    _palette("#475569", "#334155", "#3b82f6", "#f8fafc", "#0f172a"),
    _palette("#64748b", "#475569", "#22c55e", "#f1f5f9", "#1e293b"),
    # Warm combinations
    _palette("#dc2626", "#b91c1c", "#fbbf24", "#fef9f9", "#450a0a"),
    _palette("#ea580c", "#c2410c", "#84cc16", "#fffaf5", "#431407"),
    # Cool combinations
    _palette("#0369a1", "#075985", "#fbbf24", "#f0f9ff", "#0c4a6e"),
    _palette("#0891b2", "#0e7490", "#f97316", "#ecfeff", "#155e75"),
    # Nature inspired
    _palette("#65a30d", "#4d7c0f", "#f59e0b", "#f7fee7", "#365314"),
    _palette("#059669", "#047857", "#ec4899", "#ecfdf5", "#064e3b"),
    # Light and saturated variations
    _palette("#7c3aed", "#6d28d9", "#10b981", "#f5f3ff", "#4c1d95"),
    _palette("#2dd4bf", "#14b8a6", "#f43f5e", "#f0fdfa", "#115e59", "#1e293b"),
    _palette("#818cf8", "#6366f1", "#fbbf24", "#eef2ff", "#3730a3"),
    _palette("#34d399", "#10b981", "#8b5cf6", "#d1fae5", "#065f46", "#1e293b"),
    _palette("#fbbf24", "#f59e0b", "#6366f1", "#fefce8", "#713f12", "#1e293b"),
    _palette("#38bdf8", "#0ea5e9", "#f43f5e", "#e0f2fe", "#0c4a6e", "#1e293b"),
    _palette("#c084fc", "#a855f7", "#22c55e", "#faf5ff", "#6b21a8"),
    _palette("#fb7185", "#f43f5e", "#14b8a6", "#fff1f2", "#9f1239"),
    _palette("#a3e635", "#84cc16", "#8b5cf6", "#f7fee7", "#3f6212", "#1e293b"),
    _palette("#facc15", "#eab308", "#7c3aed", "#fefce8", "#854d0e", "#1e293b"),
    _palette("#4ade80", "#22c55e", "#f43f5e", "#dcfce7", "#166534", "#1e293b"),
    _palette("#60a5fa", "#3b82f6", "#f97316", "#dbeafe", "#1e40af"),
    # Deep tones
    _palette("#0d9488", "#0f766e", "#fbbf24", "#ccfbf1", "#134e4a"),
    _palette("#7e22ce", "#6b21a8", "#22c55e", "#f3e8ff", "#581c87"),
    _palette("#be123c", "#9f1239", "#fbbf24", "#ffe4e6", "#881337"),
    _palette("#15803d", "#166534", "#f97316", "#bbf7d0", "#14532d"),
    _palette("#1d4ed8", "#1e40af", "#fbbf24", "#bfdbfe", "#1e3a8a"),
    _palette("#b45309", "#92400e", "#3b82f6", "#fef3c7", "#78350f"),
    _palette("#0f766e", "#115e59", "#f43f5e", "#99f6e4", "#134e4a"),
    _palette("#9333ea", "#7e22ce", "#f59e0b", "#e9d5ff", "#6b21a8"),
    _palette("#dc2626", "#b91c1c", "#14b8a6", "#fecaca", "#7f1d1d"),
    _palette("#ca8a04", "#a16207", "#8b5cf6", "#fef08a", "#713f12", "#1e293b"),
)

FONT_PAIRS: Tuple[FontPair, ...] = (
    FontPair("Inter", "Inter"),
    FontPair("Poppins", "Open Sans"),
    FontPair("Montserrat", "Lato"),
    FontPair("Playfair Display", "Source Sans Pro"),
    FontPair("Raleway", "Roboto"),
    FontPair("Oswald", "Merriweather"),
    FontPair("Nunito", "Nunito Sans"),
    FontPair("DM Sans", "DM Sans"),
    FontPair("Work Sans", "Work Sans"),
    FontPair("Rubik", "Karla"),
    FontPair("Quicksand", "Quicksand"),
    FontPair("Josefin Sans", "Lora"),
    FontPair("Cabin", "Cabin"),
    FontPair("Mulish", "Mulish"),
    FontPair("Barlow", "Barlow"),
    FontPair("Manrope", "Manrope"),
    FontPair("Outfit", "Outfit"),
    FontPair("Plus Jakarta Sans", "Plus Jakarta Sans"),
    FontPair("Sora", "Sora"),
    FontPair("Urbanist", "Urbanist"),
    FontPair("Figtree", "Figtree"),
    FontPair("Lexend", "Lexend"),
    FontPair("Be Vietnam Pro", "Be Vietnam Pro"),
    FontPair("Red Hat Display", "Red Hat Text"),
    FontPair("Space Grotesk", "Space Grotesk"),
    FontPair("Albert Sans", "Albert Sans"),
    FontPair("Epilogue", "Epilogue"),
    FontPair("General Sans", "General Sans"),
    FontPair("Satoshi", "Satoshi"),
    FontPair("Clash Display", "Clash Grotesk"),
)

# Basic mode layout choices
HERO_STYLES: Tuple[str, ...] = ("centered", "left-aligned", "split")
CARD_STYLES: Tuple[str, ...] = ("rounded", "sharp", "minimal")
CTA_STYLES: Tuple[str, ...] = ("pill", "square", "rounded")

# Advanced mode structural axes
HERO_VARIANTS: Tuple[str, ...] = (
    "centered", "split-left", "split-right", "diagonal",
    "wave", "gradient-mesh", "card-overlay", "minimal",
)
CARD_LAYOUTS: Tuple[str, ...] = (
    "grid-3", "grid-2", "grid-4", "masonry",
    "carousel", "accordion", "list", "alternating",
)
NAV_STYLES: Tuple[str, ...] = ("standard", "centered-logo", "minimal", "transparent", "dark", "floating")
FOOTER_STYLES: Tuple[str, ...] = ("mega", "simple", "minimal", "centered", "dark", "gradient")
SPACING_SCALES: Tuple[str, ...] = ("compact", "balanced", "generous", "dramatic")
ANIMATION_STYLES: Tuple[str, ...] = ("none", "subtle", "moderate", "playful")
BORDER_RADII: Tuple[str, ...] = ("none", "small", "medium", "large", "full")
SHADOW_STYLES: Tuple[str, ...] = ("none", "subtle", "medium", "strong", "colored")
BACKGROUND_PATTERNS: Tuple[str, ...] = ("none", "dots", "grid", "waves", "gradient-mesh", "noise")
CTA_PLACEMENTS: Tuple[str, ...] = ("inline", "floating", "sidebar", "bottom-bar", "modal-trigger")
TYPOGRAPHY_SCALES: Tuple[str, ...] = ("compact", "standard", "large", "dramatic")
IMAGE_STYLES: Tuple[str, ...] = ("rounded", "sharp", "circular", "masked", "shadowed")
BUTTON_STYLES: Tuple[str, ...] = ("solid", "outline", "ghost", "gradient", "3d", "glow")

ADVANCED_LAYOUT_OPTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "hero_variant": HERO_VARIANTS,
    "card_layout": CARD_LAYOUTS,
    "nav_style": NAV_STYLES,
    "footer_style": FOOTER_STYLES,
    "spacing_scale": SPACING_SCALES,
    "animation_style": ANIMATION_STYLES,
    "border_radius": BORDER_RADII,
    "shadow_style": SHADOW_STYLES,
    "background_pattern": BACKGROUND_PATTERNS,
    "cta_placement": CTA_PLACEMENTS,
    "typography_scale": TYPOGRAPHY_SCALES,
    "image_style": IMAGE_STYLES,
    "button_style": BUTTON_STYLES,
})

PAGE_SECTIONS: Tuple[str, ...] = ("howItWorks", "features", "programs", "states", "cities", "cta")

SECTION_ORDER_VARIATIONS: Tuple[Tuple[str, ...], ...] = (
    ("howItWorks", "features", "programs", "states", "cities", "cta"),
    ("features", "howItWorks", "programs", "cities", "states", "cta"),
    ("programs", "features", "howItWorks", "states", "cta", "cities"),
    ("howItWorks", "programs", "features", "cta", "states", "cities"),
    ("features", "programs", "howItWorks", "cities", "cta", "states"),
    ("programs", "howItWorks", "features", "states", "cities", "cta"),
    ("cta", "features", "howItWorks", "programs", "states", "cities"),
    ("features", "cta", "howItWorks", "programs", "cities", "states"),
)

# CSS value tables for advanced mode tokens
BORDER_RADIUS_VALUES: Mapping[str, str] = MappingProxyType({
    "none": "0",
    "small": "4px",
    "medium": "8px",
    "large": "16px",
    "full": "9999px",
})

SPACING_SCALE_VALUES: Mapping[str, str] = MappingProxyType({
    "compact": "0.75",
    "balanced": "1",
    "generous": "1.25",
    "dramatic": "1.5",
})

TYPOGRAPHY_SCALE_VALUES: Mapping[str, str] = MappingProxyType({
    "compact": "0.9",
    "standard": "1",
    "large": "1.1",
    "dramatic": "1.25",
})

# "colored" is built from the primary color at render time.
SHADOW_VALUES: Mapping[str, str] = MappingProxyType({
    "none": "none",
    "subtle": "0 1px 3px rgba(0,0,0,0.1)",
    "medium": "0 4px 6px rgba(0,0,0,0.1)",
    "strong": "0 10px 25px rgba(0,0,0,0.15)",
})

# Class key (as the templates read it), prefix and axis per visually classed element.
LAYOUT_CLASS_PREFIXES: Tuple[Tuple[str, str, str], ...] = (
    ("heroClass", "hero", "hero_variant"),
    ("cardContainerClass", "cards", "card_layout"),
    ("navClass", "nav", "nav_style"),
    ("footerClass", "footer", "footer_style"),
    ("animationClass", "animate", "animation_style"),
    ("backgroundClass", "bg-pattern", "background_pattern"),
    ("buttonClass", "btn", "button_style"),
    ("imageClass", "img", "image_style"),
    ("ctaClass", "cta", "cta_placement"),
)
