#!/usr/bin/env python3
"""Tests for CSS artifacts derived from design DNA."""

import dataclasses
from unittest.mock import patch

import pytest


@pytest.fixture
def basic_dna():
    from design_dna import generate_design_dna

    return generate_design_dna("example.com", "free government phone", "basic")


@pytest.fixture
def advanced_dna():
    from design_dna import generate_design_dna

    return generate_design_dna("example.com", "free government phone", "advanced")


class TestCSSVariables:

    def test_basic_block_has_colors_gradients_fonts(self, basic_dna):
        from design_tokens import generate_css_variables

        css = generate_css_variables(basic_dna)
        lines = css.splitlines()

        assert "--color-primary: #16a34a;" in lines
        assert "--color-primary-light: rgba(22, 163, 74, 0.1);" in lines
        assert "--color-text-on-primary: #ffffff;" in lines
        assert f"--gradient-hero: {basic_dna.gradients.hero};" in lines
        assert "--font-heading: 'Montserrat', sans-serif;" in lines
        assert "--font-body: 'Lato', sans-serif;" in lines
        assert len(lines) == 12
        assert "--border-radius" not in css
        assert "--shadow" not in css

    def test_advanced_block_adds_scale_tokens(self, advanced_dna):
        from design_tokens import generate_css_variables

        lines = generate_css_variables(advanced_dna).splitlines()

        assert "--border-radius: 16px;" in lines
        assert "--spacing-scale: 1;" in lines
        assert "--typography-scale: 1;" in lines
        assert "--shadow: 0 4px 6px rgba(0,0,0,0.1);" in lines
        assert len(lines) == 16

    def test_colored_shadow_uses_primary(self, advanced_dna):
        from design_tokens import generate_css_variables

        dna = dataclasses.replace(
            advanced_dna,
            advanced_layout=dataclasses.replace(advanced_dna.advanced_layout, shadow_style="colored"),
        )
        assert "--shadow: 0 10px 25px #16a34a30;" in generate_css_variables(dna).splitlines()

    def test_unknown_table_key_falls_back(self, advanced_dna):
        import design_tokens

        dna = dataclasses.replace(
            advanced_dna,
            advanced_layout=dataclasses.replace(
                advanced_dna.advanced_layout, border_radius="huge", shadow_style="glow"
            ),
        )
        with patch.object(design_tokens.logger, "warning") as warning:
            lines = design_tokens.generate_css_variables(dna).splitlines()

        assert "--border-radius: 0;" in lines
        assert "--shadow: none;" in lines
        assert warning.call_count == 2

    def test_override_colors_flow_into_css(self, basic_dna):
        from design_dna import DesignOverride, merge_design_override
        from design_tokens import generate_css_variables

        merged = merge_design_override(basic_dna, DesignOverride(colors={"primary": "#ff8000"}))
        css = generate_css_variables(merged)

        assert "--color-primary-light: rgba(255, 128, 0, 0.1);" in css
        assert "#16a34a" not in css

    def test_style_block_wraps_root_rule(self, basic_dna):
        from design_tokens import build_style_block

        block = build_style_block(basic_dna)

        assert block.startswith(":root {\n  --color-primary: #16a34a;")
        assert block.endswith("\n}")


class TestLightColor:

    def test_long_hex(self):
        from design_tokens import light_color

        assert light_color("#2563eb") == "rgba(37, 99, 235, 0.1)"

    def test_short_hex(self):
        from design_tokens import light_color

        assert light_color("#fff") == "rgba(255, 255, 255, 0.1)"

    def test_invalid_color_degrades(self):
        import design_tokens

        with patch.object(design_tokens.logger, "warning") as warning:
            assert design_tokens.light_color("tomato") == "rgba(0, 0, 0, 0.1)"
        warning.assert_called_once()


class TestGoogleFontsURL:

    def test_two_fonts(self, basic_dna):
        from design_tokens import get_google_fonts_url

        assert get_google_fonts_url(basic_dna) == (
            "https://fonts.googleapis.com/css2?"
            "family=Montserrat:wght@400;500;600;700&"
            "family=Lato:wght@400;500;600;700&display=swap"
        )

    def test_same_font_requested_once(self, basic_dna):
        from design_catalog import FontPair
        from design_tokens import get_google_fonts_url

        dna = dataclasses.replace(basic_dna, fonts=FontPair("Plus Jakarta Sans", "Plus Jakarta Sans"))

        assert get_google_fonts_url(dna) == (
            "https://fonts.googleapis.com/css2?"
            "family=Plus+Jakarta+Sans:wght@400;500;600;700&display=swap"
        )


class TestLayoutClasses:

    def test_basic_mode_has_no_classes(self, basic_dna):
        from design_tokens import get_advanced_layout_classes

        assert get_advanced_layout_classes(basic_dna) == {}

    def test_advanced_classes(self, advanced_dna):
        from design_tokens import get_advanced_layout_classes

        assert get_advanced_layout_classes(advanced_dna) == {
            "heroClass": "hero-centered",
            "cardContainerClass": "cards-carousel",
            "navClass": "nav-floating",
            "footerClass": "footer-centered",
            "animationClass": "animate-subtle",
            "backgroundClass": "bg-pattern-dots",
            "buttonClass": "btn-outline",
            "imageClass": "img-rounded",
            "ctaClass": "cta-sidebar",
        }


class TestBackgroundPattern:

    def test_dots(self):
        from design_tokens import get_background_pattern_css

        assert get_background_pattern_css("dots", "#2563eb") == (
            "background-image: radial-gradient(#2563eb20 1px, transparent 1px); "
            "background-size: 20px 20px;"
        )

    def test_grid_uses_two_linear_gradients(self):
        from design_tokens import get_background_pattern_css

        css = get_background_pattern_css("grid", "#2563eb")

        assert css.count("linear-gradient(") == 2
        assert "90deg" in css
        assert "background-size: 40px 40px;" in css

    def test_waves_encodes_color_into_svg(self):
        from design_tokens import get_background_pattern_css

        css = get_background_pattern_css("waves", "#2563eb")

        assert css.startswith('background-image: url("data:image/svg+xml,')
        assert "fill='%232563eb'" in css
        assert "#2563eb" not in css

    def test_gradient_mesh(self):
        from design_tokens import get_background_pattern_css

        css = get_background_pattern_css("gradient-mesh", "#2563eb")

        assert css.startswith("background: radial-gradient(at 40% 20%, #2563eb30")
        assert css.count("radial-gradient(") == 3

    def test_noise_is_low_opacity_turbulence(self):
        from design_tokens import get_background_pattern_css

        css = get_background_pattern_css("noise", "#2563eb")

        assert "feTurbulence" in css
        assert css.endswith("opacity: 0.05;")

    def test_none_and_unknown_are_empty(self):
        import design_tokens

        with patch.object(design_tokens.logger, "warning") as warning:
            assert design_tokens.get_background_pattern_css("none", "#2563eb") == ""
            warning.assert_not_called()
            assert design_tokens.get_background_pattern_css("stripes", "#2563eb") == ""
            warning.assert_called_once()


class TestCombinations:

    def test_basic_count(self):
        from design_tokens import calculate_unique_combinations

        assert calculate_unique_combinations("basic") == 121_500

    def test_advanced_count(self):
        from design_dna import DesignStyle
        from design_tokens import calculate_unique_combinations

        expected = 50 * 30 * 8 * 8 * 6 * 6 * 4 * 4 * 5 * 5 * 6 * 5 * 4 * 5 * 6 * 8
        assert calculate_unique_combinations(DesignStyle.ADVANCED) == expected
        assert expected == 39_813_120_000_000

    def test_catalog_sizes(self):
        from design_catalog import ADVANCED_LAYOUT_OPTIONS, COLOR_PALETTES, FONT_PAIRS, SECTION_ORDER_VARIATIONS

        assert len(COLOR_PALETTES) == 50
        assert len(FONT_PAIRS) == 30
        assert len(ADVANCED_LAYOUT_OPTIONS) == 13
        assert len(SECTION_ORDER_VARIATIONS) == 8
        assert all(len(options) >= 1 for options in ADVANCED_LAYOUT_OPTIONS.values())

    def test_section_orders_are_permutations(self):
        from design_catalog import PAGE_SECTIONS, SECTION_ORDER_VARIATIONS

        for order in SECTION_ORDER_VARIATIONS:
            assert sorted(order) == sorted(PAGE_SECTIONS)

    def test_palettes_are_complete(self):
        from design_catalog import COLOR_PALETTES
        from design_tokens import hex_to_rgb

        for palette in COLOR_PALETTES:
            for value in dataclasses.astuple(palette):
                assert len(hex_to_rgb(value)) == 3
