#!/usr/bin/env python3
"""
Design Generator - Resolves a site's design DNA and its CSS artifacts.
Uses the configured site by default, or any domain/keyword given on the
command line, with optional custom colors/fonts layered on top.
"""

from __future__ import annotations

import argparse
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from config import ENV_FILE, get_design_output_path, setup_logging
from design_dna import (
    DesignDNA,
    DesignOverride,
    DesignStyle,
    font_pair_index,
    generate_design_dna,
    merge_design_override,
    palette_index,
)
from design_tokens import (
    build_style_block,
    calculate_unique_combinations,
    generate_css_variables,
    get_advanced_layout_classes,
    get_background_pattern_css,
    get_google_fonts_url,
)
from site_config import SiteConfigError, get_site_config, load_override

logger = setup_logging("generate_design")


class DesignGenerator:
    """Builds design DNA plus everything the page templates need from it."""

    def __init__(self, override: Optional[DesignOverride] = None):
        self.override = override

    def generate(
        self,
        domain: str,
        keyword: str = "",
        design_style: Any = DesignStyle.BASIC,
    ) -> DesignDNA:
        """Resolve the DNA for a domain and apply any custom colors/fonts."""
        dna = generate_design_dna(domain, keyword, design_style)
        return merge_design_override(dna, self.override)

    def build_report(self, dna: DesignDNA) -> Dict[str, Any]:
        """Bundle the DNA with its derived CSS artifacts."""
        background_css = ""
        if dna.advanced_layout is not None:
            background_css = get_background_pattern_css(
                dna.advanced_layout.background_pattern,
                dna.colors.primary,
            )

        return {
            "design": dna.to_dict(),
            "css_variables": generate_css_variables(dna),
            "style_block": build_style_block(dna),
            "fonts_url": get_google_fonts_url(dna),
            "layout_classes": get_advanced_layout_classes(dna),
            "background_css": background_css,
            "unique_combinations": calculate_unique_combinations(dna.design_style),
            "generated_at": datetime.now(timezone.utc).isoformat(),
        }

    def save(self, report: Dict[str, Any], filepath: Path):
        """Save a design report to a JSON file."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
        logger.info("Saved design report to %s", filepath)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a deterministic site design")
    parser.add_argument(
        "--domain",
        help="Domain to resolve (default: configured site)",
    )
    parser.add_argument(
        "--keyword",
        default=None,
        help="Target keyword (default: configured keyword, or empty with --domain)",
    )
    parser.add_argument(
        "--mode",
        choices=[style.value for style in DesignStyle],
        default=None,
        help="Design mode (default: configured mode, or basic with --domain)",
    )
    parser.add_argument(
        "--override",
        help="JSON file or URL with custom colors/fonts",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help=f"Write the report to this path (e.g. {get_design_output_path()})",
    )
    parser.add_argument(
        "--print-css",
        action="store_true",
        help="Print the :root style block instead of the JSON report",
    )
    parser.add_argument(
        "--combinations",
        action="store_true",
        help="Print the number of unique designs for the mode and exit",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    from dotenv import load_dotenv
    load_dotenv(ENV_FILE)

    args = parse_args(argv)

    try:
        if args.domain is None:
            site = get_site_config()
            domain = site.domain
            keyword = args.keyword if args.keyword is not None else site.keyword
            mode = DesignStyle.parse(args.mode) if args.mode else site.design_style
            override = site.design_dna
        else:
            domain = args.domain
            keyword = args.keyword or ""
            mode = DesignStyle.parse(args.mode or DesignStyle.BASIC)
            override = None

        if args.override:
            override = load_override(args.override)
    except SiteConfigError as e:
        logger.error("Failed to load design configuration: %s", e)
        return 1

    if args.combinations:
        print(calculate_unique_combinations(mode))
        return 0

    generator = DesignGenerator(override=override)
    dna = generator.generate(domain, keyword, mode)
    report = generator.build_report(dna)

    logger.info(
        "Resolved %s design for %s: palette #%d, fonts #%d %s / %s, primary %s, %s combinations",
        mode.value,
        domain,
        palette_index(domain, keyword),
        font_pair_index(domain),
        dna.fonts.heading,
        dna.fonts.body,
        dna.colors.primary,
        f"{report['unique_combinations']:,}",
    )

    if args.output:
        generator.save(report, args.output)

    if args.print_css:
        print(report["style_block"])
    elif not args.output:
        print(json.dumps(report, indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
