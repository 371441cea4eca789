#!/usr/bin/env python3
"""
Site configuration loader.

Reads the per-site record written at deploy time (data/site_config.json)
and exposes accessors for it. The site's DesignDNA is resolved once per
provider and reused.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

import requests

from config import get_site_config_path, setup_logging
from design_dna import (
    DesignDNA,
    DesignOverride,
    DesignStyle,
    generate_design_dna,
    merge_design_override,
)

logger = setup_logging("site_config")

OVERRIDE_TIMEOUT = 30


class SiteConfigError(Exception):
    """Raised when a site config or design override cannot be read."""


@dataclass
class SiteConfig:
    """Per-site settings embedded at build time."""
    domain: str = "example.com"
    site_name: str = "Free Phone Service"
    keyword: str = "Free Government Phone"
    keyword_id: str = "free-government-phone"
    keyword_label: str = "Free Government Phone"
    owner_email: str = "admin@example.com"
    design_style: DesignStyle = DesignStyle.BASIC
    design_dna: Optional[DesignOverride] = None
    content: Dict[str, Any] = field(default_factory=dict)
    environment: str = "staging"
    created_at: str = ""
    version: str = "1.0.0"

    def __post_init__(self):
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc).isoformat()

    @property
    def site_url(self) -> str:
        return f"https://{self.domain}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SiteConfig":
        """Build from the embedded record; empty or missing fields use defaults.

        Keys may be camelCase (as written by the deploy tooling) or snake_case.
        """
        defaults = cls()

        def pick(snake: str, camel: str) -> str:
            value = data.get(camel, data.get(snake))
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                if value is not None:
                    logger.warning("Ignoring non-text %s value %r", camel, value)
                return getattr(defaults, snake)
            value = str(value).strip()
            return value if value else getattr(defaults, snake)

        raw_style = data.get("designStyle", data.get("design_style"))
        try:
            design_style = DesignStyle.parse(raw_style) if raw_style else defaults.design_style
        except ValueError:
            logger.warning("Unknown design style %r, falling back to basic", raw_style)
            design_style = DesignStyle.BASIC

        raw_override = data.get("designDNA", data.get("design_dna"))
        design_dna = None
        if isinstance(raw_override, dict):
            override = DesignOverride.from_dict(raw_override)
            design_dna = None if override.is_empty() else override

        environment = pick("environment", "environment")
        if environment not in ("staging", "production"):
            logger.warning("Unknown environment %r, using staging", environment)
            environment = "staging"

        content = data.get("content")

        return cls(
            domain=pick("domain", "domain"),
            site_name=pick("site_name", "siteName"),
            keyword=pick("keyword", "keyword"),
            keyword_id=pick("keyword_id", "keywordId"),
            keyword_label=pick("keyword_label", "keywordLabel"),
            owner_email=pick("owner_email", "ownerEmail"),
            design_style=design_style,
            design_dna=design_dna,
            content=content if isinstance(content, dict) else {},
            environment=environment,
            created_at=pick("created_at", "createdAt"),
            version=pick("version", "version"),
        )


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SiteConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise SiteConfigError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise SiteConfigError(f"Expected a JSON object in {path}")
    return data


def load_site_config(path: Optional[Union[str, Path]] = None) -> SiteConfig:
    """Load the site record, or defaults when no record has been written."""
    path = Path(path) if path else get_site_config_path()
    if not path.exists():
        logger.debug("No site config at %s, using defaults", path)
        return SiteConfig()
    return SiteConfig.from_dict(_read_json(path))


def load_override(source: str, session: Optional[requests.Session] = None) -> DesignOverride:
    """Load a partial design from a JSON file or an http(s) URL."""
    if source.startswith(("http://", "https://")):
        session = session or requests.Session()
        try:
            response = session.get(source, timeout=OVERRIDE_TIMEOUT)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise SiteConfigError(f"Failed to fetch design override from {source}: {e}") from e
        except ValueError as e:
            raise SiteConfigError(f"Invalid JSON from {source}: {e}") from e
        if not isinstance(data, dict):
            raise SiteConfigError(f"Expected a JSON object from {source}")
    else:
        data = _read_json(Path(source))

    return DesignOverride.from_dict(data)


class DesignDNAProvider:
    """Resolves a site's DesignDNA on first use and keeps the result."""

    def __init__(self, config: Optional[SiteConfig] = None, config_path: Optional[Path] = None):
        self._initial_config = config
        self._config = config
        self._config_path = config_path
        self._dna: Optional[DesignDNA] = None

    @property
    def config(self) -> SiteConfig:
        if self._config is None:
            self._config = load_site_config(self._config_path)
        return self._config

    def get(self) -> DesignDNA:
        if self._dna is None:
            config = self.config
            dna = generate_design_dna(config.domain, config.keyword, config.design_style)
            self._dna = merge_design_override(dna, config.design_dna)
        return self._dna

    def reset(self) -> None:
        """Drop the cached DNA; a config read from disk is re-read too."""
        self._config = self._initial_config
        self._dna = None


_default_provider = DesignDNAProvider()


def get_site_config() -> SiteConfig:
    return _default_provider.config


def get_design_dna() -> DesignDNA:
    """The configured site's DNA, with its custom colors/fonts applied."""
    return _default_provider.get()


def get_design_style() -> DesignStyle:
    return get_site_config().design_style


def get_site_name() -> str:
    return get_site_config().site_name


def get_keyword() -> str:
    return get_site_config().keyword


def get_keyword_id() -> str:
    return get_site_config().keyword_id


def get_keyword_label() -> str:
    return get_site_config().keyword_label


def get_domain() -> str:
    return get_site_config().domain


def get_site_url() -> str:
    return get_site_config().site_url


def get_owner_email() -> str:
    return get_site_config().owner_email


def reset_site_config() -> None:
    _default_provider.reset()
