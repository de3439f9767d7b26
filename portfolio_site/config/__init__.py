"""Load the portfolio ``config.yml`` into immutable, typed dataclasses.

The schema is a structural mirror of the document: unknown keys are ignored,
missing keys take empty defaults, and only shape mismatches (a scalar where a
sequence belongs, a mapping where text belongs) are rejected. The entry points
are :func:`load_config` for files and :func:`decode_config` for raw bytes.

Examples
--------
>>> from pathlib import Path
>>> from portfolio_site.config import load_config
>>> config = load_config(Path("config.yml"))  # doctest: +SKIP
>>> config.header.title  # doctest: +SKIP
('Hi, I am', 'a backend engineer')
"""

from .loader import decode_config, load_config
from .models import (
    CallToAction,
    Config,
    Expertise,
    ExpertiseCategory,
    Footer,
    Header,
    LicenseInfo,
    ProjectItem,
    Projects,
    ServiceItem,
    Services,
    SiteInfo,
    SocialLinks,
)

__all__ = [
    "CallToAction",
    "Config",
    "Expertise",
    "ExpertiseCategory",
    "Footer",
    "Header",
    "LicenseInfo",
    "ProjectItem",
    "Projects",
    "ServiceItem",
    "Services",
    "SiteInfo",
    "SocialLinks",
    "decode_config",
    "load_config",
]
