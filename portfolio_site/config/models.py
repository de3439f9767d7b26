"""Typed dataclasses mirroring the portfolio ``config.yml`` document."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class SiteInfo:
    """Page metadata shared by every rendered page."""

    title: str = ""
    description: str = ""
    author: str = ""
    email: str = ""
    build: str = ""
    rel_path: str = ""


@dc.dataclass(frozen=True, slots=True)
class SocialLinks:
    """Profile URLs; any of them may be empty."""

    github: str = ""
    linkedin: str = ""
    twitter: str = ""


@dc.dataclass(frozen=True, slots=True)
class CallToAction:
    """Button shown beneath the header copy."""

    label: str = ""
    url: str = ""
    icon: str = ""


@dc.dataclass(frozen=True, slots=True)
class Header:
    """Header title lines, blurb, and call-to-action buttons."""

    title: tuple[str, ...] = ()
    description: str = ""
    cta: tuple[CallToAction, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ServiceItem:
    """A single offered service."""

    title: str = ""
    description: str = ""
    icon: str = ""


@dc.dataclass(frozen=True, slots=True)
class Services:
    """Services section."""

    title: str = ""
    items: tuple[ServiceItem, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ProjectItem:
    """Project card with its tag list."""

    title: str = ""
    url: str = ""
    description: str = ""
    tags: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Projects:
    """Projects section plus a link to the full profile."""

    title: str = ""
    profile_link: str = ""
    items: tuple[ProjectItem, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ExpertiseCategory:
    """Skill group rendered as a single card."""

    title: str = ""
    icon: str = ""
    skills: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Expertise:
    """Expertise section."""

    title: str = ""
    categories: tuple[ExpertiseCategory, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class LicenseInfo:
    """Content license notice shown in the footer."""

    text: str = ""
    url: str = ""
    license_type: str = ""
    license_url: str = ""


@dc.dataclass(frozen=True, slots=True)
class Footer:
    """Footer copy."""

    copyright: str = ""
    license: LicenseInfo = dc.field(default_factory=LicenseInfo)


@dc.dataclass(frozen=True, slots=True)
class Config:
    """Root of the decoded document; one instance per generation run."""

    site: SiteInfo = dc.field(default_factory=SiteInfo)
    social: SocialLinks = dc.field(default_factory=SocialLinks)
    header: Header = dc.field(default_factory=Header)
    services: Services = dc.field(default_factory=Services)
    projects: Projects = dc.field(default_factory=Projects)
    expertise: Expertise = dc.field(default_factory=Expertise)
    footer: Footer = dc.field(default_factory=Footer)


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
]
