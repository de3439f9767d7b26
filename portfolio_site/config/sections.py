"""Per-section builders turning raw YAML mappings into schema records."""

from __future__ import annotations

import typing as typ

from .helpers import _mapping, _records, _text, _text_list
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

Payload = typ.Mapping[str, typ.Any]


def _build_config(payload: Payload) -> Config:
    """Build the root configuration from the top-level document mapping."""
    return Config(
        site=_build_site_info(_mapping(payload.get("site"), "site"), "site"),
        social=_build_social_links(
            _mapping(payload.get("social"), "social"), "social"
        ),
        header=_build_header(_mapping(payload.get("header"), "header"), "header"),
        services=_build_services(
            _mapping(payload.get("services"), "services"), "services"
        ),
        projects=_build_projects(
            _mapping(payload.get("projects"), "projects"), "projects"
        ),
        expertise=_build_expertise(
            _mapping(payload.get("expertise"), "expertise"), "expertise"
        ),
        footer=_build_footer(_mapping(payload.get("footer"), "footer"), "footer"),
    )


def _build_site_info(payload: Payload, path: str) -> SiteInfo:
    return SiteInfo(
        title=_text(payload.get("title"), f"{path}.title"),
        description=_text(payload.get("description"), f"{path}.description"),
        author=_text(payload.get("author"), f"{path}.author"),
        email=_text(payload.get("email"), f"{path}.email"),
        build=_text(payload.get("build"), f"{path}.build"),
        rel_path=_text(payload.get("rel_path"), f"{path}.rel_path"),
    )


def _build_social_links(payload: Payload, path: str) -> SocialLinks:
    return SocialLinks(
        github=_text(payload.get("github"), f"{path}.github"),
        linkedin=_text(payload.get("linkedin"), f"{path}.linkedin"),
        twitter=_text(payload.get("twitter"), f"{path}.twitter"),
    )


def _build_header(payload: Payload, path: str) -> Header:
    """Build the header; title lines and CTAs keep document order."""
    return Header(
        title=_text_list(payload.get("title"), f"{path}.title"),
        description=_text(payload.get("description"), f"{path}.description"),
        cta=_records(payload.get("cta"), f"{path}.cta", _build_cta),
    )


def _build_cta(payload: Payload, path: str) -> CallToAction:
    return CallToAction(
        label=_text(payload.get("label"), f"{path}.label"),
        url=_text(payload.get("url"), f"{path}.url"),
        icon=_text(payload.get("icon"), f"{path}.icon"),
    )


def _build_services(payload: Payload, path: str) -> Services:
    return Services(
        title=_text(payload.get("title"), f"{path}.title"),
        items=_records(payload.get("items"), f"{path}.items", _build_service_item),
    )


def _build_service_item(payload: Payload, path: str) -> ServiceItem:
    return ServiceItem(
        title=_text(payload.get("title"), f"{path}.title"),
        description=_text(payload.get("description"), f"{path}.description"),
        icon=_text(payload.get("icon"), f"{path}.icon"),
    )


def _build_projects(payload: Payload, path: str) -> Projects:
    return Projects(
        title=_text(payload.get("title"), f"{path}.title"),
        profile_link=_text(payload.get("profile_link"), f"{path}.profile_link"),
        items=_records(payload.get("items"), f"{path}.items", _build_project_item),
    )


def _build_project_item(payload: Payload, path: str) -> ProjectItem:
    return ProjectItem(
        title=_text(payload.get("title"), f"{path}.title"),
        url=_text(payload.get("url"), f"{path}.url"),
        description=_text(payload.get("description"), f"{path}.description"),
        tags=_text_list(payload.get("tags"), f"{path}.tags"),
    )


def _build_expertise(payload: Payload, path: str) -> Expertise:
    return Expertise(
        title=_text(payload.get("title"), f"{path}.title"),
        categories=_records(
            payload.get("categories"), f"{path}.categories", _build_category
        ),
    )


def _build_category(payload: Payload, path: str) -> ExpertiseCategory:
    return ExpertiseCategory(
        title=_text(payload.get("title"), f"{path}.title"),
        icon=_text(payload.get("icon"), f"{path}.icon"),
        skills=_text_list(payload.get("skills"), f"{path}.skills"),
    )


def _build_footer(payload: Payload, path: str) -> Footer:
    license_path = f"{path}.license"
    return Footer(
        copyright=_text(payload.get("copyright"), f"{path}.copyright"),
        license=_build_license(
            _mapping(payload.get("license"), license_path), license_path
        ),
    )


def _build_license(payload: Payload, path: str) -> LicenseInfo:
    return LicenseInfo(
        text=_text(payload.get("text"), f"{path}.text"),
        url=_text(payload.get("url"), f"{path}.url"),
        license_type=_text(payload.get("license_type"), f"{path}.license_type"),
        license_url=_text(payload.get("license_url"), f"{path}.license_url"),
    )


__all__ = ["_build_config"]
