"""
Site type and damage status registries.

Presentation metadata (labels, marker colours, severity) keyed by the tag
values used in site records. Unknown tags resolve to a generic fallback so a
new tag never breaks display.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class StatusConfig:
    id: str
    label: str
    severity: int
    marker_color: str
    description: str = ""


@dataclass(frozen=True)
class SiteTypeConfig:
    id: str
    label: str
    description: str = ""
    aliases: tuple = field(default_factory=tuple)


STATUS_REGISTRY: Dict[str, StatusConfig] = {
    "destroyed": StatusConfig(
        id="destroyed",
        label="Destroyed",
        severity=100,
        marker_color="red",
        description="Completely destroyed, no structural integrity remaining",
    ),
    "heavily-damaged": StatusConfig(
        id="heavily-damaged",
        label="Heavily Damaged",
        severity=75,
        marker_color="orange",
        description="Major structural damage, may not be repairable",
    ),
    "damaged": StatusConfig(
        id="damaged",
        label="Damaged",
        severity=50,
        marker_color="yellow",
        description="Partial damage, repairable with restoration work",
    ),
}

SITE_TYPE_REGISTRY: Dict[str, SiteTypeConfig] = {
    "mosque": SiteTypeConfig(
        id="mosque",
        label="Mosque",
        description="Islamic place of worship",
    ),
    "church": SiteTypeConfig(
        id="church",
        label="Church",
        description="Christian place of worship",
    ),
    "archaeological": SiteTypeConfig(
        id="archaeological",
        label="Archaeological Site",
        description="Ancient ruins and historical excavation sites",
        aliases=("archaeological_site", "ruin", "ruins"),
    ),
    "museum": SiteTypeConfig(
        id="museum",
        label="Museum",
        description="Cultural institution housing artifacts",
    ),
    "historic-building": SiteTypeConfig(
        id="historic-building",
        label="Historic Building",
        description="Architecturally or historically significant structure",
        aliases=("historic_building", "monument"),
    ),
}


# =============================================================================
# Statuses
# =============================================================================

def register_status(config: StatusConfig) -> None:
    """Register (or replace) a damage status."""
    STATUS_REGISTRY[config.id] = config


def get_statuses() -> List[StatusConfig]:
    """All registered statuses, most severe first."""
    return sorted(STATUS_REGISTRY.values(), key=lambda c: c.severity, reverse=True)


def get_status_config(status_id: str) -> StatusConfig:
    """Status configuration, or a grey severity-0 fallback for unknown ids."""
    config = STATUS_REGISTRY.get(status_id)
    if config is not None:
        return config
    return StatusConfig(
        id=status_id,
        label=status_id,
        severity=0,
        marker_color="grey",
        description="Unknown status",
    )


def get_status_label(status_id: str) -> str:
    return get_status_config(status_id).label


def get_marker_color(status_id: str) -> str:
    return get_status_config(status_id).marker_color


def is_status_registered(status_id: str) -> bool:
    return status_id in STATUS_REGISTRY


# =============================================================================
# Site types
# =============================================================================

def register_site_type(config: SiteTypeConfig) -> None:
    """Register (or replace) a site type."""
    SITE_TYPE_REGISTRY[config.id] = config


def get_site_types() -> List[SiteTypeConfig]:
    return list(SITE_TYPE_REGISTRY.values())


def normalize_site_type(site_type: str | None) -> str:
    """Map a raw type tag (or one of its aliases) to a registered type id.

    Unregistered tags are returned lowercased with spaces as hyphens.
    """
    if not site_type:
        return "unknown"

    cleaned = site_type.lower().strip().replace(" ", "-")
    if cleaned in SITE_TYPE_REGISTRY:
        return cleaned

    underscored = cleaned.replace("-", "_")
    for config in SITE_TYPE_REGISTRY.values():
        if underscored in config.aliases:
            return config.id

    return cleaned


def get_site_type_config(type_id: str) -> SiteTypeConfig:
    """Site type configuration, or a generic fallback for unknown ids."""
    config = SITE_TYPE_REGISTRY.get(type_id)
    if config is not None:
        return config
    return SiteTypeConfig(id=type_id, label=type_id, description="Unknown site type")


def get_site_type_label(type_id: str) -> str:
    return get_site_type_config(type_id).label


def is_site_type_registered(type_id: str) -> bool:
    return type_id in SITE_TYPE_REGISTRY
