"""Immutable settings snapshot and the enumerations it draws from."""

from __future__ import annotations

from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from asselect.constants import DEFAULT_MAX_LEVEL, MAX_LEVEL_LIMIT

# ─────────────────────────── enumerations ────────────────────────────────────


class AirType(str, Enum):
    """Airspace classification used to tag remappable airspace."""

    CLASS_A = "ClassA"
    CLASS_B = "ClassB"
    CLASS_C = "ClassC"
    CLASS_D = "ClassD"
    CLASS_E = "ClassE"
    CLASS_F = "ClassF"
    CLASS_G = "ClassG"
    DANGER = "Danger"
    CTA = "Cta"
    CTR = "Ctr"
    GLIDING = "Gliding"
    MATZ = "Matz"
    OTHER = "Other"
    PROHIBITED = "Prohibited"
    RESTRICTED = "Restricted"
    RMZ = "Rmz"
    TMZ = "Tmz"


class Format(str, Enum):
    """Output mode for the generated airspace file."""

    OPENAIR = "OpenAir"
    RAT_ONLY = "RatOnly"
    COMPETITION = "Competition"


class Overlay(str, Enum):
    """Optional altitude-layer overlay."""

    FL195 = "FL195"
    FL105 = "FL105"
    ATZ_DZ = "AtzDz"


class Group(str, Enum):
    """The three independently toggled sets of named airspace items."""

    LOA = "loa"  # Letters of Agreement
    RAT = "rat"  # Restricted Area (Temporary)
    WAVE = "wave"  # Glider wave boxes


# ─────────────────────────── token classifiers ───────────────────────────────

# Only these tokens are valid as a remap target from a form control. The other
# AirType members cannot be selected through a generic Set action.
_AIRTYPE_TOKENS: Final[dict[str, AirType]] = {
    "classd": AirType.CLASS_D,
    "classf": AirType.CLASS_F,
    "classg": AirType.CLASS_G,
    "ctr": AirType.CTR,
    "danger": AirType.DANGER,
    "restricted": AirType.RESTRICTED,
    "gsec": AirType.GLIDING,
}

_OVERLAY_TOKENS: Final[dict[str, Overlay]] = {
    "fl195": Overlay.FL195,
    "fl105": Overlay.FL105,
    "atzdz": Overlay.ATZ_DZ,
}

_FORMAT_TOKENS: Final[dict[str, Format]] = {
    "ratonly": Format.RAT_ONLY,
    "competition": Format.COMPETITION,
}


def parse_airtype(token: str) -> AirType | None:
    """Classify a form token as a default remap target.

    Args:
        token: Raw value from a UI control

    Returns:
        The matching AirType, or None for any unrecognised token
    """
    return _AIRTYPE_TOKENS.get(token)


def parse_overlay(token: str) -> Overlay | None:
    """Map an overlay token to an Overlay, None if unrecognised."""
    return _OVERLAY_TOKENS.get(token)


def parse_format(token: str) -> Format:
    """Map a format token to a Format, falling back to OpenAir."""
    return _FORMAT_TOKENS.get(token, Format.OPENAIR)


# ─────────────────────────── settings snapshot ───────────────────────────────


class Settings(BaseModel):
    """Complete airspace-export configuration.

    Instances are frozen: every change produces a new snapshot. The default
    instance is fully valid, so ``Settings()`` is the application start state.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Airspace type mappings
    atz: AirType = Field(AirType.CTR, description="Mapping for ATZ airspace")
    ils: AirType | None = Field(None, description="Mapping for ILS feathers")
    unlicensed: AirType | None = Field(None, description="Mapping for unlicensed airfields")
    microlight: AirType | None = Field(None, description="Mapping for microlight sites")
    gliding: AirType | None = Field(None, description="Mapping for gliding sites")
    hirta_gvs: AirType | None = Field(None, description="Mapping for HIRTA/GVS areas")
    obstacle: AirType | None = Field(None, description="Mapping for obstacles")

    # General options
    home: str | None = Field(None, description="Home site excluded from gliding sites")
    max_level: int = Field(
        DEFAULT_MAX_LEVEL, ge=0, le=MAX_LEVEL_LIMIT, description="Altitude ceiling"
    )
    radio: bool = Field(False, description="Include radio frequency annotations")
    format: Format = Format.OPENAIR
    overlay: Overlay | None = None

    # Named item selections; absent in snapshots saved by older releases
    loa: frozenset[str] = Field(default_factory=frozenset)
    rat: frozenset[str] = Field(default_factory=frozenset)
    wave: frozenset[str] = Field(default_factory=frozenset)

    @field_serializer("loa", "rat", "wave")
    def serialize_names(self, names: frozenset[str]) -> list[str]:
        return sorted(names)

    def members(self, group: Group) -> frozenset[str]:
        """Return the selected names for one of the toggle groups."""
        return getattr(self, group.value)

    def with_changes(self, **changes: Any) -> Settings:
        """Return a validated copy with the given fields replaced.

        Raises:
            pydantic.ValidationError: If a replacement value is invalid
        """
        return type(self)(**{**dict(self), **changes})
