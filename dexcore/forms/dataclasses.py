"""ABOUTME: Data classes for resolved species forms.
ABOUTME: Contains FormKind and the display-ready FormDescriptor."""

from dataclasses import dataclass
from enum import Enum


class FormKind(str, Enum):
    """Coarse classification of a species form."""

    DEFAULT = "default"
    MEGA = "mega"
    REGIONAL = "regional"
    GIGANTAMAX = "gigantamax"
    OTHER = "other"


@dataclass(frozen=True)
class FormDescriptor:
    """A species form ready for a form-selection control.

    Attributes:
        pokemon_id: Upstream id of the form's pokemon entry.
        internal_name: Upstream slug (e.g., "raichu-alola").
        display_label: Human-readable label (e.g., "Alola Form").
        is_default: Copied from the record; marks the pre-selected entry.
        is_mega: Copied from the record; marks entries that get a mega icon.
        kind: Classification derived from the flags and the slug.
    """

    pokemon_id: int
    internal_name: str
    display_label: str
    is_default: bool
    is_mega: bool
    kind: FormKind = FormKind.OTHER
