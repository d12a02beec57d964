# ABOUTME: Utils package for dexcore helper functions.
# ABOUTME: Contains the static type chart and slug normalization helpers.

from dexcore.utils.normalize import (
    base_species_name,
    capitalize_word,
    split_slug,
    title_case_slug,
)
from dexcore.utils.type_chart import (
    DEFAULT_TYPE_COLOR,
    TYPE_CHART,
    TYPE_COLORS,
    TYPES,
    ElementType,
    parse_element_type,
    parse_element_types,
)

__all__ = [
    "DEFAULT_TYPE_COLOR",
    "TYPES",
    "TYPE_CHART",
    "TYPE_COLORS",
    "ElementType",
    "base_species_name",
    "capitalize_word",
    "parse_element_type",
    "parse_element_types",
    "split_slug",
    "title_case_slug",
]
