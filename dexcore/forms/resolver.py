# ABOUTME: Resolves raw form records into canonical display labels and form kinds.
# ABOUTME: Labels come from an ordered list of naming heuristics, with a suffixed slug fallback.

import logging
from collections.abc import Callable, Iterable, Sequence

from dexcore.forms.dataclasses import FormDescriptor, FormKind
from dexcore.forms.records import RawFormRecord
from dexcore.utils.normalize import base_species_name, split_slug, title_case_slug

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "Normal"
FORM_SUFFIX = " Form"
MEGA_PREFIX = "Mega"
GIGANTAMAX_LABEL = "Gigantamax"

MEGA_TOKEN_PREFIX = "mega"
GMAX_TOKEN = "gmax"
REGIONAL_TOKENS = frozenset({"alola", "galar", "hisui", "paldea"})

LabelHeuristic = Callable[[RawFormRecord], str | None]


def _label_from_localized_name(record: RawFormRecord) -> str | None:
    """Use the localized full name unless it just echoes the base species name."""
    name = record.localized_full_name
    if not name or not name.strip():
        return None
    if name.lower() == base_species_name(record.internal_name).lower():
        return None
    return name


def _single_mega_prefix(label: str) -> str:
    """Make `label` start with exactly one "Mega" word ("Mega Mega X" -> "Mega X")."""
    words = label.split()
    while words and words[0].lower() == MEGA_TOKEN_PREFIX:
        words.pop(0)
    return " ".join([MEGA_PREFIX, *words])


def _label_from_slug(record: RawFormRecord) -> str | None:
    """Build a label from the form token after the first dash of the slug."""
    _, token = split_slug(record.internal_name)
    if token is None:
        return None

    candidate = title_case_slug(token)
    if not candidate:
        return None

    lowered = token.lower()
    if lowered in REGIONAL_TOKENS:
        return candidate + FORM_SUFFIX
    if lowered.startswith(MEGA_TOKEN_PREFIX):
        return _single_mega_prefix(candidate)
    if lowered == GMAX_TOKEN:
        return GIGANTAMAX_LABEL
    return candidate


def _label_with_form_suffix(record: RawFormRecord) -> str | None:
    """Title-cased slug part plus " Form", without any special cases."""
    if record.is_default_form:
        return None

    base, token = split_slug(record.internal_name)
    words = title_case_slug(token if token is not None else base)
    if not words:
        return None
    return words + FORM_SUFFIX


# Evaluated in order; the first non-empty result wins. Reorder here to change naming priority.
LABEL_HEURISTICS: tuple[LabelHeuristic, ...] = (
    _label_from_localized_name,
    _label_from_slug,
)


def resolve_label(record: RawFormRecord) -> str:
    """Return the display label for a record.

    The first non-empty result of LABEL_HEURISTICS is the label. A non-default
    form left at "Normal" (or with no label at all) is renamed from its slug
    with a " Form" suffix, ignoring the regional, mega and gmax rules.

    Args:
        record: Raw form record.

    Returns:
        Display label, "Normal" if nothing better applies.
    """
    label: str | None = None
    for heuristic in LABEL_HEURISTICS:
        label = heuristic(record)
        if label:
            break

    if not record.is_default_form and label in (None, DEFAULT_LABEL):
        fallback = _label_with_form_suffix(record)
        if fallback:
            logger.debug("Label for %s derived from slug: %r", record.internal_name, fallback)
            return fallback

    return label or DEFAULT_LABEL


def classify_form(record: RawFormRecord) -> FormKind:
    """Classify a record as default, mega, gigantamax, regional or other.

    The default flag wins, then the mega flag. Otherwise the slug's form
    token decides; a token ending in "-gmax" or containing a regional word
    (e.g., "galar-zen") is classified as well.
    """
    if record.is_default_form:
        return FormKind.DEFAULT

    _, token = split_slug(record.internal_name)
    lowered = (token or "").lower()
    words = lowered.split("-")

    if record.is_mega_form or lowered.startswith(MEGA_TOKEN_PREFIX):
        return FormKind.MEGA
    if words[-1] == GMAX_TOKEN:
        return FormKind.GIGANTAMAX
    if REGIONAL_TOKENS.intersection(words):
        return FormKind.REGIONAL
    return FormKind.OTHER


def resolve(record: RawFormRecord) -> FormDescriptor:
    """Turn one raw form record into a FormDescriptor.

    Args:
        record: Raw form record.

    Returns:
        FormDescriptor with the resolved label and kind. `is_default` and
        `is_mega` are copied from the record unchanged.

    Raises:
        ValueError: If the record has an empty internal name.
    """
    if not record.internal_name or not record.internal_name.strip():
        raise ValueError(f"Form record for pokemon {record.pokemon_id} has an empty internal name")

    return FormDescriptor(
        pokemon_id=record.pokemon_id,
        internal_name=record.internal_name,
        display_label=resolve_label(record),
        is_default=record.is_default_form,
        is_mega=record.is_mega_form,
        kind=classify_form(record),
    )


def resolve_all(records: Iterable[RawFormRecord]) -> list[FormDescriptor]:
    """Resolve every record, one descriptor per record, in input order."""
    return [resolve(record) for record in records]


def find_default_form_issue(descriptors: Sequence[FormDescriptor]) -> str | None:
    """Describe an ambiguous default-form set, if there is one.

    A species' form list should carry exactly one default form. This only
    reports the problem; nothing is corrected.

    Args:
        descriptors: Resolved forms of one species.

    Returns:
        Human-readable problem description, or None when the set is fine or empty.
    """
    if not descriptors:
        return None

    defaults = [d.internal_name for d in descriptors if d.is_default]
    if not defaults:
        names = ", ".join(d.internal_name for d in descriptors)
        return f"No default form among {len(descriptors)} forms: {names}"
    if len(defaults) > 1:
        return f"Multiple default forms: {', '.join(defaults)}"
    return None
