"""ABOUTME: Forms package for resolving species form records.
ABOUTME: Exposes RawFormRecord input, FormDescriptor output and the resolver functions."""

from dexcore.forms.dataclasses import FormDescriptor, FormKind
from dexcore.forms.records import RawFormRecord, load_form_records
from dexcore.forms.resolver import (
    DEFAULT_LABEL,
    LABEL_HEURISTICS,
    classify_form,
    find_default_form_issue,
    resolve,
    resolve_all,
    resolve_label,
)

__all__ = [
    "DEFAULT_LABEL",
    "LABEL_HEURISTICS",
    "FormDescriptor",
    "FormKind",
    "RawFormRecord",
    "classify_form",
    "find_default_form_issue",
    "load_form_records",
    "resolve",
    "resolve_all",
    "resolve_label",
]
