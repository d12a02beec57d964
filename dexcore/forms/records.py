"""ABOUTME: Raw form records as delivered by the upstream creature database.
ABOUTME: Validates payload rows with pydantic and picks the localized full name by language."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PositiveInt, field_validator

LOCALIZED_NAMES_KEY = "pokemon_v2_pokemonformnames"
LANGUAGE_KEYS = ("pokemon_v2_language", "language")


class RawFormRecord(BaseModel):
    """One form row from upstream, before any naming heuristics are applied."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pokemon_id: PositiveInt = Field(validation_alias=AliasChoices("pokemon_id", "id"))
    internal_name: str = Field(validation_alias=AliasChoices("internal_name", "name"))
    localized_full_name: str | None = None
    is_default_form: bool = Field(default=False, validation_alias=AliasChoices("is_default_form", "is_default"))
    is_mega_form: bool = Field(default=False, validation_alias=AliasChoices("is_mega_form", "is_mega"))

    @field_validator("internal_name")
    @classmethod
    def _require_internal_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("internal_name must be a non-empty slug")
        return value

    @field_validator("localized_full_name")
    @classmethod
    def _blank_name_is_missing(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], language: str = "en") -> "RawFormRecord":
        """Build a record from one upstream GraphQL form row.

        Args:
            payload: Row with `pokemon_id` (or `id`), `name`, `is_default`,
                `is_mega` and an optional nested list of localized names.
            language: Language code whose `pokemon_name` becomes the
                localized full name.

        Returns:
            Validated RawFormRecord.

        Raises:
            pydantic.ValidationError: If required fields are missing or invalid.
        """
        data = {key: value for key, value in payload.items() if key != LOCALIZED_NAMES_KEY}
        data["localized_full_name"] = _pick_localized_name(payload.get(LOCALIZED_NAMES_KEY), language)
        return cls.model_validate(data)


def _pick_localized_name(entries: Any, language: str) -> str | None:
    """Return the `pokemon_name` of the entry in `language`, if any."""
    if not isinstance(entries, list):
        return None

    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        for key in LANGUAGE_KEYS:
            lang = entry.get(key)
            if isinstance(lang, Mapping) and lang.get("name") == language:
                name = entry.get("pokemon_name")
                return name if isinstance(name, str) else None
    return None


def load_form_records(path: Path, language: str = "en") -> list[RawFormRecord]:
    """Load raw form records from a JSON file.

    The file holds either a list of form rows or an object with a "forms" list.

    Args:
        path: Path to the JSON file.
        language: Language code used to pick localized names.

    Returns:
        List of records in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file content is not a list of form row objects.
    """
    if not path.exists():
        raise FileNotFoundError(f"Form records file not found: {path}")

    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = raw.get("forms")
    if not isinstance(raw, list):
        raise ValueError(f"Expected a list of form rows in {path}")
    if not all(isinstance(row, Mapping) for row in raw):
        raise ValueError(f"Expected form row objects in {path}")

    return [RawFormRecord.from_payload(row, language=language) for row in raw]
