"""ABOUTME: Tabular export of defensive profiles for every type combination.
ABOUTME: Builds a Polars DataFrame of all 171 combinations and writes it as Parquet or CSV."""

import logging
from pathlib import Path
from typing import Any

import polars as pl

from dexcore.matchups.engine import classify, compute_profile, generate_all_type_combinations
from dexcore.utils.type_chart import TYPES, ElementType

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".parquet", ".csv")


def _profile_row(type1: ElementType, type2: ElementType | None) -> dict[str, Any]:
    """Build one table row for a defending combination."""
    defending = [type1] if type2 is None else [type1, type2]
    profile = compute_profile(defending)
    matchups = classify(profile)

    row: dict[str, Any] = {
        "type1": type1.value,
        "type2": type2.value if type2 is not None else None,
    }
    for atk_type in TYPES:
        row[atk_type.value] = profile[atk_type]
    row["weakness_count"] = len(matchups.weaknesses)
    row["resistance_count"] = len(matchups.resistances)
    row["immunity_count"] = len(matchups.immunities)
    return row


def build_profile_frame() -> pl.DataFrame:
    """Build the defensive chart table.

    Returns:
        DataFrame with one row per defending combination (18 single types
        first, then 153 pairs), a Float64 column per attacking type, and
        weakness/resistance/immunity counts.
    """
    rows = [_profile_row(type1, type2) for type1, type2 in generate_all_type_combinations()]

    schema: dict[str, Any] = {"type1": pl.String, "type2": pl.String}
    schema.update({atk_type.value: pl.Float64 for atk_type in TYPES})
    schema.update({"weakness_count": pl.Int64, "resistance_count": pl.Int64, "immunity_count": pl.Int64})

    return pl.DataFrame(rows, schema=schema)


def write_profile_table(output_path: Path) -> Path:
    """Write the defensive chart table to `output_path`.

    The format follows the file extension (.parquet or .csv). Parent
    directories are created as needed.

    Args:
        output_path: Destination file.

    Returns:
        The path that was written.

    Raises:
        ValueError: If the extension is not supported.
    """
    suffix = output_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported output format '{suffix}'. Use one of: {', '.join(SUPPORTED_SUFFIXES)}")

    df = build_profile_frame()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".parquet":
        df.write_parquet(output_path)
    else:
        df.write_csv(output_path)

    logger.info("Wrote %d type combinations to %s", df.height, output_path)
    return output_path
