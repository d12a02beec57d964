"""ABOUTME: Build module for tabular exports.
ABOUTME: Turns the defensive type chart into a Polars table on disk."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dexcore.build.chart_table import (
        build_profile_frame as build_profile_frame,
    )
    from dexcore.build.chart_table import (
        write_profile_table as write_profile_table,
    )


def __getattr__(name: str) -> object:
    """Lazy-import chart table functions to avoid loading Polars at import time."""
    if name in ("build_profile_frame", "write_profile_table"):
        from dexcore.build.chart_table import (  # noqa: PLC0415
            build_profile_frame,
            write_profile_table,
        )

        return build_profile_frame if name == "build_profile_frame" else write_profile_table
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["build_profile_frame", "write_profile_table"]
