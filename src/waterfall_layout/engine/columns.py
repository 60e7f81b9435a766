"""
Module: engine.columns

Purpose:
    Responsive column-count selection. Hosts that want the number of
    columns to follow the available width (rather than a fixed count)
    ask this module before answering the engine's column_count query.

Key Functions:
    - choose_columns(): Largest column count whose columns stay wide enough
    - columns_for_policy(): Same, driven by a ColumnPolicy

Used By:
    - gui.waterfall_view: Column counts from the viewport width
"""

from __future__ import annotations

import math

from .config import ColumnPolicy


def choose_columns(
    *,
    container_width: float,
    min_column_width: float,
    spacing: float,
    max_columns: int = 12,
) -> int:
    """
    Choose a column count for a container.

    Policy:
    - columns >= 1
    - each column should be at least min_column_width
    - account for spacing between columns
    - clamp to max_columns

    Args:
        container_width: Width available for the columns
        min_column_width: Narrowest acceptable column
        spacing: Gap between adjacent columns
        max_columns: Upper bound

    Returns:
        Column count in [1, max_columns]

    Raises:
        ValueError: If any argument is out of range

    Example:
        >>> choose_columns(container_width=500, min_column_width=100, spacing=20)
        4
    """
    if not math.isfinite(container_width) or container_width <= 0:
        raise ValueError("container_width must be > 0")
    if min_column_width <= 0:
        raise ValueError("min_column_width must be > 0")
    if spacing < 0:
        raise ValueError("spacing must be >= 0")
    if max_columns <= 0:
        raise ValueError("max_columns must be > 0")

    # Largest n such that n*min + (n-1)*spacing <= width
    # => n <= (width+spacing)/(min+spacing)
    n = math.floor((container_width + spacing) / (min_column_width + spacing))
    return int(max(1, min(max_columns, n)))


def columns_for_policy(container_width: float, policy: ColumnPolicy) -> int:
    """
    Column count for a width under a ColumnPolicy.

    A non-positive width (e.g. a view that has not been shown yet)
    yields a single column instead of raising.
    """
    if not math.isfinite(container_width) or container_width <= 0:
        return 1
    return choose_columns(
        container_width=container_width,
        min_column_width=policy.min_column_width,
        spacing=policy.spacing,
        max_columns=policy.max_columns,
    )
