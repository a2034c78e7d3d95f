"""Shared helpers for turning decoded values into display text."""

from __future__ import annotations

from typing import Iterable

from .config import FLOAT_PRECISION
from .models import MatrixRow, Number


def format_scalar(value: Number, is_float: bool) -> str:
    """Format ``value`` with fixed decimals for floats, exactly for integers."""

    if is_float:
        return f"{value:.{FLOAT_PRECISION}f}"
    return str(int(value))


def format_vector(values: Iterable[Number], is_float: bool) -> str:
    return "[" + ", ".join(format_scalar(value, is_float) for value in values) + "]"


def format_matrix(rows: Iterable[MatrixRow], is_float: bool) -> str:
    return ", ".join(format_vector(row.values, is_float) for row in rows)
