"""
Configuration
=============
Global constants shared by the decoding pipeline and the presentation layer.

Exports:
    PAGE_SIZE (int): Maximum number of children materialized under one node.
    SELECTION_LIMIT (int): Maximum number of vertices and of primitives
        forwarded to a viewport per selection.
    FLOAT_PRECISION (int): Decimal places used when labelling float values.
    LOG_LEVEL (int): Default logging level, from ``GLTF_INSPECTOR_LOG_LEVEL``.
"""
import logging
import os


def get_log_level(default: int = logging.WARNING) -> int:
    """
    Read the default log level from the environment.

    Accepts a level name (``DEBUG``) or a number (``10``); anything else
    falls back to ``default``.
    """
    raw = os.environ.get("GLTF_INSPECTOR_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


# Global Constants
PAGE_SIZE: int = 100
SELECTION_LIMIT: int = 10
FLOAT_PRECISION: int = 5
LOG_LEVEL: int = get_log_level()
