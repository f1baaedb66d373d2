# backend/movie_fill/text/__init__.py

from .transformers import (
    build_crew_line,
    build_features,
    parse_released_to_iso,
    summarize_plot,
)

__all__ = [
    "build_crew_line",
    "build_features",
    "parse_released_to_iso",
    "summarize_plot",
]
