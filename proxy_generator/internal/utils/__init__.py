"""Утилиты для генератора"""

from .text import (
    camel,
    pascal,
    kebab,
    dir_path,
    interpolate,
)

__all__ = [
    "camel",
    "pascal",
    "kebab",
    "dir_path",
    "interpolate",
]
