"""Domain services"""

from domain.services.type_coercion import coerce

__all__ = [
    "coerce",
]
