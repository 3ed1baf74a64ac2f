"""Domain value objects"""

from domain.value_objects.option import Option

__all__ = [
    "Option",
]
