from .arrayset import Arrayset, ElementType

__all__ = [
    'Arrayset',
    'ElementType',
]
