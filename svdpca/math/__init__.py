from .svd import svd, svd_values

__all__ = [
    'svd',
    'svd_values',
]
