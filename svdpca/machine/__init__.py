from .linear import LinearMachine

__all__ = [
    'LinearMachine',
]
