from .base import LinearTrainerBase
from .svd_pca import SVDPCATrainer

__all__ = [
    'LinearTrainerBase',
    'SVDPCATrainer',
]
