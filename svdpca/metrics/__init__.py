from .subspace_alignment import (
    principal_angles,
    subspace_distance,
    alignment_score,
    component_correlation,
    sign_align,
)
from .reconstruction import reconstruction_error, relative_reconstruction_error
from .variance import explained_variance_ratio, cumulative_explained_variance, output_variance

__all__ = [
    'principal_angles',
    'subspace_distance',
    'alignment_score',
    'component_correlation',
    'sign_align',
    'reconstruction_error',
    'relative_reconstruction_error',
    'explained_variance_ratio',
    'cumulative_explained_variance',
    'output_variance',
]
