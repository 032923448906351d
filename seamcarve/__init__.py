"""
Content-aware image resizing by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .errors import SeamCarvingError, InvalidTarget, ImageDecodeError, ImageEncodeError
from .energy import gradient_magnitude_energy, to_grayscale
from .seam import cumulative_energy, backtrack_seam, dp_seam, remove_seam, transpose_image
from .carving import carve_image, resize
from .io import load_image, save_image
from .visualize import overlay_seam, SeamRecorder

__all__ = [
    'SeamCarvingError',
    'InvalidTarget',
    'ImageDecodeError',
    'ImageEncodeError',
    'gradient_magnitude_energy',
    'to_grayscale',
    'cumulative_energy',
    'backtrack_seam',
    'dp_seam',
    'remove_seam',
    'transpose_image',
    'carve_image',
    'resize',
    'load_image',
    'save_image',
    'overlay_seam',
    'SeamRecorder',
]
