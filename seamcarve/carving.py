"""
High-level carving functions that drive the energy -> seam -> removal loop.
"""

import logging
import operator
from typing import Callable, Optional

import torch

from .energy import gradient_magnitude_energy
from .errors import InvalidTarget
from .seam import dp_seam, remove_seam, transpose_image

logger = logging.getLogger(__name__)

# callback(step, image, seam, direction), called before each seam is removed
SeamCallback = Callable[[int, torch.Tensor, torch.Tensor, str], None]

_DIMENSIONS = {'vertical': 'width', 'horizontal': 'height'}


def _check_image(image: torch.Tensor):
    if not isinstance(image, torch.Tensor):
        raise TypeError(f"Expected a torch.Tensor, got {type(image).__name__}")
    if image.dim() not in (2, 3):
        raise ValueError(f"Unsupported image shape: {tuple(image.shape)}")
    H, W = image.shape[-2:]
    if H < 1 or W < 1:
        raise ValueError(f"Image must be non-empty, got shape {tuple(image.shape)}")


def _check_target(dimension: str, target, size: int) -> int:
    """Return `target` as an int, or raise InvalidTarget if it is not in [1, size]."""
    if isinstance(target, bool):
        raise InvalidTarget(dimension, target, size)
    try:
        value = operator.index(target)
    except TypeError as ex:
        raise InvalidTarget(dimension, target, size) from ex
    if value < 1 or value > size:
        raise InvalidTarget(dimension, target, size)
    return value


def _carve_width(image: torch.Tensor, target_width: int, direction: str,
                 callback: Optional[SeamCallback] = None) -> torch.Tensor:
    """Remove vertical seams until the image is `target_width` wide."""
    carved = image
    step = 0

    while carved.shape[-1] > target_width:
        energy = gradient_magnitude_energy(carved)
        seam = dp_seam(energy)
        if callback is not None:
            callback(step, carved, seam, direction)
        carved = remove_seam(carved, seam)
        step += 1
        logger.debug("%s seam %d removed, width now %d", direction, step, carved.shape[-1])

    return carved


def carve_image(image: torch.Tensor, n_seams: int, direction: str = 'vertical',
                callback: Optional[SeamCallback] = None) -> torch.Tensor:
    """
    Remove `n_seams` seams along one axis.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        n_seams: Number of seams to remove
        direction: 'vertical' (narrows the image) or 'horizontal' (shortens it)
        callback: Optional hook called as callback(step, image, seam, direction)
                  before each seam is removed. For 'horizontal', image and seam
                  are in the transposed frame. Raising from it aborts carving.

    Returns:
        Carved image
    """
    if direction not in _DIMENSIONS:
        raise ValueError(f"Invalid direction: {direction}")
    _check_image(image)

    if direction == 'horizontal':
        image = transpose_image(image)

    size = image.shape[-1]
    try:
        count = -1 if isinstance(n_seams, bool) else operator.index(n_seams)
    except TypeError:
        count = -1
    if count < 0:
        raise ValueError(f"n_seams must be a non-negative integer, got {n_seams!r}")
    _check_target(_DIMENSIONS[direction], size - count, size)

    carved = _carve_width(image, size - count, direction, callback)

    if direction == 'horizontal':
        carved = transpose_image(carved)
    return carved


def resize(image: torch.Tensor, target_width: int, target_height: int,
           callback: Optional[SeamCallback] = None) -> torch.Tensor:
    """
    Content-aware resize by seam removal (shrink only).

    Width is reduced first with vertical seams. The image is then
    transposed so the same vertical-seam loop reduces the height, and
    transposed back.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        target_width: Output width, 1 <= target_width <= W
        target_height: Output height, 1 <= target_height <= H
        callback: Optional per-seam hook, see `carve_image`

    Returns:
        Image tensor with spatial size (target_height, target_width)

    Raises:
        InvalidTarget: if either target is not an integer in [1, current size]
    """
    _check_image(image)
    H, W = image.shape[-2:]
    target_width = _check_target('width', target_width, W)
    target_height = _check_target('height', target_height, H)

    logger.info("Resizing %dx%d -> %dx%d (%d vertical, %d horizontal seams)",
                W, H, target_width, target_height,
                W - target_width, H - target_height)

    carved = _carve_width(image, target_width, 'vertical', callback)

    carved = transpose_image(carved)
    carved = _carve_width(carved, target_height, 'horizontal', callback)
    return transpose_image(carved)
