"""
Image file I/O.

Images are exchanged with the engine as channels-first uint8 tensors
(3, H, W). Pillow does the decoding/encoding and NumPy bridges to torch.
"""

from pathlib import Path
from typing import Union

import numpy as np
import torch
from PIL import Image

from .errors import ImageDecodeError, ImageEncodeError

PathLike = Union[str, Path]


def load_image(path: PathLike) -> torch.Tensor:
    """Load an image file as an RGB uint8 tensor (3, H, W)."""
    try:
        with Image.open(path) as img:
            img_array = np.array(img.convert('RGB'), dtype=np.uint8)
    except FileNotFoundError as ex:
        raise ImageDecodeError(f"Input not found: {path}") from ex
    except (OSError, ValueError) as ex:
        raise ImageDecodeError(f"Failed to decode image '{path}': {ex}") from ex

    return torch.from_numpy(img_array).permute(2, 0, 1).contiguous()


def to_pil_image(image: torch.Tensor) -> Image.Image:
    """
    Convert an image tensor to a Pillow image.

    Float tensors are assumed to be in [0, 1]; integer tensors in [0, 255].

    Args:
        image: Image tensor (3, H, W), (1, H, W) or (H, W)

    Returns:
        RGB or L mode PIL image
    """
    tensor = image.detach().cpu()
    if tensor.dim() == 3 and tensor.shape[0] == 1:
        tensor = tensor[0]
    if tensor.dim() == 3 and tensor.shape[0] != 3:
        raise ValueError(f"Unsupported image shape: {tuple(image.shape)}")
    if tensor.dim() not in (2, 3):
        raise ValueError(f"Unsupported image shape: {tuple(image.shape)}")

    if tensor.is_floating_point():
        tensor = (tensor * 255.0).round()
    tensor = tensor.clamp(0, 255).to(torch.uint8)

    if tensor.dim() == 3:
        tensor = tensor.permute(1, 2, 0)
    return Image.fromarray(tensor.contiguous().numpy())


def save_image(image: torch.Tensor, path: PathLike):
    """Save an image tensor; the format follows the file extension."""
    path = Path(path)
    try:
        img = to_pil_image(image)
        path.parent.mkdir(parents=True, exist_ok=True)
        img.save(path)
    except (OSError, ValueError, KeyError) as ex:
        raise ImageEncodeError(f"Failed to save image '{path}': {ex}") from ex
