"""
Seam visualization: overlay seams on images and record carving as a GIF.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import torch
from PIL import Image

from .errors import ImageEncodeError
from .io import to_pil_image
from .seam import transpose_image

logger = logging.getLogger(__name__)


def overlay_seam(image: torch.Tensor, seam: torch.Tensor,
                 color: Tuple[int, int, int] = (255, 0, 0)) -> torch.Tensor:
    """
    Paint a vertical seam onto a copy of an image.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices (H,)
        color: 8-bit RGB color; grayscale images are painted white

    Returns:
        Image with the seam pixels painted
    """
    img_vis = image.clone()
    rows = torch.arange(seam.shape[0], device=image.device)
    cols = seam.to(image.device)
    scale = 1.0 if image.is_floating_point() else 255.0

    if img_vis.dim() == 3 and img_vis.shape[0] == 3:
        value = torch.tensor(color, dtype=torch.float64) / 255.0 * scale
        img_vis[:, rows, cols] = value.to(img_vis.dtype).unsqueeze(1)
    else:
        img_vis[..., rows, cols] = scale

    return img_vis


class SeamRecorder:
    """
    Collects one frame per removed seam, for use as a carving callback.

    Every frame shows the current image with the seam about to be removed,
    in the original orientation, pasted onto a canvas the size of the first
    frame.
    """

    def __init__(self, color: Tuple[int, int, int] = (255, 0, 0)):
        self.color = color
        self.frames: List[Image.Image] = []
        self._canvas_size: Optional[Tuple[int, int]] = None

    def __call__(self, step: int, image: torch.Tensor, seam: torch.Tensor,
                 direction: str):
        frame = overlay_seam(image, seam, self.color)
        if direction == 'horizontal':
            frame = transpose_image(frame)

        pil_frame = to_pil_image(frame).convert('RGB')
        if self._canvas_size is None:
            self._canvas_size = pil_frame.size

        canvas = Image.new('RGB', self._canvas_size)
        canvas.paste(pil_frame, (0, 0))
        self.frames.append(canvas)

    def save_gif(self, path: Union[str, Path], fps: int = 5):
        """Write the recorded frames as an animated GIF."""
        if not self.frames:
            raise ImageEncodeError("No frames were recorded")
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")

        duration = int(1000 / fps)
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self.frames[0].save(
                path,
                save_all=True,
                append_images=self.frames[1:],
                duration=duration,
                loop=0,
                optimize=False,
            )
        except (OSError, ValueError, KeyError) as ex:
            raise ImageEncodeError(f"Failed to save GIF '{path}': {ex}") from ex

        logger.info("Saved %d frames to %s", len(self.frames), path)
