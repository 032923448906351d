"""
Energy function for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the L2 magnitude of finite-difference gradients of the luma
channel: central differences in the interior, one-sided differences on
the borders, and a zero gradient along any axis of extent 1.
"""

import torch


def to_grayscale(image: torch.Tensor) -> torch.Tensor:
    """
    Convert an image to a float64 luma map.

    Integer RGB input is reduced to 8-bit gray with rounded fixed-point
    BT.601 weights, (R*4899 + G*9617 + B*1868 + 8192) >> 14. Float RGB
    input keeps the unrounded 0.299 / 0.587 / 0.114 combination.

    Args:
        image: RGB image tensor (3, H, W), single channel (1, H, W) or (H, W)

    Returns:
        Grayscale map (H, W), float64
    """
    if image.dim() == 2:
        gray = image
    elif image.dim() == 3 and image.shape[0] == 3:
        if image.is_floating_point():
            rgb = image.to(torch.float64)
            gray = 0.299 * rgb[0] + 0.587 * rgb[1] + 0.114 * rgb[2]
        else:
            rgb = image.to(torch.int64)
            gray = (rgb[0] * 4899 + rgb[1] * 9617 + rgb[2] * 1868 + 8192) >> 14
    elif image.dim() == 3 and image.shape[0] == 1:
        gray = image[0]
    else:
        raise ValueError(f"Unsupported image shape: {tuple(image.shape)}")

    if gray.shape[0] == 0 or gray.shape[1] == 0:
        raise ValueError(f"Image must be non-empty, got shape {tuple(image.shape)}")

    return gray.to(torch.float64)


def _axis_gradient(gray: torch.Tensor, dim: int) -> torch.Tensor:
    """Finite difference of `gray` along `dim` with one-sided borders."""
    n = gray.shape[dim]
    grad = torch.zeros_like(gray)
    if n == 1:
        return grad

    g = gray.movedim(dim, 0)
    out = grad.movedim(dim, 0)
    out[1:-1] = g[2:] - g[:-2]
    out[0] = g[1] - g[0]
    out[-1] = g[-1] - g[-2]
    return grad


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute gradient magnitude energy for an image.

    E(x, y) = sqrt(dx(x, y)^2 + dy(x, y)^2)

    where dx is gray(x+1) - gray(x-1) in the interior, gray(1) - gray(0)
    on the left border and gray(W-1) - gray(W-2) on the right border
    (dy symmetrically over rows).

    Args:
        image: RGB image tensor (3, H, W) or grayscale (H, W) / (1, H, W)

    Returns:
        Energy map (H, W), float64
    """
    gray = to_grayscale(image)

    grad_x = _axis_gradient(gray, dim=1)
    grad_y = _axis_gradient(gray, dim=0)

    return torch.sqrt(grad_x ** 2 + grad_y ** 2)
