"""
Seam computation and removal.

A vertical seam is a connected top-to-bottom path holding one column
index per row. The minimum-energy seam is found with dynamic programming
(Avidan & Shamir 2007): a forward pass builds the cumulative energy map,
a backward pass walks from the cheapest bottom cell back to the top.

Horizontal seams are handled by the caller by transposing the image.
"""

import torch


def cumulative_energy(energy: torch.Tensor) -> torch.Tensor:
    """
    Build the cumulative minimum energy map M.

    M[0] = E[0]
    M[i, j] = E[i, j] + min(M[i-1, j-1], M[i-1, j], M[i-1, j+1])

    Neighbours outside [0, W-1] are left out of the min.

    Args:
        energy: Energy map (H, W)

    Returns:
        Cumulative energy map (H, W)
    """
    H, W = energy.shape
    M = energy.clone()

    for i in range(1, H):
        prev = M[i - 1]
        best = prev.clone()
        if W > 1:
            best[1:] = torch.minimum(best[1:], prev[:-1])
            best[:-1] = torch.minimum(best[:-1], prev[1:])
        M[i] += best

    return M


def backtrack_seam(cumulative: torch.Tensor) -> torch.Tensor:
    """
    Recover the minimum seam from a cumulative energy map.

    The seam ends at the leftmost minimum of the last row. Walking up,
    each row keeps the column straight above unless prev-1 or prev+1
    is strictly cheaper; prev-1 is checked first.

    Args:
        cumulative: Cumulative energy map (H, W)

    Returns:
        Seam indices (H,) with column index per row
    """
    H, W = cumulative.shape
    rows = cumulative.tolist()

    seam = [0] * H
    seam[H - 1] = int(torch.argmin(cumulative[H - 1]).item())

    for i in range(H - 2, -1, -1):
        prev_col = seam[i + 1]
        row = rows[i]
        col = prev_col
        min_e = row[prev_col]

        if prev_col > 0 and row[prev_col - 1] < min_e:
            col = prev_col - 1
            min_e = row[prev_col - 1]
        if prev_col < W - 1 and row[prev_col + 1] < min_e:
            col = prev_col + 1

        seam[i] = col

    return torch.tensor(seam, dtype=torch.long, device=cumulative.device)


def dp_seam(energy: torch.Tensor) -> torch.Tensor:
    """
    Find the optimal vertical seam with dynamic programming.

    O(H*W) time and memory.

    Args:
        energy: Energy map (H, W)

    Returns:
        Seam indices (H,) with column index per row
    """
    return backtrack_seam(cumulative_energy(energy))


def remove_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from an image.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices (H,)

    Returns:
        Carved image with one column removed
    """
    H, W = image.shape[-2:]

    if W < 2:
        raise ValueError("Cannot remove a seam from an image of width 1")
    if seam.dim() != 1 or seam.shape[0] != H:
        raise ValueError(f"Seam length {tuple(seam.shape)} does not match image height {H}")
    if (seam < 0).any() or (seam >= W).any():
        raise ValueError(f"Seam indices must lie in [0, {W - 1}]")

    keep = torch.ones(H, W, dtype=torch.bool, device=image.device)
    keep[torch.arange(H, device=image.device), seam.to(image.device)] = False

    carved = image[..., keep]
    return carved.reshape(*image.shape[:-2], H, W - 1)


def transpose_image(image: torch.Tensor) -> torch.Tensor:
    """Swap rows and columns, leaving the channel axis untouched."""
    return image.transpose(-2, -1).contiguous()
