"""
Basic seam carving example.

Builds a synthetic scene (two colored blocks on a textured background),
shows the first seam, the energy map and the result of shrinking the
image in both directions, then saves everything to output/.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import matplotlib.pyplot as plt

from seamcarve import (gradient_magnitude_energy, dp_seam, overlay_seam,
                       resize, save_image, SeamRecorder)


def create_scene(height: int = 120, width: int = 200) -> torch.Tensor:
    """Two solid blocks on a low-contrast noisy background, uint8 (3, H, W)."""
    torch.manual_seed(0)
    image = torch.full((3, height, width), 180, dtype=torch.int16)
    image += torch.randint(-6, 7, (3, height, width), dtype=torch.int16)

    image[:, 30:90, 20:60] = torch.tensor([200, 40, 40], dtype=torch.int16).view(3, 1, 1)
    image[:, 50:110, 130:170] = torch.tensor([40, 60, 200], dtype=torch.int16).view(3, 1, 1)

    return image.clamp(0, 255).to(torch.uint8)


def main():
    os.makedirs('output', exist_ok=True)

    image = create_scene()
    C, H, W = image.shape
    print(f"Image shape: {C} x {H} x {W}")

    energy = gradient_magnitude_energy(image)
    seam = dp_seam(energy)
    save_image(overlay_seam(image, seam), 'output/scene_with_seam.png')

    target_w, target_h = W - 80, H - 30
    print(f"Carving to {target_w} x {target_h}...")
    recorder = SeamRecorder()
    carved = resize(image, target_w, target_h, callback=recorder)
    save_image(carved, 'output/scene_carved.png')
    recorder.save_gif('output/scene_seams.gif', fps=20)

    fig, axes = plt.subplots(1, 3, figsize=(15, 4))
    axes[0].imshow(overlay_seam(image, seam).permute(1, 2, 0).numpy())
    axes[0].set_title('Original with first seam')
    axes[1].imshow(energy.numpy(), cmap='inferno')
    axes[1].set_title('Energy')
    axes[2].imshow(carved.permute(1, 2, 0).numpy())
    axes[2].set_title(f'Carved ({target_w} x {target_h})')
    for ax in axes:
        ax.axis('off')
    plt.tight_layout()
    plt.savefig('output/scene_comparison.png', dpi=100)
    print("Saved: output/scene_comparison.png")

    print("\nDone! Check the output/ directory for results.")


if __name__ == '__main__':
    main()
