"""Tests for the energy function."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import math

import torch
import pytest
from seamcarve.energy import gradient_magnitude_energy, to_grayscale
from seamcarve.seam import dp_seam

from conftest import make_uniform_image


class TestToGrayscale:
    def test_luma_weights(self):
        """Float RGB is combined with the 0.299 / 0.587 / 0.114 luma weights."""
        image = torch.zeros(3, 1, 3)
        image[0, 0, 0] = 1.0
        image[1, 0, 1] = 1.0
        image[2, 0, 2] = 1.0
        gray = to_grayscale(image)
        assert gray.dtype == torch.float64
        assert gray[0].tolist() == pytest.approx([0.299, 0.587, 0.114])

    def test_integer_rgb_is_rounded_to_8_bit_gray(self):
        """uint8 RGB goes through the rounded fixed-point luma."""
        image = torch.zeros(3, 1, 5, dtype=torch.uint8)
        image[0, 0, 0] = 255
        image[1, 0, 1] = 255
        image[2, 0, 2] = 255
        image[:, 0, 3] = torch.tensor([100, 150, 200], dtype=torch.uint8)
        image[:, 0, 4] = 255
        gray = to_grayscale(image)
        assert gray.dtype == torch.float64
        assert gray[0].tolist() == [76.0, 150.0, 29.0, 141.0, 255.0]

    def test_rounded_gray_changes_seam(self):
        """A sub-unit luma step vanishes after rounding and no longer steers the seam."""
        image = torch.zeros(3, 1, 3, dtype=torch.uint8)
        image[0, 0, 0] = 1
        # rounded gray [0, 0, 0]: flat row, leftmost column
        assert gradient_magnitude_energy(image).tolist() == [[0.0, 0.0, 0.0]]
        assert dp_seam(gradient_magnitude_energy(image)).tolist() == [0]
        # unrounded gray [0.299, 0, 0]: only the last column is flat
        assert dp_seam(gradient_magnitude_energy(image.to(torch.float64))).tolist() == [2]

    def test_single_channel_passthrough(self):
        image = torch.tensor([[1, 2], [3, 4]], dtype=torch.uint8)
        assert to_grayscale(image).tolist() == [[1.0, 2.0], [3.0, 4.0]]
        assert to_grayscale(image.unsqueeze(0)).tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_rejects_unsupported_channels(self):
        with pytest.raises(ValueError):
            to_grayscale(torch.zeros(2, 4, 4))

    def test_rejects_empty_image(self):
        with pytest.raises(ValueError):
            to_grayscale(torch.zeros(3, 0, 4))


class TestGradientMagnitudeEnergy:
    def test_uniform_image_is_zero(self):
        """A solid-color image has zero energy everywhere, borders included."""
        energy = gradient_magnitude_energy(make_uniform_image(6, 7))
        assert torch.equal(energy, torch.zeros(6, 7, dtype=torch.float64))

    def test_single_row_one_sided_borders(self):
        """[10, 10, 100, 10]: gradients [0, 90, 0, -90] give energies [0, 90, 0, 90]."""
        image = torch.tensor([[10, 10, 100, 10]], dtype=torch.uint8)
        energy = gradient_magnitude_energy(image)
        assert energy.tolist() == [[0.0, 90.0, 0.0, 90.0]]

    def test_single_row_rgb(self):
        """Equal channels reduce to the same gray values."""
        row = torch.tensor([10, 10, 100, 10], dtype=torch.uint8)
        image = row.view(1, 1, 4).expand(3, 1, 4).clone()
        energy = gradient_magnitude_energy(image)
        assert energy[0].tolist() == pytest.approx([0.0, 90.0, 0.0, 90.0])

    def test_central_and_border_differences(self):
        """Interior uses central differences, borders use one-sided ones."""
        image = torch.arange(9, dtype=torch.float32).view(3, 3)
        energy = gradient_magnitude_energy(image)
        # grad_x per row: [1, 2, 1]; grad_y per column: [3, 6, 3]
        assert energy[0, 0].item() == pytest.approx(math.sqrt(1 + 9))
        assert energy[1, 1].item() == pytest.approx(math.sqrt(4 + 36))
        assert energy[2, 2].item() == pytest.approx(math.sqrt(1 + 9))
        assert energy[0, 1].item() == pytest.approx(math.sqrt(4 + 9))
        assert energy[1, 0].item() == pytest.approx(math.sqrt(1 + 36))

    def test_width_one_has_no_horizontal_gradient(self):
        image = torch.tensor([[0], [5], [10]], dtype=torch.uint8)
        energy = gradient_magnitude_energy(image)
        assert energy.flatten().tolist() == [5.0, 10.0, 5.0]

    def test_width_two(self):
        """With two columns both pixels take the same one-sided difference."""
        image = torch.tensor([[0, 4]], dtype=torch.uint8)
        assert gradient_magnitude_energy(image).tolist() == [[4.0, 4.0]]

    def test_single_pixel(self):
        image = torch.tensor([[200]], dtype=torch.uint8)
        assert gradient_magnitude_energy(image).tolist() == [[0.0]]

    def test_vertical_edge_has_horizontal_energy(self):
        """An image with a single vertical edge has energy along that edge only."""
        image = torch.zeros(3, 10, 10, dtype=torch.uint8)
        image[:, :, 5:] = 255
        energy = gradient_magnitude_energy(image)
        assert (energy[:, 4:6] > 0).all()
        assert (energy[:, :4] == 0).all()
        assert (energy[:, 6:] == 0).all()

    def test_output_shape_and_dtype(self):
        image = torch.randint(0, 256, (3, 32, 48), dtype=torch.uint8)
        energy = gradient_magnitude_energy(image)
        assert energy.shape == (32, 48)
        assert energy.dtype == torch.float64

    def test_energy_nonnegative(self):
        torch.manual_seed(42)
        image = torch.rand(3, 30, 30)
        assert (gradient_magnitude_energy(image) >= 0).all()

    def test_does_not_mutate_input(self, random_image):
        before = random_image.clone()
        gradient_magnitude_energy(random_image)
        assert torch.equal(random_image, before)
