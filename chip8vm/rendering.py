"""CHIP-8 rendering utilities for visualization."""

from typing import Tuple

import numpy as np

from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from chip8vm.display import Display

Color = Tuple[int, int, int]


def chip8_display_to_rgb(
    display: Display,
    scale: int = 8,
    on_color: Color = (255, 255, 255),
    off_color: Color = (0, 0, 0),
) -> np.ndarray:
    """Convert a CHIP-8 display to an RGB array with optional upscaling.

    Args:
        display: Display to render; its dirty flag is not touched
        scale: Upscaling factor for better visibility (default: 8x)
        on_color: RGB color for "on" pixels (default: white)
        off_color: RGB color for "off" pixels (default: black)

    Returns:
        RGB array of shape (32*scale, 64*scale, 3) with uint8 values
    """
    if scale < 1:
        raise ValueError(f"scale must be at least 1, got {scale}")

    pixels = display.framebuffer(True, False).astype(np.bool_).reshape(SCREEN_HEIGHT, SCREEN_WIDTH)

    rgb_frame = np.zeros((SCREEN_HEIGHT, SCREEN_WIDTH, 3), dtype=np.uint8)
    rgb_frame[pixels] = on_color
    rgb_frame[~pixels] = off_color

    # Apply upscaling using nearest neighbor interpolation
    if scale > 1:
        rgb_frame = np.repeat(np.repeat(rgb_frame, scale, axis=0), scale, axis=1)

    return rgb_frame


def pack_xrgb(color: Color) -> int:
    """Pack an RGB triple as a 0x00RRGGBB word."""
    r, g, b = color
    return (r << 16) | (g << 8) | b


def framebuffer_to_xrgb(display: Display, scheme: str = "white") -> np.ndarray:
    """Row-major 0x00RRGGBB buffer of 64*32 pixels, ready for a window blit."""
    on_color, off_color = create_color_scheme(scheme)
    return display.framebuffer(pack_xrgb(on_color), pack_xrgb(off_color)).astype(np.uint32)


def create_color_scheme(
    scheme: str = "white",
) -> Tuple[Color, Color]:
    """Get predefined color schemes for CHIP-8 rendering.

    Args:
        scheme: Color scheme name ("white", "classic", "amber", "blue", "retro", "sky")

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    schemes = {
        "white": ((255, 255, 255), (0, 0, 0)),  # White on black
        "classic": ((0, 255, 0), (0, 0, 0)),  # Green on black
        "amber": ((255, 176, 0), (0, 0, 0)),  # Amber on black
        "blue": ((0, 255, 255), (0, 0, 64)),  # Cyan on dark blue
        "retro": ((255, 255, 0), (64, 0, 64)),  # Yellow on purple
        "sky": ((0x68, 0xBB, 0xED), (0x2C, 0x50, 0x66)),  # Light blue on slate
    }

    if scheme not in schemes:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(schemes.keys())}"
        )

    return schemes[scheme]
