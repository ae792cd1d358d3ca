# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit
from core.vector import Vector3

# Keeps 256 * value strictly below 256 so every channel fits in a byte.
INTENSITY_MIN = 0.000
INTENSITY_MAX = 0.999

@njit
def linear_to_gamma(linear_component):
    """
    Square-root (gamma 2) approximation of the display transfer curve.
    """
    if linear_component > 0.0:
        return math.sqrt(linear_component)
    return 0.0

@njit
def gamma_correct_buffer(linear, scale):
    """
    Scale accumulated radiance by `scale`, gamma-correct and quantize a
    (height, width, 3) buffer to uint8.
    """
    height, width, channels = linear.shape
    output = np.empty((height, width, channels), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = linear_to_gamma(linear[y, x, c] * scale)
                value = min(max(value, INTENSITY_MIN), INTENSITY_MAX)
                output[y, x, c] = int(256.0 * value)
    return output

def color_to_rgb8(color: Vector3) -> tuple:
    """
    Converts an averaged linear color to a display-space 8-bit (r, g, b) triple.
    """
    pixel = np.array(color.to_tuple(), dtype=np.float64).reshape(1, 1, 3)
    r, g, b = gamma_correct_buffer(pixel, 1.0)[0, 0]
    return int(r), int(g), int(b)
