# renderer/raytracer.py
import logging
import math
import random
import numpy as np
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable
from .image import Image
from .tone_mapping import gamma_correct_buffer

logger = logging.getLogger(__name__)

# Hits closer than this are treated as the surface the ray just left (shadow acne).
T_MIN = 1e-4
HIT_INTERVAL = Interval(T_MIN, math.inf)

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def background(ray: Ray) -> Vector3:
    """
    Vertical sky gradient: white looking straight down, sky blue straight up.
    """
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - a) + SKY_BLUE * a

def ray_color(ray: Ray, depth: int, world: Hittable, rng) -> Vector3:
    """
    Returns the color seen along the ray, following at most `depth` bounces.

    Equivalent to the recursion
        color(ray, d) = attenuation * color(scattered, d - 1)
    with the attenuation product carried forward instead of on the stack.
    """
    throughput = WHITE
    while depth > 0:
        rec = world.hit(ray, HIT_INTERVAL)
        if rec is None:
            return throughput * background(ray)

        result = rec.material.scatter(ray, rec, rng)
        if result is None:
            return BLACK  # Absorbed
        throughput = throughput * result.attenuation
        ray = result.scattered
        depth -= 1

    return BLACK  # Exceeded the bounce budget

class Renderer:
    """
    Drives the camera over every pixel, averaging `samples_per_pixel` jittered
    rays per pixel and writing gamma-corrected 8-bit colors into a pixel sink.

    The random source is either supplied as `rng` or created from `seed`;
    two renders with the same seed and scene produce identical images.
    """
    def __init__(self, camera, rng=None, seed=None):
        self.camera = camera
        self.rng = rng if rng is not None else random.Random(seed)
        self.accumulation_buffer = None

    def sample_pixel(self, i: int, j: int, world: Hittable) -> Vector3:
        """Sum of the radiance of all samples taken for pixel (i, j)."""
        camera = self.camera
        total = BLACK
        for _ in range(camera.samples_per_pixel):
            ray = camera.get_ray(i, j, self.rng)
            total = total + ray_color(ray, camera.max_depth, world, self.rng)
        return total

    def render_pixel(self, i: int, j: int, world: Hittable) -> Vector3:
        """Averaged linear color of pixel (i, j)."""
        return self.sample_pixel(i, j, world) * self.camera.pixel_samples_scale

    def render(self, world: Hittable, image=None):
        """
        Render the whole frame into `image` (a new Image when omitted) and return it.
        The sink only needs a set_pixel(x, y, rgb) method.
        """
        camera = self.camera
        width, height = camera.image_width, camera.image_height
        if image is None:
            image = Image(width, height)
        elif getattr(image, "width", width) != width or getattr(image, "height", height) != height:
            raise ValueError(
                f"Image is {image.width}x{image.height} but camera renders {width}x{height}")

        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d",
                    width, height, camera.samples_per_pixel, camera.max_depth)

        self.accumulation_buffer = np.zeros((height, width, 3), dtype=np.float64)
        for j in range(height):
            logger.debug("Scanlines remaining: %d", height - j)
            for i in range(width):
                self.accumulation_buffer[j, i] = self.render_pixel(i, j, world).to_tuple()

        # Pixels are already averaged by render_pixel
        rgb = gamma_correct_buffer(self.accumulation_buffer, 1.0)
        for j in range(height):
            for i in range(width):
                image.set_pixel(i, j, tuple(int(c) for c in rgb[j, i]))

        logger.info("Render finished")
        return image
