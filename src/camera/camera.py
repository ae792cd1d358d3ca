# camera/camera.py
import logging
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

logger = logging.getLogger(__name__)

class Camera:
    """
    Positionable camera with a thin-lens aperture.

    The camera looks from `lookfrom` towards `lookat`, with `vup` fixing the
    roll. Angles are given in degrees. Every setter recomputes the derived
    viewport so the camera is always ready to generate rays.
    """
    def __init__(self, image_width: int, image_height: int, vfov: float = 90.0,
                 lookfrom: Vector3 = None, lookat: Vector3 = None, vup: Vector3 = None,
                 defocus_angle: float = 0.0, focus_dist: float = 10.0,
                 samples_per_pixel: int = 10, max_depth: int = 10):
        self.image_width = image_width
        self.image_height = image_height
        self.vfov = vfov
        self.lookfrom = lookfrom if lookfrom is not None else Vector3(0, 0, 0)
        self.lookat = lookat if lookat is not None else Vector3(0, 0, -1)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.defocus_angle = defocus_angle  # Variation angle of rays through each pixel
        self.focus_dist = focus_dist        # Distance to the plane of perfect focus
        self.set_samples_per_pixel(samples_per_pixel)
        self.set_max_depth(max_depth)
        self.update_camera()

    @classmethod
    def from_aspect_ratio(cls, image_width: int, aspect_ratio: float, **kwargs) -> "Camera":
        """Build a camera whose height is derived from the width and aspect ratio."""
        if aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")
        image_height = max(1, int(image_width / aspect_ratio))
        return cls(image_width, image_height, **kwargs)

    def _reconfigure(self, **settings):
        """
        Apply new settings and recompute the viewport. Rejected settings are
        rolled back so the camera keeps its previous, valid configuration.
        """
        previous = {name: getattr(self, name) for name in settings}
        for name, value in settings.items():
            setattr(self, name, value)
        try:
            self.update_camera()
        except ValueError:
            for name, value in previous.items():
                setattr(self, name, value)
            raise

    def set_camera_pos(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3 = None):
        settings = {"lookfrom": lookfrom, "lookat": lookat}
        if vup is not None:
            settings["vup"] = vup
        self._reconfigure(**settings)

    def set_vfov(self, vfov: float):
        self._reconfigure(vfov=vfov)

    def set_aperture(self, defocus_angle: float, focus_dist: float):
        self._reconfigure(defocus_angle=defocus_angle, focus_dist=focus_dist)

    def set_image_size(self, image_width: int, image_height: int):
        self._reconfigure(image_width=image_width, image_height=image_height)

    def set_samples_per_pixel(self, samples_per_pixel: int):
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        self.samples_per_pixel = samples_per_pixel
        self.pixel_samples_scale = 1.0 / samples_per_pixel

    def set_max_depth(self, max_depth: int):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.max_depth = max_depth

    def _validate(self):
        if self.image_width < 1 or self.image_height < 1:
            raise ValueError(
                f"Image dimensions must be positive, got {self.image_width}x{self.image_height}")
        if not 0 < self.vfov < 180:
            raise ValueError(f"Vertical field of view must be in (0, 180) degrees, got {self.vfov}")
        if self.focus_dist <= 0:
            raise ValueError(f"Focus distance must be positive, got {self.focus_dist}")
        if self.defocus_angle < 0:
            raise ValueError(f"Defocus angle must be non-negative, got {self.defocus_angle}")
        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ValueError("lookfrom and lookat must be distinct points")
        if self.vup.cross(view).near_zero():
            raise ValueError("vup must not be parallel to the viewing direction")

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        self._validate()

        self.center = self.lookfrom

        # Viewport dimensions at the focus plane
        h = math.tan(math.radians(self.vfov) / 2)
        viewport_height = 2.0 * h * self.focus_dist
        # Use the real pixel ratio; the integer image height may have been rounded
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Viewport edges; image rows grow downwards
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center -
                               self.w * self.focus_dist -
                               viewport_u / 2 -
                               viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(math.radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

        logger.debug("Camera basis u=%r v=%r w=%r, viewport %.4fx%.4f",
                     self.u, self.v, self.w, viewport_width, viewport_height)

    def get_ray(self, i: int, j: int, rng) -> Ray:
        """
        Generates a ray from the defocus disk through a random point of pixel (i, j).
        """
        offset_x = rng.uniform(-0.5, 0.5)
        offset_y = rng.uniform(-0.5, 0.5)
        pixel_sample = (self.pixel00_loc +
                        self.pixel_delta_u * (i + offset_x) +
                        self.pixel_delta_v * (j + offset_y))

        if self.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)

        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self, rng) -> Vector3:
        """Returns a random point on the camera's defocus disk."""
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
