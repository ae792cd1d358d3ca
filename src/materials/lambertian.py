# materials/lambertian.py
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

# Per-axis threshold below which a scatter direction counts as degenerate.
NEAR_ZERO_EPSILON = 1e-8

class Lambertian(Material):
    """
    Lambertian diffuse material. Always scatters.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterResult]:
        # Normal plus a unit sphere sample approximates a cosine-weighted lobe.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # The sample can land almost opposite the normal and cancel it out.
        if scatter_direction.near_zero(NEAR_ZERO_EPSILON):
            scatter_direction = rec.normal

        return ScatterResult(self.albedo, Ray(rec.p, scatter_direction))

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo!r})"
