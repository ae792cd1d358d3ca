# materials/metal.py
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

class Metal(Material):
    """
    Metal material with mirror reflection blurred by a fuzz factor.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        if fuzz < 0:
            raise ValueError(f"Metal fuzz must be non-negative, got {fuzz}")
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterResult]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        reflected = reflected + random_unit_vector(rng) * self.fuzz

        if reflected.dot(rec.normal) < 0:
            return None  # Fuzzed below the surface: absorbed
        return ScatterResult(self.albedo, Ray(rec.p, reflected))

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo!r}, fuzz={self.fuzz})"
