# src/materials/dielectric.py
import math
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

class Dielectric(Material):
    """
    Clear refractive material such as glass or water.
    """
    def __init__(self, refraction_index: float):
        if refraction_index <= 0:
            raise ValueError(f"Refraction index must be positive, got {refraction_index}")
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterResult]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Snell's law has no solution past the critical angle
        cannot_refract = ri * sin_theta > 1.0

        if cannot_refract or schlick(cos_theta, ri) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return ScatterResult(attenuation, Ray(rec.p, direction))

    def __repr__(self) -> str:
        return f"Dielectric(refraction_index={self.refraction_index})"

def schlick(cos_theta: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the angle-dependent Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
