# materials/material.py
from typing import NamedTuple, Optional
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord

class ScatterResult(NamedTuple):
    """
    Outcome of a scatter event: the component-wise color factor applied to
    the light carried back along the scattered ray.
    """
    attenuation: Vector3
    scattered: Ray

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable once built so many primitives can share one.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterResult]:
        """
        Computes the scattered ray and attenuation.
        Returns a ScatterResult, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
