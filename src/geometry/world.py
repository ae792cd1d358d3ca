# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from typing import Iterator, Optional, List
from core.ray import Ray
from core.interval import Interval

class HittableList(Hittable):
    """
    A list of Hittable objects. The hit() method returns the closest hit.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max

        # Each child only needs to beat the closest hit found so far.
        for obj in self.objects:
            rec = obj.hit(ray, ray_t.with_max(closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
