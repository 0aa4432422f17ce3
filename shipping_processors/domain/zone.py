# -*- coding: utf-8 -*-
"""zone domain module

Zone 0 is the "rest of the world" zone. It matches any location not covered by other zones, always exists and has no
ShippingZone row. Its method instances carry an empty zone reference.
"""
from dataclasses import dataclass

REST_OF_THE_WORLD_ZONE_ID = 0
REST_OF_THE_WORLD_ZONE_NAME = "Locations not covered by your other zones"


@dataclass
class Zone:
    zone_id: int
    name: str
    order: int = 0

    @property
    def is_rest_of_the_world(self) -> bool:
        return self.zone_id == REST_OF_THE_WORLD_ZONE_ID

    @classmethod
    def rest_of_the_world(cls) -> 'Zone':
        return cls(zone_id=REST_OF_THE_WORLD_ZONE_ID, name=REST_OF_THE_WORLD_ZONE_NAME)
