import logging
from typing import Optional

from django.db import models

logger = logging.getLogger(__name__)


class ShippingZoneManager(models.Manager):

    def get_by_zone_id(self, zone_id: int) -> Optional['ShippingZone']:
        """
        Get zone by id. None if not exists
        """
        return self.filter(id=zone_id).first()


class ShippingZone(models.Model):
    """
    Named shipping destination grouping. Zone locations and matching are managed elsewhere.
    """
    id = models.BigAutoField(primary_key=True)
    zone_name = models.CharField(max_length=255)
    zone_order = models.PositiveIntegerField(default=0)

    objects = ShippingZoneManager()

    def __str__(self):
        return f"ZONE_ID: {self.id}, ZONE_NAME: {self.zone_name}"
