import logging

from django.db import models
from django.db.models import QuerySet, Max

from shipping_portal.models.shippingzone import ShippingZone
from shipping_processors.domain.zone import REST_OF_THE_WORLD_ZONE_ID

logger = logging.getLogger(__name__)


class ShippingZoneMethodManager(models.Manager):

    def get_by_zone_id(self, zone_id: int) -> QuerySet:
        if zone_id == REST_OF_THE_WORLD_ZONE_ID:
            qs: QuerySet = self.filter(zone__isnull=True)
        else:
            qs: QuerySet = self.filter(zone_id=zone_id)
        return qs.order_by('method_order', 'instance_id')

    def get_next_order(self, zone_id: int) -> int:
        max_order = self.get_by_zone_id(zone_id).aggregate(max_order=Max('method_order'))['max_order']
        return 0 if max_order is None else max_order + 1


class ShippingZoneMethod(models.Model):
    # instance_id is unique across all zones, not just within its own zone
    instance_id = models.BigAutoField(primary_key=True)

    # null zone is the rest of the world zone, see shipping_processors.domain.zone
    zone = models.ForeignKey(ShippingZone, on_delete=models.CASCADE, null=True, blank=True, related_name='methods')

    # delegating its values to method type registry, see `shipping_processors.domain.registry`
    method_id = models.CharField(max_length=255)

    method_order = models.PositiveIntegerField(default=0)
    is_enabled = models.BooleanField(default=True)

    objects = ShippingZoneMethodManager()

    def __str__(self):
        return f"INSTANCE_ID: {self.instance_id}, METHOD_ID: {self.method_id}, ZONE_ID: {self.zone_id}"
