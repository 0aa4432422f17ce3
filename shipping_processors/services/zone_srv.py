import logging
from typing import List, Optional

from django.db import transaction
from django.db.models import QuerySet

from shipping_portal.exceptions import ZoneNotFound
from shipping_portal.models import ShippingZone, ShippingZoneMethod
from shipping_processors.domain import registry
from shipping_processors.domain.method_type import MethodInstance
from shipping_processors.domain.zone import Zone, REST_OF_THE_WORLD_ZONE_ID
from shipping_processors.services import option_srv

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def resolve_zone(zone_id) -> Zone:
    try:
        zone_id = int(zone_id)
    except (TypeError, ValueError):
        raise ZoneNotFound()

    if zone_id == REST_OF_THE_WORLD_ZONE_ID:
        return Zone.rest_of_the_world()

    zone_row: ShippingZone = ShippingZone.objects.get_by_zone_id(zone_id)
    if zone_row is None:
        raise ZoneNotFound()

    return Zone(zone_id=zone_row.id, name=zone_row.zone_name, order=zone_row.zone_order)


def list_zones() -> List[Zone]:
    zones = [Zone.rest_of_the_world()]
    for zone_row in ShippingZone.objects.order_by('zone_order', 'id'):
        zones.append(Zone(zone_id=zone_row.id, name=zone_row.zone_name, order=zone_row.zone_order))
    return zones


def list_methods(zone: Zone) -> List[MethodInstance]:
    """
    Method instances of the zone, by order then instance_id. Instances of unregistered method types are skipped.
    """
    methods = []

    qs: QuerySet = ShippingZoneMethod.objects.get_by_zone_id(zone.zone_id)
    for row in qs:
        method_type = registry.get_method_type(row.method_id)
        if method_type is None:
            continue

        methods.append(MethodInstance(
            instance_id=row.instance_id,
            zone_id=zone.zone_id,
            method_type=method_type,
            order=row.method_order,
            enabled=row.is_enabled,
            settings=option_srv.get_instance_settings(method_type.instance_option_key(row.instance_id)),
        ))

    return methods


@transaction.atomic
def add_method(zone: Zone, method_id: str) -> Optional[int]:
    """
    Add new method instance at the end of zone and persist its default settings

    :return: instance_id of the new instance, None if method_id is not a registered method type
    """
    method_type = registry.get_method_type(method_id)
    if method_type is None:
        return None

    row = ShippingZoneMethod.objects.create(
        zone_id=None if zone.is_rest_of_the_world else zone.zone_id,
        method_id=method_type.id,
        method_order=ShippingZoneMethod.objects.get_next_order(zone.zone_id),
        is_enabled=True,
    )

    option_srv.write_instance_settings(
        method_type.instance_option_key(row.instance_id),
        method_type.default_instance_settings(),
    )

    logger.info(f"Added shipping method {method_id} to zone {zone.zone_id} (instance_id={row.instance_id})")

    return row.instance_id


@transaction.atomic
def remove_method(zone: Zone, method: MethodInstance) -> bool:
    deleted, _ = ShippingZoneMethod.objects.get_by_zone_id(zone.zone_id).filter(
        instance_id=method.instance_id
    ).delete()

    option_srv.delete_instance_settings(method.get_instance_option_key())

    logger.info(f"Removed shipping method {method.method_id} from zone {zone.zone_id} "
                f"(instance_id={method.instance_id})")

    return deleted > 0
