# -*- coding: utf-8 -*-
"""zone method service module

Zone Method Resource Handler operations: list, get, create, update and delete method instances of a zone.

Every operation resolves the zone first, so an unresolved zone always wins over an unknown instance. Instances are
found by linear scan of the zone's method list; zones hold few methods, no index is kept.
"""
import logging
from typing import Callable, List, Optional, Tuple

from django.db import transaction
from rest_framework.exceptions import ValidationError

from shipping_portal.exceptions import ZoneMethodNotFound, ZoneMethodCreationFailed, TrashNotSupported
from shipping_portal.signals import shipping_zone_method_status_toggled, shipping_zone_method_deleted
from shipping_processors.domain.method_type import MethodInstance, ShippingMethodType, InvalidFieldValue, absint, \
    to_enabled_flag
from shipping_processors.domain.zone import Zone
from shipping_processors.services import zone_srv, option_srv

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def find_method(zone: Zone, instance_id) -> Optional[MethodInstance]:
    for method in zone_srv.list_methods(zone):
        if method.instance_id == instance_id:
            return method
    return None


def list_zone_methods(zone_id) -> Tuple[Zone, List[MethodInstance]]:
    zone = zone_srv.resolve_zone(zone_id)
    return zone, zone_srv.list_methods(zone)


def get_zone_method(zone_id, instance_id) -> Tuple[Zone, MethodInstance]:
    zone = zone_srv.resolve_zone(zone_id)

    try:
        instance_id = int(instance_id)
    except (TypeError, ValueError):
        raise ZoneMethodNotFound()

    method = find_method(zone, instance_id)
    if method is None:
        raise ZoneMethodNotFound()

    return zone, method


@transaction.atomic
def create_zone_method(zone_id, method_id: str, fields: dict) -> Tuple[Zone, MethodInstance]:
    zone = zone_srv.resolve_zone(zone_id)

    instance_id = zone_srv.add_method(zone, method_id)

    method = find_method(zone, instance_id) if instance_id is not None else None
    if method is None:
        logger.warning(f"Shipping method {method_id} could not be found back in zone {zone.zone_id} after adding "
                       f"(instance_id={instance_id})")
        raise ZoneMethodCreationFailed()

    return zone, update_fields(zone, method, fields)


@transaction.atomic
def update_zone_method(zone_id, instance_id, fields: dict) -> Tuple[Zone, MethodInstance]:
    zone, method = get_zone_method(zone_id, instance_id)
    return zone, update_fields(zone, method, fields)


@transaction.atomic
def delete_zone_method(zone_id, instance_id, force: bool, fields: dict,
                       represent: Callable[[Zone, MethodInstance], dict], request=None) -> dict:
    """
    Permanently remove method instance. Trashing is not supported, hence force must be true.

    The snapshot is the representation of the instance right before deletion, after any requested field updates got
    applied. It is what gets notified and returned.
    """
    zone, method = get_zone_method(zone_id, instance_id)

    if not force:
        raise TrashNotSupported()

    method = update_fields(zone, method, fields)
    snapshot = represent(zone, method)

    zone_srv.remove_method(zone, method)

    shipping_zone_method_deleted.send(sender=MethodInstance, method=method, response=snapshot, request=request)

    return snapshot


def clean_settings(method_type: ShippingMethodType, raw_settings: dict) -> dict:
    """
    Validate requested settings values against declared form fields. Keys not declared are dropped.
    """
    if not isinstance(raw_settings, dict):
        raise ValidationError({'settings': ["Must be an object keyed by setting id."]})

    cleaned = {}
    errors = {}

    for key, form_field in method_type.instance_form_fields().items():
        # null is treated as not supplied
        if raw_settings.get(key) is None:
            continue
        try:
            cleaned[key] = form_field.clean(raw_settings[key])
        except InvalidFieldValue as e:
            errors[key] = [str(e)]

    if errors:
        raise ValidationError({'settings': errors})

    return cleaned


def update_fields(zone: Zone, method: MethodInstance, fields: dict) -> MethodInstance:
    """
    Apply settings, order and enabled updates. Each is independent and applied only if its key is present.

    Settings and order writes are best effort. The enabled write gates both the in-memory update and the status
    toggled notification.
    """
    # all fields are validated before any write
    requested = clean_settings(method.method_type, fields['settings']) if 'settings' in fields else None

    enabled = None
    if 'enabled' in fields:
        try:
            enabled = to_enabled_flag(fields['enabled'])
        except InvalidFieldValue as e:
            raise ValidationError({'enabled': [str(e)]})

    if requested is not None:
        instance_settings = dict(option_srv.get_instance_settings(method.get_instance_option_key()))
        instance_settings.update(requested)
        instance_settings = method.method_type.process_instance_settings(instance_settings)

        if option_srv.write_instance_settings(method.get_instance_option_key(), instance_settings):
            method.settings = instance_settings
        else:
            logger.warning(f"Settings write did not persist for instance_id={method.instance_id}")

    if 'order' in fields:
        order = absint(fields['order'])
        if not option_srv.write_order(method.instance_id, order):
            logger.warning(f"Order write did not persist for instance_id={method.instance_id}")
        method.order = order

    if enabled is not None:
        if option_srv.write_enabled(method.instance_id, enabled):
            method.enabled = enabled
            shipping_zone_method_status_toggled.send(
                sender=MethodInstance,
                instance_id=method.instance_id,
                method_id=method.method_id,
                zone_id=zone.zone_id,
                enabled=enabled,
            )

    return method
