import logging

from django.db import DatabaseError, transaction

from shipping_portal.models import ShippingOption, ShippingZoneMethod

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def get_instance_settings(option_key: str) -> dict:
    values = ShippingOption.get_value(option_key, default={})
    if not isinstance(values, dict):
        logger.warning(f"Ignoring malformed settings stored under {option_key}")
        return {}
    return values


def write_instance_settings(option_key: str, values: dict) -> bool:
    """
    Persist instance settings in own savepoint. A database failure is logged and reported as False, never raised.
    """
    try:
        with transaction.atomic():
            ShippingOption.set(option_key, values)
    except DatabaseError as e:
        logger.warning(f"Failed writing settings {option_key}: {e}")
        return False
    return True


def delete_instance_settings(option_key: str) -> bool:
    return ShippingOption.delete_by_name(option_key) > 0


def write_order(instance_id: int, order: int) -> bool:
    try:
        with transaction.atomic():
            updated = ShippingZoneMethod.objects.filter(instance_id=instance_id).update(method_order=order)
    except DatabaseError as e:
        logger.warning(f"Failed writing order of instance_id={instance_id}: {e}")
        return False
    return updated > 0


def write_enabled(instance_id: int, enabled: bool) -> bool:
    """
    Persist enabled flag. Success means a row actually changed, i.e. writing the current value again reports False.
    """
    updated = ShippingZoneMethod.objects.filter(instance_id=instance_id).exclude(is_enabled=enabled).update(
        is_enabled=enabled
    )
    return updated > 0
