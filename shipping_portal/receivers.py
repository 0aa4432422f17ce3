import logging

from django.dispatch import receiver

from shipping_portal.signals import shipping_zone_method_status_toggled, shipping_zone_method_deleted

logger = logging.getLogger(__name__)


@receiver(shipping_zone_method_status_toggled)
def log_status_toggled(sender, instance_id, method_id, zone_id, enabled, **kwargs):
    logger.info(f"Shipping method {method_id} (instance_id={instance_id}, zone_id={zone_id}) "
                f"{'enabled' if enabled else 'disabled'}")


@receiver(shipping_zone_method_deleted)
def log_deleted(sender, method, response, **kwargs):
    logger.info(f"Shipping method {method.method_id} (instance_id={method.instance_id}, "
                f"zone_id={method.zone_id}) deleted")
