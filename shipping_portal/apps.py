from django.apps import AppConfig


class ShippingPortalConfig(AppConfig):
    name = 'shipping_portal'
    verbose_name = "Shipping Zone Methods"
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from shipping_portal import receivers  # noqa
