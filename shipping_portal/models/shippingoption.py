import json
import logging
from typing import Union, Any

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

logger = logging.getLogger(__name__)


class ShippingOption(models.Model):
    """
    Model that stores an option value by name, e.g. shipping method instance settings serialised as JSON
    """
    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255, unique=True)
    value = models.TextField()

    @staticmethod
    def get(name: str) -> Union['ShippingOption', None]:
        """
        Get option object by name. None if not exists
        """
        query_set = ShippingOption.objects.filter(name=name)
        if query_set.exists():
            return query_set.get()
        return None

    @staticmethod
    def get_value(name: str, default: Any = None) -> Any:
        """
        Get JSON decoded option value by name. Return default if not exists
        """
        option = ShippingOption.get(name)
        if option is None:
            return default
        return json.loads(option.value)

    @staticmethod
    def set(name: str, val: Any) -> None:
        """
        Set JSON encoded option value by name. Will create one if not exist.
        """
        ShippingOption.objects.update_or_create(name=name, defaults={'value': json.dumps(val, cls=DjangoJSONEncoder)})

    @staticmethod
    def delete_by_name(name: str) -> int:
        deleted, _ = ShippingOption.objects.filter(name=name).delete()
        return deleted

    def __str__(self):
        return f"NAME: {self.name}"
