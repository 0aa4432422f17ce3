# -*- coding: utf-8 -*-
"""registry domain module

Resolves method_id to ShippingMethodType instance using SHIPPING_METHOD_TYPES Django setting, a list of dotted
class paths.
"""
import logging
from collections import OrderedDict
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from shipping_processors.domain.method_type import ShippingMethodType

logger = logging.getLogger(__name__)

DEFAULT_METHOD_TYPES = [
    'shipping_processors.domain.methods.FlatRate',
    'shipping_processors.domain.methods.FreeShipping',
    'shipping_processors.domain.methods.LocalPickup',
]


def get_method_types() -> 'OrderedDict[str, ShippingMethodType]':
    method_types = OrderedDict()

    for path in getattr(settings, 'SHIPPING_METHOD_TYPES', DEFAULT_METHOD_TYPES):
        klass = import_string(path)
        if not issubclass(klass, ShippingMethodType):
            raise ImproperlyConfigured(f"{path} is not a ShippingMethodType")

        method_type = klass()
        method_types[method_type.id] = method_type

    return method_types


def get_method_type(method_id: str) -> Optional[ShippingMethodType]:
    method_type = get_method_types().get(method_id)
    if method_type is None:
        logger.info(f"Shipping method type '{method_id}' is not registered")
    return method_type
