# -*- coding: utf-8 -*-
"""method type domain module

A ShippingMethodType describes one class of shipping method, e.g. flat rate. It declares the settings form fields an
instance of it accepts and the option key under which an instance's settings are persisted.

Form field values are validated at the boundary through FormField.clean(). Each FieldType is a tag of the union of
accepted value shapes: text, price, select and checkbox.
"""
import logging
from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class FieldType(Enum):
    TEXT = "text"
    PRICE = "price"
    SELECT = "select"
    CHECKBOX = "checkbox"


class InvalidFieldValue(ValueError):
    """
    Raised when a settings value does not fit its declared form field type
    """
    def __init__(self, key: str, val: Any, error: str = '', *args: object) -> None:
        self.key = key
        super().__init__('Invalid value for setting %s: %s. %s' % (key, val, error), *args)


@dataclass
class FormField:
    key: str
    type: FieldType
    title: str
    description: str = ''
    default: Any = ''
    placeholder: str = ''
    options: Optional[Dict[str, str]] = None

    def clean(self, value: Any) -> str:
        """
        Normalise the raw request value into its persisted string form, or raise InvalidFieldValue
        """
        if self.type == FieldType.CHECKBOX:
            return to_yes_no(value, key=self.key)

        if value is None:
            raise InvalidFieldValue(self.key, value, 'Value must not be null.')

        if isinstance(value, (dict, list)):
            raise InvalidFieldValue(self.key, value, 'Value must be a scalar.')

        value = str(value).strip()

        if self.type == FieldType.SELECT:
            if self.options is None or value not in self.options:
                raise InvalidFieldValue(self.key, value, f"Must be one of {list(self.options or {})}.")
            return value

        if self.type == FieldType.PRICE:
            if value == '':
                return value
            try:
                Decimal(value)
            except InvalidOperation:
                raise InvalidFieldValue(self.key, value, 'Must be a number.')
            return value

        return value


class ShippingMethodType(ABC):
    """
    Interface every shipping method type implements

    Subclass, set `id`, `method_title`, `method_description`, then declare form fields. To enable it, add its dotted
    path to SHIPPING_METHOD_TYPES Django setting.
    """
    id: str = None
    method_title: str = None
    method_description: str = None

    @abstractmethod
    def instance_form_fields(self) -> 'OrderedDict[str, FormField]':
        pass

    def instance_option_key(self, instance_id: int) -> str:
        return f"shipping_{self.id}_{instance_id}_settings"

    def default_instance_settings(self) -> dict:
        return {key: f.default for key, f in self.instance_form_fields().items()}

    def process_instance_settings(self, values: dict) -> dict:
        """
        Hook to adjust merged settings values right before they get persisted. Default pass through.
        """
        return values

    def __str__(self):
        return f"METHOD_TYPE: {self.id}, TITLE: {self.method_title}"


def to_yes_no(value: Any, key: str = 'enabled') -> str:
    return "yes" if to_enabled_flag(value, key=key) else "no"


def to_enabled_flag(value: Any, key: str = 'enabled') -> bool:
    """
    Normalise boolean-ish input i.e. True/False, "yes"/"no", "true"/"false", 1/0 into bool
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, int) and value in (0, 1):
        return bool(value)

    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ["yes", "true", "1", "on"]:
            return True
        if lowered in ["no", "false", "0", "off", ""]:
            return False

    raise InvalidFieldValue(key, value, 'Must be a boolean.')


def absint(value: Any) -> int:
    """
    Coerce into non-negative integer i.e. abs(int(value)). Anything not numeric becomes 0.
    """
    try:
        return abs(int(value))
    except (TypeError, ValueError, OverflowError):
        pass

    try:
        return abs(int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return 0


def form_fields(*fields: FormField) -> 'OrderedDict[str, FormField]':
    return OrderedDict((f.key, f) for f in fields)


@dataclass
class MethodInstance:
    """
    Typed view of one shipping method attached to a zone, joined with its method type and persisted settings
    """
    instance_id: int
    zone_id: int
    method_type: ShippingMethodType
    order: int = 0
    enabled: bool = True
    settings: dict = field(default_factory=dict)

    @property
    def method_id(self) -> str:
        return self.method_type.id

    @property
    def method_title(self) -> str:
        return self.method_type.method_title

    @property
    def method_description(self) -> str:
        return self.method_type.method_description

    @property
    def title(self) -> Optional[str]:
        return self.settings.get('title')

    def get_instance_option_key(self) -> str:
        return self.method_type.instance_option_key(self.instance_id)
