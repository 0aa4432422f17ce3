# -*- coding: utf-8 -*-
"""methods domain module

Built-in shipping method types. Which ones are available to zones is controlled by SHIPPING_METHOD_TYPES setting.
See registry module.
"""
from shipping_processors.domain.method_type import ShippingMethodType, FormField, FieldType, form_fields

TAX_STATUS_OPTIONS = {
    'taxable': "Taxable",
    'none': "None",
}


class FlatRate(ShippingMethodType):
    id = "flat_rate"
    method_title = "Flat rate"
    method_description = "Lets you charge a fixed rate for shipping."

    def instance_form_fields(self):
        return form_fields(
            FormField(
                key='title',
                type=FieldType.TEXT,
                title="Method title",
                description="This controls the title which the user sees during checkout.",
                default="Flat rate",
            ),
            FormField(
                key='tax_status',
                type=FieldType.SELECT,
                title="Tax status",
                default='taxable',
                options=TAX_STATUS_OPTIONS,
            ),
            FormField(
                key='cost',
                type=FieldType.PRICE,
                title="Cost",
                default='0',
                placeholder='0',
            ),
        )


class FreeShipping(ShippingMethodType):
    id = "free_shipping"
    method_title = "Free shipping"
    method_description = "Free shipping is a special method which can be triggered with coupons and minimum spends."

    REQUIRES_OPTIONS = {
        '': "N/A",
        'coupon': "A valid free shipping coupon",
        'min_amount': "A minimum order amount",
        'either': "A minimum order amount OR a coupon",
        'both': "A minimum order amount AND a coupon",
    }

    def instance_form_fields(self):
        return form_fields(
            FormField(
                key='title',
                type=FieldType.TEXT,
                title="Title",
                description="This controls the title which the user sees during checkout.",
                default="Free shipping",
            ),
            FormField(
                key='requires',
                type=FieldType.SELECT,
                title="Free shipping requires...",
                default='',
                options=self.REQUIRES_OPTIONS,
            ),
            FormField(
                key='min_amount',
                type=FieldType.PRICE,
                title="Minimum order amount",
                description="Users will need to spend this amount to get free shipping (if enabled above).",
                default='0',
                placeholder='0',
            ),
        )

    def process_instance_settings(self, values: dict) -> dict:
        # blank minimum amount is stored as zero
        if not values.get('min_amount'):
            values['min_amount'] = '0'
        return values


class LocalPickup(ShippingMethodType):
    id = "local_pickup"
    method_title = "Local pickup"
    method_description = "Allow customers to pick up orders themselves. " \
                         "By default, when using local pickup store base taxes will apply regardless of customer " \
                         "address."

    def instance_form_fields(self):
        return form_fields(
            FormField(
                key='title',
                type=FieldType.TEXT,
                title="Title",
                description="This controls the title which the user sees during checkout.",
                default="Local pickup",
            ),
            FormField(
                key='tax_status',
                type=FieldType.SELECT,
                title="Tax status",
                default='taxable',
                options=TAX_STATUS_OPTIONS,
            ),
            FormField(
                key='cost',
                type=FieldType.PRICE,
                title="Cost",
                description="Optional cost for local pickup.",
                default='',
                placeholder='0',
            ),
        )
