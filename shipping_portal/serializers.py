from collections import OrderedDict

from rest_framework import serializers
from rest_framework.reverse import reverse

from shipping_processors.domain.method_type import MethodInstance, absint
from shipping_processors.domain.zone import Zone

VIEW_CONTEXT = 'view'
EDIT_CONTEXT = 'edit'


def get_request_context(request) -> str:
    """
    Response context, `view` unless `?context=edit` is asked
    """
    if request is None:
        return VIEW_CONTEXT
    context = request.query_params.get('context', VIEW_CONTEXT)
    return EDIT_CONTEXT if context == EDIT_CONTEXT else VIEW_CONTEXT


class AbsIntField(serializers.Field):
    """
    Coerce any input into non-negative integer, never fails validation
    """

    def to_internal_value(self, data):
        return absint(data)

    def to_representation(self, value):
        return int(value)


class ShippingZoneSerializer(serializers.Serializer):
    id = serializers.IntegerField(source='zone_id', read_only=True)
    name = serializers.CharField(read_only=True)
    order = serializers.IntegerField(read_only=True)

    def to_representation(self, instance: Zone):
        data = super().to_representation(instance)

        request = self.context.get('request')
        data['_links'] = {
            'self': {
                'href': reverse('zones-detail', kwargs={'pk': instance.zone_id}, request=request),
            },
            'collection': {
                'href': reverse('zones-list', request=request),
            },
            'methods': {
                'href': reverse('zone-methods-list', kwargs={'zone_pk': instance.zone_id}, request=request),
            },
        }
        return data

    def update(self, instance, validated_data):
        pass

    def create(self, validated_data):
        pass


class ShippingZoneMethodSerializer(serializers.Serializer):
    """
    Shipping zone method representation

    Fields visible in `edit` context: order, enabled, settings, method_id. All fields are visible in `view` context.
    `_links` are always present.
    """
    EDIT_CONTEXT_FIELDS = ['order', 'enabled', 'method_id', 'settings']

    instance_id = serializers.IntegerField(read_only=True)
    title = serializers.CharField(read_only=True, allow_null=True)
    order = serializers.IntegerField(read_only=True)
    enabled = serializers.BooleanField(read_only=True)
    method_id = serializers.CharField(read_only=True)
    method_title = serializers.CharField(read_only=True)
    method_description = serializers.CharField(read_only=True)
    settings = serializers.SerializerMethodField()

    def get_settings(self, obj: MethodInstance) -> OrderedDict:
        """
        Join method type form field declarations with the instance persisted values. No persisted value is null.
        """
        settings = OrderedDict()

        for key, form_field in obj.method_type.instance_form_fields().items():
            data = OrderedDict(
                id=key,
                label=form_field.title,
                description=form_field.description or '',
                type=form_field.type.value,
                value=obj.settings.get(key),
                default=form_field.default or '',
                tip=form_field.description or '',
                placeholder=form_field.placeholder or '',
            )
            if form_field.options:
                data['options'] = dict(form_field.options)
            settings[key] = data

        return settings

    def to_representation(self, instance: MethodInstance):
        data = super().to_representation(instance)

        if self.context.get('context', get_request_context(self.context.get('request'))) == EDIT_CONTEXT:
            data = OrderedDict((k, v) for k, v in data.items() if k in self.EDIT_CONTEXT_FIELDS)

        request = self.context.get('request')
        zone_id = instance.zone_id
        data['_links'] = {
            'self': {
                'href': reverse('zone-methods-detail', kwargs={'zone_pk': zone_id, 'pk': instance.instance_id},
                                request=request),
            },
            'collection': {
                'href': reverse('zone-methods-list', kwargs={'zone_pk': zone_id}, request=request),
            },
            'describes': {
                'href': reverse('zones-detail', kwargs={'pk': zone_id}, request=request),
            },
        }
        return data

    def update(self, instance, validated_data):
        pass

    def create(self, validated_data):
        pass


class ShippingZoneMethodUpdateSerializer(serializers.Serializer):
    """
    Request body of update. Only keys present in the request end up in validated_data.
    """
    order = AbsIntField(required=False)
    enabled = serializers.BooleanField(required=False)
    settings = serializers.DictField(required=False)

    def update(self, instance, validated_data):
        pass

    def create(self, validated_data):
        pass


class ShippingZoneMethodCreateSerializer(ShippingZoneMethodUpdateSerializer):
    # write on create only
    method_id = serializers.CharField()


class ShippingZoneMethodDeleteSerializer(ShippingZoneMethodUpdateSerializer):
    force = serializers.BooleanField(required=False, default=False)
