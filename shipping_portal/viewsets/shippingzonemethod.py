# -*- coding: utf-8 -*-
"""viewsets module

NOTE:
     This is DRF based Shipping Zone Methods API impls.
     /zones/{zone_id}/methods[/{instance_id}]
"""
import logging

from rest_framework import status, parsers
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from shipping_portal.permissions import ShippingSettingsPermission
from shipping_portal.serializers import ShippingZoneMethodSerializer, ShippingZoneMethodCreateSerializer, \
    ShippingZoneMethodUpdateSerializer, ShippingZoneMethodDeleteSerializer, VIEW_CONTEXT
from shipping_processors.domain.method_type import to_enabled_flag, InvalidFieldValue
from shipping_processors.services import zone_method_srv

logger = logging.getLogger(__name__)


class ShippingZoneMethodViewSet(ViewSet):
    parser_classes = [parsers.JSONParser]
    permission_classes = [ShippingSettingsPermission]
    permission_model = 'shippingzonemethod'
    lookup_value_regex = '[0-9-]+'

    def _represent(self, method, **extra_context):
        context = {'request': self.request}
        context.update(extra_context)
        return ShippingZoneMethodSerializer(method, context=context).data

    def list(self, request, zone_pk=None):
        zone, methods = zone_method_srv.list_zone_methods(zone_pk)
        return Response(
            ShippingZoneMethodSerializer(methods, many=True, context={'request': request}).data
        )

    def retrieve(self, request, pk=None, zone_pk=None):
        zone, method = zone_method_srv.get_zone_method(zone_pk, pk)
        return Response(self._represent(method))

    def create(self, request, zone_pk=None):
        serializer = ShippingZoneMethodCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        fields = dict(serializer.validated_data)
        method_id = fields.pop('method_id')

        zone, method = zone_method_srv.create_zone_method(zone_pk, method_id, fields)
        return Response(self._represent(method), status=status.HTTP_201_CREATED)

    def update(self, request, pk=None, zone_pk=None, **kwargs):
        serializer = ShippingZoneMethodUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        zone, method = zone_method_srv.update_zone_method(zone_pk, pk, dict(serializer.validated_data))
        return Response(self._represent(method))

    def partial_update(self, request, pk=None, zone_pk=None):
        return self.update(request, pk=pk, zone_pk=zone_pk, partial=True)

    def destroy(self, request, pk=None, zone_pk=None):
        serializer = ShippingZoneMethodDeleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        fields = dict(serializer.validated_data)
        force = fields.pop('force', False)

        force_param = request.query_params.get('force', None)
        if force_param is not None:
            try:
                force = to_enabled_flag(force_param, key='force')
            except InvalidFieldValue:
                force = False

        snapshot = zone_method_srv.delete_zone_method(
            zone_pk,
            pk,
            force=force,
            fields=fields,
            represent=lambda zone, method: self._represent(method, context=VIEW_CONTEXT),
            request=request,
        )
        return Response(snapshot)

    def handle_exception(self, exc):
        if not isinstance(exc, APIException):
            logger.exception(exc)
        return super(ShippingZoneMethodViewSet, self).handle_exception(exc)
