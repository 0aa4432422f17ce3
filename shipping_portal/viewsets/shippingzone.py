# -*- coding: utf-8 -*-
"""viewsets module

NOTE:
     This is DRF based Shipping Zones API impls. Read only; zones are what zone methods `describes` link points to.
"""
import logging

from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from shipping_portal.permissions import ShippingSettingsPermission
from shipping_portal.serializers import ShippingZoneSerializer
from shipping_processors.services import zone_srv

logger = logging.getLogger(__name__)


class ShippingZoneViewSet(ViewSet):
    permission_classes = [ShippingSettingsPermission]
    permission_model = 'shippingzone'
    lookup_value_regex = '[0-9-]+'

    def list(self, request):
        zones = zone_srv.list_zones()
        return Response(ShippingZoneSerializer(zones, many=True, context={'request': request}).data)

    def retrieve(self, request, pk=None):
        zone = zone_srv.resolve_zone(pk)
        return Response(ShippingZoneSerializer(zone, context={'request': request}).data)

    def handle_exception(self, exc):
        if not isinstance(exc, APIException):
            logger.exception(exc)
        return super(ShippingZoneViewSet, self).handle_exception(exc)
