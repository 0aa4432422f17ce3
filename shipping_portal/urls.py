from django.urls import path, include, re_path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

from shipping_portal.routers import OptionalSlashDefaultRouter, OptionalSlashNestedRouter
from shipping_portal.viewsets.shippingzone import ShippingZoneViewSet
from shipping_portal.viewsets.shippingzonemethod import ShippingZoneMethodViewSet

router = OptionalSlashDefaultRouter()
router.register(r'zones', ShippingZoneViewSet, basename='zones')

# /zones/{zone_pk}/methods[/{pk}]
zones_router = OptionalSlashNestedRouter(router, r'zones', lookup='zone')
zones_router.register(r'methods', ShippingZoneMethodViewSet, basename='zone-methods')

schema_view = get_schema_view(
    openapi.Info(
        title="Shipping Zone Methods API",
        default_version='v1',
        description="Shipping zones and their shipping method instances",
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
    patterns=[path('', include(router.urls)), path('', include(zones_router.urls)), ],
)

urlpatterns = [
    re_path(r'^swagger(?P<format>\.json|\.yaml)$', schema_view.without_ui(cache_timeout=0), name='schema-json'),
    re_path(r'^swagger/$', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    re_path(r'^redoc/$', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
    path('', include(router.urls)),
    path('', include(zones_router.urls)),
]

handler404 = 'shipping_portal.views.not_found'
handler500 = 'shipping_portal.views.server_error'
