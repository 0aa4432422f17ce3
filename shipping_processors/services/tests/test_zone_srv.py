from shipping_portal.exceptions import ZoneNotFound
from shipping_portal.models import ShippingZoneMethod, ShippingOption
from shipping_portal.tests.factories import ShippingZoneFactory, ShippingZoneMethodFactory, TestConstant
from shipping_processors.domain.zone import Zone, REST_OF_THE_WORLD_ZONE_ID
from shipping_processors.services import zone_srv, option_srv
from shipping_processors.tests.case import ShippingUnitTestCase, logger


class ZoneSrvUnitTests(ShippingUnitTestCase):

    def test_resolve_zone(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_resolve_zone
        """
        zone = zone_srv.resolve_zone(str(self.zone_row.id))
        logger.info(zone)
        self.assertEqual(zone.zone_id, self.zone_row.id)
        self.assertEqual(zone.name, TestConstant.zone_name.value)

        self.assertTrue(zone_srv.resolve_zone(REST_OF_THE_WORLD_ZONE_ID).is_rest_of_the_world)

    def test_resolve_zone_not_found(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_resolve_zone_not_found
        """
        for zone_id in [TestConstant.unknown_zone_id.value, "abc", None]:
            self.assertRaises(ZoneNotFound, zone_srv.resolve_zone, zone_id)

    def test_list_zones(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_list_zones
        """
        ShippingZoneFactory(zone_name=TestConstant.zone_name2.value, zone_order=1)

        zones = zone_srv.list_zones()
        self.assertEqual([z.name for z in zones[1:]], [TestConstant.zone_name.value, TestConstant.zone_name2.value])
        self.assertTrue(zones[0].is_rest_of_the_world)

    def test_list_methods_skips_unregistered_type(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_list_methods_skips_unregistered_type
        """
        ShippingZoneMethod.objects.create(zone=self.zone_row, method_id="legacy_rate", method_order=1)

        methods = zone_srv.list_methods(zone_srv.resolve_zone(self.zone_row.id))
        self.assertEqual([m.instance_id for m in methods], [self.method_row.instance_id])

    def test_add_method(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_add_method
        """
        zone = zone_srv.resolve_zone(self.zone_row.id)
        instance_id = zone_srv.add_method(zone, TestConstant.local_pickup.value)

        row = ShippingZoneMethod.objects.get(instance_id=instance_id)
        self.assertEqual(row.zone_id, self.zone_row.id)
        self.assertEqual(row.method_order, 1)
        self.assertTrue(row.is_enabled)

        settings = option_srv.get_instance_settings(f"shipping_local_pickup_{instance_id}_settings")
        self.assertEqual(settings['title'], "Local pickup")

        self.assertIsNone(zone_srv.add_method(zone, "teleport"))

    def test_add_method_rest_of_the_world(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_add_method_rest_of_the_world
        """
        instance_id = zone_srv.add_method(Zone.rest_of_the_world(), TestConstant.flat_rate.value)

        row = ShippingZoneMethod.objects.get(instance_id=instance_id)
        self.assertIsNone(row.zone_id)
        self.assertEqual(row.method_order, 0)

        methods = zone_srv.list_methods(Zone.rest_of_the_world())
        self.assertEqual([m.instance_id for m in methods], [instance_id])

    def test_remove_method(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_remove_method
        """
        zone = zone_srv.resolve_zone(self.zone_row.id)
        method = zone_srv.list_methods(zone)[0]

        self.assertTrue(zone_srv.remove_method(zone, method))
        self.assertEqual(ShippingZoneMethod.objects.count(), 0)
        self.assertIsNone(ShippingOption.get(method.get_instance_option_key()))

    def test_get_instance_settings_malformed(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_get_instance_settings_malformed
        """
        ShippingOption.set("shipping_flat_rate_999_settings", ["not", "a", "dict"])
        self.assertEqual(option_srv.get_instance_settings("shipping_flat_rate_999_settings"), {})
        self.assertEqual(option_srv.get_instance_settings("shipping_flat_rate_1000_settings"), {})

    def test_write_enabled(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_write_enabled
        """
        self.assertFalse(option_srv.write_enabled(self.method_row.instance_id, True), 'Unchanged value')
        self.assertTrue(option_srv.write_enabled(self.method_row.instance_id, False))
        self.assertFalse(option_srv.write_enabled(TestConstant.unknown_instance_id.value, False))

    def test_list_methods_other_zone(self):
        """
        python manage.py test shipping_processors.services.tests.test_zone_srv.ZoneSrvUnitTests.test_list_methods_other_zone
        """
        ShippingZoneMethodFactory(zone=ShippingZoneFactory(zone_name=TestConstant.zone_name2.value))
        methods = zone_srv.list_methods(zone_srv.resolve_zone(self.zone_row.id))
        self.assertEqual(len(methods), 1)
