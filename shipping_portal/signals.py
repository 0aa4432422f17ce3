# -*- coding: utf-8 -*-
"""signals module

Notifications the shipping zone method handler sends synchronously. Connect receivers at process wiring time, e.g. in
AppConfig.ready(). See receivers module.

shipping_zone_method_status_toggled
    sent once per successful enabled write; kwargs: instance_id, method_id, zone_id, enabled

shipping_zone_method_deleted
    sent after forced deletion; kwargs: method (MethodInstance snapshot), response (dict), request
"""
from django.dispatch import Signal

shipping_zone_method_status_toggled = Signal()

shipping_zone_method_deleted = Signal()
