# -*- coding: utf-8 -*-
"""services package

This package contain the data access layer impls; to and from database through Django ORM models. zone_srv is the zone
repository, option_srv is the settings store and zone_method_srv is the zone method handler built on top of both.

It also serve as transactional boundary. If you need to persist into database then probably it should live within
this package. Hence, please avoid doing SomeModel.save() in elsewhere and/or in Controller layer like viewsets package.
"""
