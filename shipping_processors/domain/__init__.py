# -*- coding: utf-8 -*-
"""domain package

Domain objects for shipping zone methods live here. They are not necessarily persistence entities (i.e. Django ORM
models). Think of them as Struct or DTO carriers, e.g. MethodInstance, and as plugin-like interfaces, e.g.
ShippingMethodType that declare what a method type looks like and which settings fields it accepts.

Persistence of these objects is the job of the services package.
"""
