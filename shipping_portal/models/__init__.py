"""
https://docs.djangoproject.com/en/4.2/topics/db/models/#organizing-models-in-a-package

Explicitly importing each model rather than using `from .models import *` has the advantages of not cluttering
the namespace, making code more readable, and keeping code analysis tools useful.
"""

from .shippingzone import ShippingZone
from .shippingzonemethod import ShippingZoneMethod
from .shippingoption import ShippingOption
