# -*- coding: utf-8 -*-
"""migrate lambda module

Applies shipping_portal schema migrations on deploy. Invoke with an empty event to migrate to latest, or with
{"migration": "0001"} to move shipping_portal to the given migration.
"""
import logging
import os

import django
from django.core.management import call_command

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'shipping_portal.settings.base')

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def handler(event, context) -> str:
    django.setup()

    migration = (event or {}).get('migration')
    if migration:
        call_command('migrate', 'shipping_portal', migration, interactive=False)
    else:
        call_command('migrate', interactive=False)

    logger.info(f"Migrated shipping_portal to {migration or 'latest'}")
    return 'Migration complete.'
