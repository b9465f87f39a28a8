from datetime import datetime, timedelta, timezone

import pytest

from directus_sync import create_app
from directus_sync.clients.directus import DirectusClient
from directus_sync.clients.medusa import MedusaClient
from directus_sync.services.sync import ProductSyncService

DIRECTUS_URL = 'https://cms.example.test'
MEDUSA_URL = 'https://shop.example.test'
ITEMS_URL = f'{DIRECTUS_URL}/items/products'


def iso_ago(seconds: float) -> str:
    ts = datetime.now(timezone.utc) - timedelta(seconds=seconds)
    return ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def medusa_product(pid='P1', metadata=None, **overrides):
    product = {
        'id': pid,
        'title': 'Medusa Hoodie',
        'description': 'Warm and soft',
        'handle': 'medusa-hoodie',
        'updated_at': '2024-05-01T10:00:00.000Z',
        'variants': [{'sku': 'HOOD-M', 'prices': [{'amount': 4500, 'currency_code': 'eur'}]}],
        'metadata': metadata,
    }
    product.update(overrides)
    return product


@pytest.fixture()
def directus():
    return DirectusClient(DIRECTUS_URL, token='directus-static-token')


@pytest.fixture()
def medusa():
    return MedusaClient(MEDUSA_URL, api_key='sk_test')


@pytest.fixture()
def service(medusa, directus):
    return ProductSyncService(medusa, directus)


@pytest.fixture()
def app(service):
    app = create_app(service=service, webhook_secret='')
    app.config['TESTING'] = True
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
