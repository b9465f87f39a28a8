from directus_sync.services.mapper import map_directus_to_medusa, map_product_data


class TestMapProductData:
    def test_full_product(self):
        product = {
            'id': 'prod_01',
            'title': 'Medusa Hoodie',
            'description': 'Warm',
            'handle': 'medusa-hoodie',
            'updated_at': '2024-05-01T10:00:00.000Z',
            'variants': [
                {'sku': 'HOOD-M', 'prices': [{'amount': 4500}, {'amount': 5000}]},
                {'sku': 'HOOD-L', 'prices': [{'amount': 9900}]},
            ],
            'metadata': {'syncSource': 'directus', 'syncId': 'x1', 'lastSyncedAt': '2024-05-01T09:00:00.000Z'},
        }
        result = map_product_data(product)
        assert result == {
            'name': 'Medusa Hoodie',
            'description': 'Warm',
            'price': 4500,
            'slug': 'medusa-hoodie',
            'sku': 'HOOD-M',
            'medusa_reference_id': 'prod_01',
            'date_updated': '2024-05-01T10:00:00.000Z',
            'metadata': {'syncId': 'x1', 'syncSource': 'directus', 'lastSyncedAt': '2024-05-01T09:00:00.000Z'},
        }

    def test_missing_price_and_sku_default(self):
        result = map_product_data({'id': 'P1', 'title': 'Bare'})
        assert result['price'] == 0
        assert result['sku'] == ''

    def test_empty_variants_and_prices(self):
        assert map_product_data({'variants': []})['price'] == 0
        assert map_product_data({'variants': [{'prices': []}]})['price'] == 0
        assert map_product_data({'variants': [None]})['sku'] == ''

    def test_null_amount_defaults_to_zero(self):
        product = {'variants': [{'sku': None, 'prices': [{'amount': None}]}]}
        result = map_product_data(product)
        assert result['price'] == 0
        assert result['sku'] == ''

    def test_none_product(self):
        result = map_product_data(None)
        assert result['name'] is None
        assert result['metadata'] == {'syncId': None, 'syncSource': None, 'lastSyncedAt': None}


class TestMapDirectusToMedusa:
    def test_editorial_fields(self):
        item = {'id': 7, 'name': 'Hoodie', 'description': 'Soft', 'slug': 'hoodie', 'price': 10}
        assert map_directus_to_medusa(item) == {'title': 'Hoodie', 'description': 'Soft', 'handle': 'hoodie'}

    def test_none_fields_are_omitted(self):
        assert map_directus_to_medusa({'name': 'Hoodie', 'description': None}) == {'title': 'Hoodie'}
