"""
API tests for the warehouse, product and category endpoints.

Covers the request/response contract: status codes, wire field names,
error bodies, and the documented scenarios.
"""
import uuid
from unittest.mock import MagicMock, patch

from django.db import OperationalError
from rest_framework import status
from rest_framework.test import APITestCase

from inventory.models import Category, Product, Warehouse
from inventory.store import DocumentStore
from inventory.views import ProductListCreateView


class WarehouseAPITestCase(APITestCase):
    """Test cases for /api/warehouse."""

    def setUp(self):
        self.user_id = str(uuid.uuid4())

    def test_create_then_delete_warehouse(self):
        """
        Test: Create a warehouse, then delete it.

        Given: A valid UserID
        When: POST then DELETE /api/warehouse/{StockID}
        Then: 201 with a new StockID, then 200 with counts (1, 0)
        """
        response = self.client.post(
            '/api/warehouse', {'UserID': self.user_id, 'StockName': 'Main'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(set(body), {'StockID', 'UserID', 'StockName'})
        self.assertEqual(body['UserID'], self.user_id)
        self.assertEqual(body['StockName'], 'Main')
        self.assertEqual(str(uuid.UUID(body['StockID'])), body['StockID'])

        response = self.client.delete(f"/api/warehouse/{body['StockID']}")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {'deleted_stock': 1, 'deleted_relatedProducts': 0})

    def test_generated_ids_are_unique(self):
        ids = set()
        for _ in range(5):
            response = self.client.post(
                '/api/warehouse', {'UserID': self.user_id, 'StockName': 'Main'}, format='json'
            )
            ids.add(response.json()['StockID'])

        self.assertEqual(len(ids), 5)

    def test_list_warehouse_by_user(self):
        Warehouse.objects.create(user_id=self.user_id, stock_name='Main')
        Warehouse.objects.create(user_id=self.user_id, stock_name='Garage')
        Warehouse.objects.create(user_id=uuid.uuid4(), stock_name='Not mine')

        response = self.client.get('/api/warehouse', {'userId': f' {self.user_id} '})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            sorted(w['StockName'] for w in response.json()), ['Garage', 'Main']
        )

    def test_list_warehouse_empty(self):
        response = self.client.get('/api/warehouse', {'userId': self.user_id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [])

    def test_list_warehouse_requires_user(self):
        response = self.client.get('/api/warehouse')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.json(), {'error': 'Validation Error', 'detail': 'userId is required'}
        )

    def test_create_warehouse_validation(self):
        response = self.client.post(
            '/api/warehouse', {'UserID': 'someone', 'StockName': 'Main'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'UserID must be a valid UUID')
        self.assertEqual(Warehouse.objects.count(), 0)

    def test_delete_warehouse_removes_products(self):
        stock = Warehouse.objects.create(user_id=self.user_id, stock_name='Main')
        Product.objects.create(stock_id=stock.stock_id, product_name='Rice', product_qty=2)
        Product.objects.create(stock_id=stock.stock_id, product_name='Beans', product_qty=4)

        response = self.client.delete(f'/api/warehouse/{stock.stock_id}')

        self.assertEqual(response.json(), {'deleted_stock': 1, 'deleted_relatedProducts': 2})
        self.assertEqual(Product.objects.count(), 0)

    def test_delete_warehouse_invalid_id(self):
        response = self.client.delete('/api/warehouse/not-a-uuid')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'stockId must be a valid UUID')


class ProductAPITestCase(APITestCase):
    """Test cases for /api/products."""

    def setUp(self):
        self.stock_id = uuid.uuid4()
        self.product = Product.objects.create(
            stock_id=self.stock_id,
            product_name='Rice',
            category='Food',
            unit='kg',
            product_qty=5
        )
        self.detail_url = f'/api/products/{self.product.product_id}'

    def test_create_product(self):
        payload = {
            'StockID': str(self.stock_id),
            'ProductName': '  Flour ',
            'Category': 'Food',
            'Unit': 'kg',
            'ProductQty': 3,
        }

        response = self.client.post('/api/products', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(
            set(body), {'ProductID', 'StockID', 'ProductName', 'Category', 'Unit', 'ProductQty'}
        )
        self.assertEqual(body['ProductName'], 'Flour')
        self.assertEqual(body['ProductQty'], 3)
        self.assertEqual(body['StockID'], str(self.stock_id))
        self.assertTrue(Product.objects.filter(product_id=body['ProductID']).exists())

    def test_create_product_without_quantity(self):
        """
        Test: ProductQty is mandatory at creation.
        """
        payload = {'StockID': str(self.stock_id), 'ProductName': 'Flour'}

        response = self.client.post('/api/products', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.json(),
            {'error': 'Validation Error', 'detail': 'ProductQty must be provided'}
        )

    def test_create_product_malformed_json(self):
        response = self.client.post(
            '/api/products', data='{"StockID": ', content_type='application/json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'invalid JSON payload')

    def test_create_product_wrong_types(self):
        for payload in ([{'ProductName': 'Flour'}], {'ProductQty': 'lots'}):
            response = self.client.post('/api/products', payload, format='json')

            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.json()['detail'], 'invalid JSON payload')

    def test_create_product_quantity_out_of_range(self):
        """
        Test: A quantity beyond the column range is a client error, not a 500.
        """
        for qty in (10 ** 20, 2 ** 31, -2 ** 31 - 1):
            payload = {'StockID': str(self.stock_id), 'ProductName': 'Flour', 'ProductQty': qty}

            response = self.client.post('/api/products', payload, format='json')

            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(
                response.json(),
                {'error': 'Validation Error', 'detail': 'invalid JSON payload'}
            )
        self.assertEqual(Product.objects.count(), 1)

    def test_create_product_quantity_must_be_integer(self):
        for qty in ('7', 2.5, True):
            payload = {'StockID': str(self.stock_id), 'ProductName': 'Flour', 'ProductQty': qty}

            response = self.client.post('/api/products', payload, format='json')

            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.json()['detail'], 'invalid JSON payload')
        self.assertEqual(Product.objects.count(), 1)

    def test_list_products(self):
        Product.objects.create(stock_id=uuid.uuid4(), product_name='Other', product_qty=1)

        response = self.client.get('/api/products', {'stockId': str(self.stock_id)})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [p['ProductID'] for p in response.json()], [str(self.product.product_id)]
        )

    def test_list_products_invalid_stock(self):
        response = self.client.get('/api/products', {'stockId': 'abc'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'stockId must be a valid UUID')

    def test_update_whitespace_category_becomes_null(self):
        """
        Test: PUT {"Category": "  "} stores null, not whitespace.
        """
        response = self.client.put(self.detail_url, {'Category': '  '}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertIsNone(body['Category'])
        self.assertEqual(body['ProductName'], 'Rice')
        self.assertEqual(body['ProductQty'], 5)

    def test_update_returns_full_record(self):
        response = self.client.put(
            self.detail_url, {'ProductName': ' Brown Rice ', 'ProductQty': 9}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {
            'ProductID': str(self.product.product_id),
            'StockID': str(self.stock_id),
            'ProductName': 'Brown Rice',
            'Category': 'Food',
            'Unit': 'kg',
            'ProductQty': 9,
        })

    def test_update_with_empty_body(self):
        for payload in ({}, {'Unknown': 'x'}, {'ProductName': None}):
            response = self.client.put(self.detail_url, payload, format='json')

            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(
                response.json()['detail'], 'provide at least one field to update'
            )

    def test_update_negative_quantity(self):
        response = self.client.put(self.detail_url, {'ProductQty': -3}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'ProductQty cannot be negative')

    def test_update_quantity_out_of_range(self):
        response = self.client.put(self.detail_url, {'ProductQty': 10 ** 20}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'invalid JSON payload')
        self.product.refresh_from_db()
        self.assertEqual(self.product.product_qty, 5)

    def test_update_quantity_rejects_string(self):
        response = self.client.put(self.detail_url, {'ProductQty': '7'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'invalid JSON payload')

    def test_update_missing_product(self):
        response = self.client.put(
            f'/api/products/{uuid.uuid4()}', {'ProductQty': 1}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json(), {'error': 'Not Found', 'detail': 'product not found'})

    def test_update_checks_identifier_before_body(self):
        response = self.client.put(
            '/api/products/123', data='not json', content_type='application/json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'productId must be a valid UUID')

    def test_delete_product(self):
        response = self.client.delete(self.detail_url)
        self.assertEqual(response.json(), {'deleted_product': 1})

        response = self.client.delete(self.detail_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {'deleted_product': 0})

    def test_store_failure_is_generic_server_error(self):
        broken_store = MagicMock(spec=DocumentStore)
        broken_store.products.filter.side_effect = OperationalError('could not connect to server')

        with patch.object(ProductListCreateView, 'store', broken_store):
            response = self.client.get('/api/products', {'stockId': str(self.stock_id)})

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(
            response.json(), {'error': 'Server Error', 'detail': 'failed to fetch products'}
        )


class CategoryAPITestCase(APITestCase):
    """Test cases for /api/categories."""

    def setUp(self):
        self.stock_id = str(uuid.uuid4())

    def _payload(self, count):
        return [
            {'StockID': self.stock_id, 'CategoryName': f'Category {i}', 'Discription': 'Shelf A'}
            for i in range(count)
        ]

    def test_bulk_create(self):
        payload = self._payload(2)
        payload[1]['Discription'] = '   '

        response = self.client.post('/api/categories', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(len(body), 2)
        self.assertEqual(body[0]['Discription'], 'Shelf A')
        self.assertNotIn('Discription', body[1])
        self.assertEqual(Category.objects.filter(stock_id=self.stock_id).count(), 2)

    def test_bulk_create_invalid_middle_element(self):
        """
        Test: An invalid element at N/2 aborts the batch.

        Given: 8 elements, element 4 has a malformed StockID
        When: POST /api/categories
        Then: 400 naming index 4, no categories stored
        """
        payload = self._payload(8)
        payload[4]['StockID'] = 'bad-id'

        response = self.client.post('/api/categories', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'StockID at index 4 must be a valid UUID')
        self.assertEqual(Category.objects.count(), 0)

    def test_bulk_create_empty(self):
        response = self.client.post('/api/categories', [], format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'at least one category is required')

    def test_bulk_create_requires_array(self):
        response = self.client.post('/api/categories', self._payload(1)[0], format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['detail'], 'invalid JSON payload')

    def test_list_and_delete_category(self):
        self.client.post('/api/categories', self._payload(3), format='json')

        response = self.client.get('/api/categories', {'stockId': self.stock_id})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        categories = response.json()
        self.assertEqual(len(categories), 3)

        response = self.client.delete(f"/api/categories/{categories[0]['CategoryID']}")
        self.assertEqual(response.json(), {'deleted_category': 1})
        self.assertEqual(Category.objects.count(), 2)

    def test_delete_missing_category(self):
        response = self.client.delete(f'/api/categories/{uuid.uuid4()}')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {'deleted_category': 0})


class HealthCheckTestCase(APITestCase):

    def test_health(self):
        response = self.client.get('/api/health')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {'status': 'healthy', 'service': 'warehouse-api'})
