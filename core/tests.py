"""
Tests for the shared error handling and rate limiting.
"""
import uuid
from unittest.mock import MagicMock, patch

import redis
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.exceptions import ParseError, PermissionDenied

from core import rate_limiting
from core.exceptions import InvalidRequest, NotFound, StoreError, api_exception_handler


class ExceptionHandlerTestCase(TestCase):
    """Test cases for api_exception_handler."""

    def _handle(self, exc):
        return api_exception_handler(exc, {'view': None})

    def test_service_errors_map_to_status(self):
        cases = [
            (InvalidRequest('stockId is required'), 400, 'Validation Error'),
            (NotFound('product not found'), 404, 'Not Found'),
            (StoreError('failed to fetch products'), 500, 'Server Error'),
        ]
        for exc, expected_status, expected_error in cases:
            response = self._handle(exc)

            self.assertEqual(response.status_code, expected_status)
            self.assertEqual(response.data, {'error': expected_error, 'detail': exc.detail})

    def test_parse_error_is_validation_error(self):
        response = self._handle(ParseError('JSON parse error - Expecting value'))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data, {'error': 'Validation Error', 'detail': 'invalid JSON payload'}
        )

    def test_framework_errors_pass_through(self):
        response = self._handle(PermissionDenied())

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_unexpected_error_hides_detail(self):
        response = self._handle(KeyError('secret internals'))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(
            response.data,
            {'error': 'Server Error', 'detail': 'An unexpected error occurred'}
        )


class RateLimitTestCase(TestCase):
    """
    Test cases for RateLimitMixin on the inventory views.
    Redis is replaced with a mock client.
    """

    def setUp(self):
        self.redis = MagicMock()
        self.redis.ttl.return_value = 42
        patcher = patch.object(rate_limiting, 'get_redis_client', return_value=self.redis)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.payload = {'UserID': str(uuid.uuid4()), 'StockName': 'Main'}

    @override_settings(RATE_LIMIT_ENABLED=True)
    def test_request_within_limit_gets_headers(self):
        self.redis.incr.return_value = 1

        response = self.client.post('/api/warehouse', self.payload, content_type='application/json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response['X-RateLimit-Remaining'], '59')
        self.redis.expire.assert_called_once()

    @override_settings(RATE_LIMIT_ENABLED=True)
    def test_request_over_limit_rejected(self):
        self.redis.incr.return_value = 61

        response = self.client.post('/api/warehouse', self.payload, content_type='application/json')

        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)
        self.assertEqual(response.json()['retry_after'], 42)
        self.assertEqual(response['Retry-After'], '42')

    @override_settings(RATE_LIMIT_ENABLED=True)
    def test_reads_are_not_limited(self):
        response = self.client.get('/api/warehouse', {'userId': str(uuid.uuid4())})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.redis.incr.assert_not_called()

    @override_settings(RATE_LIMIT_ENABLED=True)
    def test_redis_error_fails_open(self):
        self.redis.incr.side_effect = redis.ConnectionError('down')

        response = self.client.post('/api/warehouse', self.payload, content_type='application/json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    @override_settings(RATE_LIMIT_ENABLED=False)
    def test_disabled_by_setting(self):
        response = self.client.post('/api/warehouse', self.payload, content_type='application/json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.redis.incr.assert_not_called()

    @override_settings(RATE_LIMIT_ENABLED=True)
    def test_detail_view_deletes_are_limited(self):
        self.redis.incr.return_value = 61

        response = self.client.delete(f'/api/products/{uuid.uuid4()}')

        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)
        key = self.redis.incr.call_args[0][0]
        self.assertTrue(key.startswith('rate_limit:ProductDetailView:'))
