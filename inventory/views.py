"""
Inventory API Views.

Implements:
- GET/POST /api/warehouse, DELETE /api/warehouse/{stockId}
- GET/POST /api/products, PUT/DELETE /api/products/{productId}
- GET/POST /api/categories, DELETE /api/categories/{categoryId}

Views parse the request and serialize the result. Validation and
persistence are in services.py; errors are rendered by
core.exceptions.api_exception_handler.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.rate_limiting import RateLimitMixin
from . import services
from .serializers import (
    CategoryCreateSerializer,
    CategorySerializer,
    ProductCreateSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
    WarehouseCreateSerializer,
    WarehouseSerializer,
    parse_payload,
)
from .store import default_store


class StoreView(APIView):
    """Base view holding the store handed to the service layer."""
    store = default_store


# =============================================================================
# Warehouse Views
# =============================================================================

class WarehouseListCreateView(RateLimitMixin, StoreView):
    """
    GET: List warehouses owned by ?userId=
    POST: Create a warehouse
    """

    def get(self, request):
        stocks = services.list_warehouse(self.store, request.query_params.get('userId'))
        return Response(WarehouseSerializer(stocks, many=True).data)

    def post(self, request):
        data = parse_payload(WarehouseCreateSerializer, request.data)
        stock = services.create_warehouse(self.store, data)
        return Response(WarehouseSerializer(stock).data, status=status.HTTP_201_CREATED)


class WarehouseDetailView(RateLimitMixin, StoreView):
    """
    DELETE: Delete a warehouse and every product stored in it.
    """

    def delete(self, request, stock_id):
        deleted_stock, deleted_products = services.delete_warehouse(self.store, stock_id)
        return Response({
            'deleted_stock': deleted_stock,
            'deleted_relatedProducts': deleted_products,
        })


# =============================================================================
# Product Views
# =============================================================================

class ProductListCreateView(RateLimitMixin, StoreView):
    """
    GET: List products in warehouse ?stockId=
    POST: Create a product
    """

    def get(self, request):
        products = services.list_products(self.store, request.query_params.get('stockId'))
        return Response(ProductSerializer(products, many=True).data)

    def post(self, request):
        data = parse_payload(ProductCreateSerializer, request.data)
        product = services.create_product(self.store, data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class ProductDetailView(RateLimitMixin, StoreView):
    """
    PUT: Sparse update of a product
    DELETE: Delete a product

    Request Body (PUT), all fields optional:
    {"ProductName": "...", "Category": "...", "Unit": "...", "ProductQty": 3}
    """

    def put(self, request, product_id):
        # The identifier is checked before the body is read.
        product_id = services.parse_identifier(product_id, 'productId')
        changes = parse_payload(ProductUpdateSerializer, request.data, partial=True)
        product = services.update_product(self.store, product_id, changes)
        return Response(ProductSerializer(product).data)

    def delete(self, request, product_id):
        deleted = services.delete_product(self.store, product_id)
        return Response({'deleted_product': deleted})


# =============================================================================
# Category Views
# =============================================================================

class CategoryListCreateView(RateLimitMixin, StoreView):
    """
    GET: List categories in warehouse ?stockId=
    POST: Create a batch of categories
    """

    def get(self, request):
        categories = services.list_categories(self.store, request.query_params.get('stockId'))
        return Response(CategorySerializer(categories, many=True).data)

    def post(self, request):
        entries = parse_payload(CategoryCreateSerializer, request.data, many=True)
        categories = services.create_categories(self.store, entries)
        return Response(
            CategorySerializer(categories, many=True).data,
            status=status.HTTP_201_CREATED
        )


class CategoryDetailView(RateLimitMixin, StoreView):
    """
    DELETE: Delete a category
    """

    def delete(self, request, category_id):
        deleted = services.delete_category(self.store, category_id)
        return Response({'deleted_category': deleted})
