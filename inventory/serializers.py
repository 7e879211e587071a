"""
Serializers for the inventory API.

Output serializers render records with their wire field names (StockID,
ProductName, ...). Request serializers only check the shape and types of a
body and trim strings; the business rules live in services.py.
"""
from rest_framework import serializers

from core.exceptions import InvalidRequest
from .models import Category, Product, Warehouse


class TrimmedCharField(serializers.CharField):
    """Optional string field: trimmed, may be blank or null."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_blank', True)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)


class QuantityField(serializers.IntegerField):
    """
    Whole-number quantity within the range of the ProductQty column.

    JSON strings and floats are rejected rather than coerced.
    """
    MIN_QTY = -2 ** 31
    MAX_QTY = 2 ** 31 - 1

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        kwargs.setdefault('min_value', self.MIN_QTY)
        kwargs.setdefault('max_value', self.MAX_QTY)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail('invalid')
        return super().to_internal_value(data)


def parse_payload(serializer_class, data, **kwargs):
    """
    Run a request serializer and return its validated data.

    Raises:
        InvalidRequest: If the body does not have the expected shape
    """
    serializer = serializer_class(data=data, **kwargs)
    if not serializer.is_valid():
        raise InvalidRequest("invalid JSON payload")
    return serializer.validated_data


# =============================================================================
# Warehouse
# =============================================================================

class WarehouseSerializer(serializers.ModelSerializer):
    """Serializer for Warehouse records."""
    StockID = serializers.UUIDField(source='stock_id', read_only=True)
    UserID = serializers.UUIDField(source='user_id')
    StockName = serializers.CharField(source='stock_name')

    class Meta:
        model = Warehouse
        fields = ['StockID', 'UserID', 'StockName']


class WarehouseCreateSerializer(serializers.Serializer):
    """
    Request body for POST /api/warehouse

    {"UserID": "<uuid>", "StockName": "Main"}
    """
    UserID = TrimmedCharField(source='user_id', default='')
    StockName = TrimmedCharField(source='stock_name', default='')


# =============================================================================
# Products
# =============================================================================

class ProductSerializer(serializers.ModelSerializer):
    """Serializer for Product records."""
    ProductID = serializers.UUIDField(source='product_id', read_only=True)
    StockID = serializers.UUIDField(source='stock_id')
    ProductName = serializers.CharField(source='product_name')
    Category = serializers.CharField(source='category', allow_null=True, allow_blank=True)
    Unit = serializers.CharField(source='unit', allow_blank=True)
    ProductQty = serializers.IntegerField(source='product_qty')

    class Meta:
        model = Product
        fields = ['ProductID', 'StockID', 'ProductName', 'Category', 'Unit', 'ProductQty']


class ProductCreateSerializer(serializers.Serializer):
    """
    Request body for POST /api/products

    {
        "StockID": "<uuid>",
        "ProductName": "Rice",
        "Category": "Food",
        "Unit": "kg",
        "ProductQty": 5
    }
    """
    StockID = TrimmedCharField(source='stock_id', default='')
    ProductName = TrimmedCharField(source='product_name', default='')
    Category = TrimmedCharField(source='category', default='')
    Unit = TrimmedCharField(source='unit', default='')
    ProductQty = QuantityField(source='product_qty', default=0)


class ProductUpdateSerializer(serializers.Serializer):
    """
    Request body for PUT /api/products/{productId}

    Every field is optional. Validate with partial=True so that absent keys
    stay out of validated_data.
    """
    ProductName = TrimmedCharField(source='product_name')
    Category = TrimmedCharField(source='category')
    Unit = TrimmedCharField(source='unit')
    ProductQty = QuantityField(source='product_qty')


# =============================================================================
# Categories
# =============================================================================

class CategorySerializer(serializers.ModelSerializer):
    """Serializer for Category records. Discription is omitted when empty."""
    CategoryID = serializers.UUIDField(source='category_id', read_only=True)
    StockID = serializers.UUIDField(source='stock_id')
    CategoryName = serializers.CharField(source='category_name')
    Discription = serializers.CharField(source='description', allow_null=True, required=False)

    class Meta:
        model = Category
        fields = ['CategoryID', 'StockID', 'CategoryName', 'Discription']

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not data.get('Discription'):
            data.pop('Discription', None)
        return data


class CategoryCreateSerializer(serializers.Serializer):
    """
    One element of the POST /api/categories body:

    [
        {"StockID": "<uuid>", "CategoryName": "Tools", "Discription": "Hand tools"},
        ...
    ]
    """
    StockID = TrimmedCharField(source='stock_id', default='')
    CategoryName = TrimmedCharField(source='category_name', default='')
    Discription = TrimmedCharField(source='description', default='')
