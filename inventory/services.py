"""
Inventory Service Layer - validation and persistence for every entity.

Each operation follows the same contract:
1. Validate and normalise the input (trim strings, parse UUIDs)
2. Translate it into a filter or a record
3. Run one or two store operations
4. Return the result for the view to serialize

All validation completes before the store is touched. Database failures
surface as StoreError with a generic message.
"""
import logging
import uuid
from typing import Dict, List, Optional, Tuple

from django.db import transaction

from core.exceptions import InvalidRequest, NotFound
from .models import Category, Product, Warehouse
from .store import DocumentStore, store_operation

logger = logging.getLogger(__name__)


def parse_identifier(raw, name: str) -> uuid.UUID:
    """
    Parse a required identifier from a query string or path.

    Raises:
        InvalidRequest: If the value is empty or not a UUID
    """
    if isinstance(raw, uuid.UUID):
        return raw

    value = (raw or '').strip()
    if not value:
        raise InvalidRequest(f"{name} is required")

    try:
        return uuid.UUID(value)
    except ValueError:
        raise InvalidRequest(f"{name} must be a valid UUID")


def _parse_uuid(value: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


def _text(data: Dict, key: str) -> str:
    # Request serializers trim strings; null arrives as None.
    return (data.get(key) or '').strip()


# =============================================================================
# Warehouse
# =============================================================================

def list_warehouse(store: DocumentStore, raw_user_id) -> List[Warehouse]:
    user_id = parse_identifier(raw_user_id, 'userId')

    with store_operation("failed to fetch warehouse"):
        return list(store.warehouse.filter(user_id=user_id))


def create_warehouse(store: DocumentStore, data: Dict) -> Warehouse:
    """
    Create a warehouse for a user.

    Args:
        data: Parsed request body with 'user_id' and 'stock_name'
    """
    user_raw = _text(data, 'user_id')
    stock_name = _text(data, 'stock_name')

    if not stock_name or not user_raw:
        raise InvalidRequest("UserID and StockName are required")

    user_id = _parse_uuid(user_raw)
    if user_id is None:
        raise InvalidRequest("UserID must be a valid UUID")

    with store_operation("failed to create stock"):
        stock = store.warehouse.create(
            stock_id=uuid.uuid4(),
            user_id=user_id,
            stock_name=stock_name,
        )

    logger.info(f"Created warehouse {stock.stock_id} for user {user_id}")
    return stock


def delete_warehouse(store: DocumentStore, raw_stock_id) -> Tuple[int, int]:
    """
    Delete a warehouse and the products that reference it.

    Runs as two independent deletes with no transaction around them. If the
    product delete fails, the warehouse is already gone and its products
    remain. Categories of the warehouse are left in place.

    Returns:
        Tuple of (deleted warehouse count, deleted product count)
    """
    stock_id = parse_identifier(raw_stock_id, 'stockId')

    with store_operation("failed to delete stock"):
        deleted_stock, _ = store.warehouse.filter(stock_id=stock_id).delete()

    with store_operation("failed to delete related products"):
        deleted_products, _ = store.products.filter(stock_id=stock_id).delete()

    logger.info(
        f"Deleted warehouse {stock_id}: {deleted_stock} stock, "
        f"{deleted_products} related products"
    )
    return deleted_stock, deleted_products


# =============================================================================
# Products
# =============================================================================

def list_products(store: DocumentStore, raw_stock_id) -> List[Product]:
    stock_id = parse_identifier(raw_stock_id, 'stockId')

    with store_operation("failed to fetch products"):
        return list(store.products.filter(stock_id=stock_id))


def create_product(store: DocumentStore, data: Dict) -> Product:
    """
    Create a product in a warehouse.

    ProductQty must be present and non-zero; zero is indistinguishable from
    an omitted quantity.

    Args:
        data: Parsed request body (stock_id, product_name, category, unit,
              product_qty)

    Raises:
        InvalidRequest: If a required field is missing or malformed
    """
    stock_raw = _text(data, 'stock_id')
    product_name = _text(data, 'product_name')

    if not stock_raw or not product_name:
        raise InvalidRequest("StockID and ProductName are required")

    product_qty = data.get('product_qty') or 0
    if product_qty == 0:
        raise InvalidRequest("ProductQty must be provided")

    stock_id = _parse_uuid(stock_raw)
    if stock_id is None:
        raise InvalidRequest("StockID must be a valid UUID")

    with store_operation("failed to create product"):
        product = store.products.create(
            product_id=uuid.uuid4(),
            stock_id=stock_id,
            product_name=product_name,
            category=_text(data, 'category'),
            unit=_text(data, 'unit'),
            product_qty=product_qty,
        )

    logger.info(f"Created product {product.product_id} in warehouse {stock_id}")
    return product


def build_product_changes(changes: Dict) -> Dict:
    """
    Turn a sparse update body into column updates.

    A key that is absent, or present with None, was not supplied and is left
    untouched. Supplied values follow these rules:
        - product_name: trimmed, must not be empty
        - category: trimmed, empty is stored as NULL
        - unit: trimmed, stored as given
        - product_qty: must not be negative

    Raises:
        InvalidRequest: If a supplied value is invalid or nothing was supplied
    """
    updates = {}

    if changes.get('product_name') is not None:
        product_name = changes['product_name'].strip()
        if not product_name:
            raise InvalidRequest("ProductName cannot be empty")
        updates['product_name'] = product_name

    if changes.get('category') is not None:
        updates['category'] = changes['category'].strip() or None

    if changes.get('unit') is not None:
        updates['unit'] = changes['unit'].strip()

    if changes.get('product_qty') is not None:
        if changes['product_qty'] < 0:
            raise InvalidRequest("ProductQty cannot be negative")
        updates['product_qty'] = changes['product_qty']

    if not updates:
        raise InvalidRequest("provide at least one field to update")

    return updates


def update_product(store: DocumentStore, raw_product_id, changes: Dict) -> Product:
    """
    Apply a sparse update and return the product as stored afterwards.

    Raises:
        InvalidRequest: If the identifier or any supplied field is invalid
        NotFound: If no product has the identifier
    """
    product_id = parse_identifier(raw_product_id, 'productId')
    updates = build_product_changes(changes)

    product = None
    with store_operation("failed to update product"):
        with transaction.atomic(using=store.using):
            matched = store.products.filter(product_id=product_id).update(**updates)
            if matched:
                product = store.products.get(product_id=product_id)

    if product is None:
        raise NotFound("product not found")

    logger.info(f"Updated product {product_id}: {sorted(updates)}")
    return product


def delete_product(store: DocumentStore, raw_product_id) -> int:
    product_id = parse_identifier(raw_product_id, 'productId')

    with store_operation("failed to delete product"):
        deleted, _ = store.products.filter(product_id=product_id).delete()

    logger.info(f"Deleted product {product_id}: {deleted} removed")
    return deleted


# =============================================================================
# Categories
# =============================================================================

def list_categories(store: DocumentStore, raw_stock_id) -> List[Category]:
    stock_id = parse_identifier(raw_stock_id, 'stockId')

    with store_operation("failed to fetch categories"):
        return list(store.categories.filter(stock_id=stock_id))


def validate_category_entries(entries: List[Dict]) -> List[Category]:
    """
    Validate every category request and build unsaved records.

    The first invalid entry aborts the whole batch; its index is named in
    the error.

    Raises:
        InvalidRequest: If the batch is empty or any entry is invalid
    """
    if not entries:
        raise InvalidRequest("at least one category is required")

    categories = []
    for idx, entry in enumerate(entries):
        stock_raw = _text(entry, 'stock_id')
        category_name = _text(entry, 'category_name')

        if not stock_raw or not category_name:
            raise InvalidRequest(f"StockID and CategoryName are required at index {idx}")

        stock_id = _parse_uuid(stock_raw)
        if stock_id is None:
            raise InvalidRequest(f"StockID at index {idx} must be a valid UUID")

        categories.append(Category(
            category_id=uuid.uuid4(),
            stock_id=stock_id,
            category_name=category_name,
            description=_text(entry, 'description') or None,
        ))

    return categories


def create_categories(store: DocumentStore, entries: List[Dict]) -> List[Category]:
    """
    Create a batch of categories with a single insert.

    Either every category is stored or none is.
    """
    categories = validate_category_entries(entries)

    with store_operation("failed to create categories"):
        with transaction.atomic(using=store.using):
            store.categories.bulk_create(categories)

    logger.info(f"Created {len(categories)} categories")
    return categories


def delete_category(store: DocumentStore, raw_category_id) -> int:
    category_id = parse_identifier(raw_category_id, 'categoryId')

    with store_operation("failed to delete category"):
        deleted, _ = store.categories.filter(category_id=category_id).delete()

    logger.info(f"Deleted category {category_id}: {deleted} removed")
    return deleted
