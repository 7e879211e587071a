"""
Inventory Models - the three collections behind the warehouse tracker.

Models:
    - Warehouse: A named stock container owned by one user
    - Product: Items held in a warehouse, with unit and quantity
    - Category: Product groupings defined per warehouse

Column names match the JSON field names on the wire. Owning identifiers
(StockID, UserID) are plain indexed UUID columns, not foreign keys: the
database enforces no relationship between the collections.
"""
import uuid

from django.db import models


class Warehouse(models.Model):
    """
    Stock container owned by a single user.
    """
    stock_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        db_column='StockID',
    )
    user_id = models.UUIDField(
        db_index=True,
        db_column='UserID',
        help_text="Owning user"
    )
    stock_name = models.TextField(
        db_column='StockName',
        help_text="Display name of the warehouse"
    )

    class Meta:
        db_table = 'warehouse'
        verbose_name = 'Warehouse'
        verbose_name_plural = 'Warehouses'

    def __str__(self):
        return self.stock_name


class Product(models.Model):
    """
    Product held in a warehouse.

    StockID is advisory: deleting a warehouse through the API removes its
    products, nothing else does.
    """
    product_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        db_column='ProductID',
    )
    stock_id = models.UUIDField(
        db_index=True,
        db_column='StockID',
        help_text="Warehouse holding this product"
    )
    product_name = models.TextField(db_column='ProductName')
    category = models.TextField(
        null=True,
        blank=True,
        default='',
        db_column='Category',
        help_text="Free-text category label"
    )
    unit = models.TextField(blank=True, default='', db_column='Unit')
    product_qty = models.IntegerField(default=0, db_column='ProductQty')

    class Meta:
        db_table = 'products'
        verbose_name = 'Product'
        verbose_name_plural = 'Products'

    def __str__(self):
        return f"{self.product_name}: {self.product_qty} {self.unit}".rstrip()


class Category(models.Model):
    """
    Category defined for a warehouse.

    The description column keeps its historical spelling, "Discription".
    """
    category_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        db_column='CategoryID',
    )
    stock_id = models.UUIDField(
        db_index=True,
        db_column='StockID',
        help_text="Warehouse this category belongs to"
    )
    category_name = models.TextField(db_column='CategoryName')
    description = models.TextField(
        null=True,
        blank=True,
        db_column='Discription',
    )

    class Meta:
        db_table = 'categories'
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'

    def __str__(self):
        return self.category_name
