"""
Store access for the warehouse, products and categories collections.

Views do not reach for model managers directly. They hold a DocumentStore
and pass it to the service layer, so a test or an alternate database alias
can be swapped in without touching the services.
"""
import logging
from contextlib import contextmanager

from django.db import DEFAULT_DB_ALIAS, DatabaseError

from core.exceptions import StoreError
from .models import Category, Product, Warehouse

logger = logging.getLogger(__name__)


class DocumentStore:
    """Per-collection accessors bound to one database alias."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def warehouse(self):
        return Warehouse.objects.using(self.using)

    @property
    def products(self):
        return Product.objects.using(self.using)

    @property
    def categories(self):
        return Category.objects.using(self.using)

    def __repr__(self):
        return f"DocumentStore(using={self.using!r})"


@contextmanager
def store_operation(failure_message: str):
    """
    Translate database failures inside the block into StoreError.

    The driver's message is logged; only failure_message reaches the client.
    """
    try:
        yield
    except DatabaseError as e:
        logger.error(f"{failure_message}: {e}")
        raise StoreError(failure_message) from e


default_store = DocumentStore()
