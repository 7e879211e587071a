"""
URL routing for inventory API endpoints.

Identifiers are captured as plain strings so malformed values reach the
view and are rejected with a validation error rather than a 404.
"""
from django.urls import path
from . import views

app_name = 'inventory'

urlpatterns = [
    # Warehouse
    path('warehouse', views.WarehouseListCreateView.as_view(), name='warehouse-list'),
    path('warehouse/<str:stock_id>', views.WarehouseDetailView.as_view(), name='warehouse-detail'),

    # Products
    path('products', views.ProductListCreateView.as_view(), name='product-list'),
    path('products/<str:product_id>', views.ProductDetailView.as_view(), name='product-detail'),

    # Categories
    path('categories', views.CategoryListCreateView.as_view(), name='category-list'),
    path('categories/<str:category_id>', views.CategoryDetailView.as_view(), name='category-detail'),
]
