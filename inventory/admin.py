"""
Django Admin configuration for inventory models.
"""
from django.contrib import admin
from .models import Category, Product, Warehouse


@admin.register(Warehouse)
class WarehouseAdmin(admin.ModelAdmin):
    list_display = ['stock_id', 'stock_name', 'user_id', 'product_count']
    search_fields = ['stock_name', 'user_id']
    list_filter = ['user_id']
    ordering = ['stock_name']

    def product_count(self, obj):
        # No foreign key: count by matching StockID.
        return Product.objects.filter(stock_id=obj.stock_id).count()
    product_count.short_description = 'Products'


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['product_id', 'product_name', 'category', 'unit', 'product_qty', 'stock_id']
    search_fields = ['product_name', 'category', 'stock_id']
    list_filter = ['stock_id']
    ordering = ['product_name']


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['category_id', 'category_name', 'description', 'stock_id']
    search_fields = ['category_name', 'stock_id']
    list_filter = ['stock_id']
    ordering = ['category_name']
