import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Warehouse",
            fields=[
                ("stock_id", models.UUIDField(db_column="StockID", default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("user_id", models.UUIDField(db_column="UserID", db_index=True, help_text="Owning user")),
                ("stock_name", models.TextField(db_column="StockName", help_text="Display name of the warehouse")),
            ],
            options={
                "verbose_name": "Warehouse",
                "verbose_name_plural": "Warehouses",
                "db_table": "warehouse",
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("product_id", models.UUIDField(db_column="ProductID", default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("stock_id", models.UUIDField(db_column="StockID", db_index=True, help_text="Warehouse holding this product")),
                ("product_name", models.TextField(db_column="ProductName")),
                ("category", models.TextField(blank=True, db_column="Category", default="", help_text="Free-text category label", null=True)),
                ("unit", models.TextField(blank=True, db_column="Unit", default="")),
                ("product_qty", models.IntegerField(db_column="ProductQty", default=0)),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "db_table": "products",
            },
        ),
        migrations.CreateModel(
            name="Category",
            fields=[
                ("category_id", models.UUIDField(db_column="CategoryID", default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("stock_id", models.UUIDField(db_column="StockID", db_index=True, help_text="Warehouse this category belongs to")),
                ("category_name", models.TextField(db_column="CategoryName")),
                ("description", models.TextField(blank=True, db_column="Discription", null=True)),
            ],
            options={
                "verbose_name": "Category",
                "verbose_name_plural": "Categories",
                "db_table": "categories",
            },
        ),
    ]
