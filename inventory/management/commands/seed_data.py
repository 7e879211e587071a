"""
Management command to seed the database with sample data.

Generates, for one user:
- a few warehouses
- categories in each warehouse
- products in each warehouse, labelled with those categories

Usage:
    python manage.py seed_data
    python manage.py seed_data --user <uuid> --warehouses 5
    python manage.py seed_data --clear  # Clear existing data first
"""
import random
import uuid

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from inventory.models import Category, Product, Warehouse

WAREHOUSE_NAMES = [
    'Main', 'Garage', 'Basement', 'Pantry', 'Workshop', 'Attic',
    'Shed', 'Office', 'Storage Unit', 'Cellar'
]

CATEGORY_TEMPLATES = {
    'Food': ['Rice', 'Pasta', 'Flour', 'Canned Beans', 'Coffee', 'Sugar', 'Olive Oil'],
    'Tools': ['Hammer', 'Screwdriver Set', 'Drill Bits', 'Tape Measure', 'Wrench'],
    'Cleaning': ['Detergent', 'Sponges', 'Bleach', 'Trash Bags', 'Paper Towels'],
    'Electronics': ['AA Batteries', 'USB-C Cable', 'Light Bulbs', 'Extension Cord'],
    'Office': ['Printer Paper', 'Pens', 'Stapler', 'Envelopes', 'Sticky Notes'],
    'Garden': ['Seeds', 'Fertilizer', 'Plant Pots', 'Garden Gloves'],
}

UNITS = {
    'Food': ['kg', 'pack', 'can', 'bottle'],
    'Tools': ['pcs', 'set'],
    'Cleaning': ['bottle', 'pack', 'roll'],
    'Electronics': ['pcs', 'pack'],
    'Office': ['pack', 'box', 'pcs'],
    'Garden': ['bag', 'pcs', 'pair'],
}


class Command(BaseCommand):
    help = 'Seed the database with sample warehouses, categories, and products for one user'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before seeding',
        )
        parser.add_argument(
            '--user',
            type=str,
            default=None,
            help='Owning user UUID (default: a new random UUID)',
        )
        parser.add_argument(
            '--warehouses',
            type=int,
            default=3,
            help='Number of warehouses to create (default: 3)',
        )
        parser.add_argument(
            '--categories',
            type=int,
            default=4,
            help='Number of categories per warehouse (default: 4)',
        )
        parser.add_argument(
            '--products',
            type=int,
            default=25,
            help='Number of products per warehouse (default: 25)',
        )

    def handle(self, *args, **options):
        try:
            user_id = uuid.UUID(options['user']) if options['user'] else uuid.uuid4()
        except ValueError:
            raise CommandError('--user must be a valid UUID')

        category_count = min(options['categories'], len(CATEGORY_TEMPLATES))

        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self._clear_data()

        self.stdout.write(f'Seeding data for user {user_id}...')

        with transaction.atomic():
            warehouses = self._create_warehouses(user_id, options['warehouses'])
            for stock in warehouses:
                categories = self._create_categories(stock, category_count)
                self._create_products(stock, categories, options['products'])

        self.stdout.write(self.style.SUCCESS('Database seeding completed successfully!'))
        self.stdout.write(f'UserID: {user_id}')

    def _clear_data(self):
        """Clear all existing data."""
        Product.objects.all().delete()
        Category.objects.all().delete()
        Warehouse.objects.all().delete()

        self.stdout.write(self.style.WARNING('All existing data cleared.'))

    def _create_warehouses(self, user_id, count):
        """Create sample warehouses owned by user_id."""
        warehouses = []
        for i in range(count):
            base = WAREHOUSE_NAMES[i % len(WAREHOUSE_NAMES)]
            name = base if i < len(WAREHOUSE_NAMES) else f'{base} {i // len(WAREHOUSE_NAMES) + 1}'
            warehouses.append(Warehouse(
                stock_id=uuid.uuid4(),
                user_id=user_id,
                stock_name=name,
            ))

        Warehouse.objects.bulk_create(warehouses)
        self.stdout.write(self.style.SUCCESS(f'Created {len(warehouses)} warehouses'))
        return warehouses

    def _create_categories(self, stock, count):
        """Create categories for one warehouse."""
        names = random.sample(list(CATEGORY_TEMPLATES), k=count)
        categories = [
            Category(
                category_id=uuid.uuid4(),
                stock_id=stock.stock_id,
                category_name=name,
                # Some categories without description
                description=random.choice([f'{name} supplies', None]),
            )
            for name in names
        ]

        Category.objects.bulk_create(categories)
        self.stdout.write(f'  {stock.stock_name}: {len(categories)} categories')
        return categories

    def _create_products(self, stock, categories, count):
        """Create products for one warehouse, spread over its categories."""
        products = []
        for _ in range(count):
            category = random.choice(categories) if categories else None
            label = category.category_name if category else None
            templates = CATEGORY_TEMPLATES.get(label, ['Item'])

            products.append(Product(
                product_id=uuid.uuid4(),
                stock_id=stock.stock_id,
                product_name=random.choice(templates),
                category=label or '',
                unit=random.choice(UNITS.get(label, ['pcs'])),
                product_qty=random.randint(1, 200),
            ))

        Product.objects.bulk_create(products)
        self.stdout.write(f'  {stock.stock_name}: {len(products)} products')
        return products
