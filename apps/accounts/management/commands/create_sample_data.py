"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear --with-purchases

This creates:
- 3 users (Ana, Carlos, Beatriz) on the default PIN
- 2 products (Monster Energy, Coca-Cola Zero)
- Optionally a few purchases on the current tab
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from decimal import Decimal

from apps.accounts.models import User
from apps.catalog.models import Product, ProductCategory
from apps.ledger.models import Transaction, PurchaseHistory
from apps.ledger.services import LedgerService


SAMPLE_USERS = ['Ana', 'Carlos', 'Beatriz']

SAMPLE_PRODUCTS = [
    {
        'name': 'Monster Energy',
        'price': Decimal('7.00'),
        'category': ProductCategory.MONSTER,
        'icon': 'Zap',
    },
    {
        'name': 'Coca-Cola Zero',
        'price': Decimal('5.00'),
        'category': ProductCategory.COKE,
        'icon': 'Droplets',
    },
]


class Command(BaseCommand):
    help = 'Create sample users and products'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete all users, products, tabs and history first',
        )
        parser.add_argument(
            '--with-purchases',
            action='store_true',
            help='Record a few purchases for every sample user',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        products = self.create_products()

        if options['with_purchases']:
            self.create_purchases(users, products)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('All sample users start on PIN 0000 and must pick a new one.')

    def clear_data(self):
        """Clear all data from the database."""
        Transaction.objects.all().delete()
        PurchaseHistory.objects.all().delete()
        Product.objects.all().delete()
        User.objects.all().delete()

    def create_users(self):
        """Create sample users, skipping names that already exist."""
        self.stdout.write('  Creating users...')

        users = []
        for name in SAMPLE_USERS:
            user = User.objects.filter(name=name).first()
            if user is None:
                user = User.objects.create(name=name)
            users.append(user)
        return users

    def create_products(self):
        """Create sample products, skipping names that already exist."""
        self.stdout.write('  Creating products...')

        products = []
        for data in SAMPLE_PRODUCTS:
            product, _ = Product.objects.get_or_create(
                name=data['name'],
                defaults={key: value for key, value in data.items() if key != 'name'}
            )
            products.append(product)
        return products

    def create_purchases(self, users, products):
        """Put one of each product on every user's tab."""
        self.stdout.write('  Recording purchases...')

        for user in users:
            for product in products:
                LedgerService.record_purchase(user_id=user.id, product_id=product.id)
