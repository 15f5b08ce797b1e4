# Generated manually for the ledger app

from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PurchaseHistory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.IntegerField(db_index=True)),
                ('user_name', models.CharField(max_length=100)),
                ('product_name', models.CharField(max_length=100)),
                ('price', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now)),
                ('month', models.CharField(db_index=True, max_length=7)),
            ],
            options={
                'verbose_name_plural': 'purchase history',
                'db_table': 'purchase_history',
                'ordering': ['-timestamp', '-id'],
                'indexes': [
                    models.Index(fields=['month', 'timestamp'], name='history_month_ts_idx'),
                    models.Index(fields=['user_id', 'timestamp'], name='history_user_ts_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_name', models.CharField(max_length=100)),
                ('price', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('category', models.CharField(choices=[('monster', 'Monster'), ('coke', 'Coca Zero'), ('other', 'Other')], default='other', max_length=20)),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now)),
                ('product', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='debt_entries', to='catalog.product')),
                ('user', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='debt_entries', to='accounts.user')),
            ],
            options={
                'db_table': 'transactions',
                'ordering': ['timestamp', 'id'],
                'indexes': [
                    models.Index(fields=['user', 'timestamp'], name='transactions_user_ts_idx'),
                    models.Index(fields=['timestamp'], name='transactions_ts_idx'),
                ],
            },
        ),
    ]
