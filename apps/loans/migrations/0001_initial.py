import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('offerings', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Loan',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('number', models.BigIntegerField(help_text='Unique loan number across the system.', unique=True)),
                ('customer_id', models.BigIntegerField(db_index=True, help_text='Id of the customer owning the parent offering.')),
                ('amount', models.DecimalField(decimal_places=2, help_text='Loan principal amount.', max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('offering', models.ForeignKey(help_text='The offering this loan belongs to.', on_delete=django.db.models.deletion.CASCADE, related_name='loans', to='offerings.offering')),
            ],
            options={
                'db_table': 'loans',
                'ordering': ['number'],
            },
        ),
    ]
