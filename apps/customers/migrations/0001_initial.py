from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Customer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('email', models.CharField(help_text='Login identifier, shared namespace across account types.', max_length=254, unique=True)),
                ('password', models.CharField(help_text='Hashed credential.', max_length=128)),
                ('name', models.CharField(blank=True, help_text='Unset until the profile is completed.', max_length=150, null=True)),
                ('address_street', models.CharField(blank=True, max_length=200, null=True)),
                ('address_state', models.CharField(blank=True, max_length=100, null=True)),
                ('address_city', models.CharField(blank=True, max_length=100, null=True)),
                ('address_pin', models.CharField(blank=True, max_length=20, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('role', models.CharField(choices=[('ROLE_CUSTOMER', 'Customer')], default='ROLE_CUSTOMER', max_length=20)),
                ('account_number', models.BigIntegerField(blank=True, db_index=True, help_text="Customer's bank account number.", null=True)),
                ('account_type', models.CharField(blank=True, max_length=50, null=True)),
                ('contact_number', models.BigIntegerField(blank=True, null=True)),
                ('pan_number', models.BigIntegerField(blank=True, help_text="Customer's PAN card number.", null=True)),
                ('branch_name', models.CharField(blank=True, max_length=100, null=True)),
                ('branch_code', models.BigIntegerField(blank=True, null=True)),
                ('branch_ifsc', models.CharField(blank=True, max_length=20, null=True)),
                ('card_number', models.BigIntegerField(blank=True, null=True)),
                ('card_credit_limit', models.BigIntegerField(blank=True, null=True)),
                ('card_expiry_date', models.DateField(blank=True, null=True)),
            ],
            options={
                'db_table': 'customers',
                'ordering': ['id'],
            },
        ),
    ]
