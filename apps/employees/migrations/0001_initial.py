from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Employee',
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
                ('role', models.CharField(choices=[('ROLE_EMPLOYEE', 'Employee'), ('ROLE_MANAGER', 'Manager')], default='ROLE_EMPLOYEE', max_length=20)),
                ('salary', models.PositiveIntegerField(blank=True, null=True)),
                ('title', models.CharField(blank=True, max_length=100, null=True)),
                ('joining_date', models.DateField(blank=True, null=True)),
            ],
            options={
                'db_table': 'employees',
                'ordering': ['id'],
            },
        ),
    ]
