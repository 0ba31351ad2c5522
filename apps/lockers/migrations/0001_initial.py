import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('offerings', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Locker',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('number', models.BigIntegerField(help_text='Unique locker number across the system.', unique=True)),
                ('account_number', models.BigIntegerField(help_text='Account the locker rent is charged to.')),
                ('branch_code', models.BigIntegerField(help_text='Branch holding the locker.')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('offering', models.ForeignKey(help_text='The offering this locker belongs to.', on_delete=django.db.models.deletion.CASCADE, related_name='lockers', to='offerings.offering')),
            ],
            options={
                'db_table': 'lockers',
                'ordering': ['number'],
            },
        ),
    ]
