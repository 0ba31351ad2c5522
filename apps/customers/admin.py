from django.contrib import admin

from apps.customers.models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = (
        'id', 'email', 'name', 'account_number', 'account_type',
        'branch_code', 'contact_number', 'created_at',
    )
    list_filter = ('account_type', 'created_at')
    search_fields = ('email', 'name', 'account_number')
    readonly_fields = ('password', 'created_at', 'updated_at')
