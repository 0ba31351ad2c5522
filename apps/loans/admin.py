from django.contrib import admin

from apps.loans.models import Loan


@admin.register(Loan)
class LoanAdmin(admin.ModelAdmin):
    list_display = ('id', 'number', 'customer_id', 'amount', 'offering', 'created_at')
    search_fields = ('number', 'customer_id')
    readonly_fields = ('customer_id', 'created_at', 'updated_at')
    raw_id_fields = ('offering',)
