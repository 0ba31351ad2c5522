from django.contrib import admin

from apps.lockers.models import Locker


@admin.register(Locker)
class LockerAdmin(admin.ModelAdmin):
    list_display = ('id', 'number', 'account_number', 'branch_code', 'offering', 'created_at')
    search_fields = ('number', 'account_number')
    list_filter = ('branch_code',)
    readonly_fields = ('created_at', 'updated_at')
    raw_id_fields = ('offering',)
