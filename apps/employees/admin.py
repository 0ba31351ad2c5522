from django.contrib import admin

from apps.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = (
        'id', 'email', 'name', 'title', 'role', 'joining_date', 'created_at',
    )
    list_filter = ('role', 'title', 'joining_date')
    search_fields = ('email', 'name')
    readonly_fields = ('password', 'created_at', 'updated_at')
