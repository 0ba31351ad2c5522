from django.contrib import admin

from apps.loans.models import Loan
from apps.lockers.models import Locker
from apps.offerings.models import Offering


class LoanInline(admin.TabularInline):
    model = Loan
    extra = 0
    readonly_fields = ('customer_id', 'created_at', 'updated_at')


class LockerInline(admin.TabularInline):
    model = Locker
    extra = 0
    readonly_fields = ('created_at', 'updated_at')


@admin.register(Offering)
class OfferingAdmin(admin.ModelAdmin):
    list_display = ('id', 'customer', 'created_at', 'updated_at')
    search_fields = ('customer__email', 'customer__name')
    readonly_fields = ('created_at', 'updated_at')
    raw_id_fields = ('customer',)
    inlines = [LockerInline, LoanInline]

    def save_formset(self, request, form, formset, change):
        """Loans added inline take their customer id from the offering."""
        instances = formset.save(commit=False)
        for obj in formset.deleted_objects:
            obj.delete()
        for instance in instances:
            if isinstance(instance, Loan):
                instance.customer_id = formset.instance.customer_id
            instance.save()
        formset.save_m2m()
