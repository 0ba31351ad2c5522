from django.apps import AppConfig


class OfferingsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.offerings'
    verbose_name = 'Offerings'
