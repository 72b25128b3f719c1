from django.apps import AppConfig


class CustomersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "docledger.customers"
    label = "customers"
    verbose_name = "Customers"
