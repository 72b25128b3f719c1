from django.apps import AppConfig


class ReceiptsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "docledger.receipts"
    label = "receipts"
    verbose_name = "Receipts"
