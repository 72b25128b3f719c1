from django.apps import AppConfig


class UploadsConfig(AppConfig):
    name = "docledger.uploads"
    label = "uploads"
    verbose_name = "Uploads"
