from django.apps import AppConfig


class RenderingConfig(AppConfig):
    name = "docledger.rendering"
    label = "rendering"
    verbose_name = "Document rendering"
