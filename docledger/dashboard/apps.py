from django.apps import AppConfig


class DashboardConfig(AppConfig):
    name = "docledger.dashboard"
    label = "dashboard"
    verbose_name = "Dashboard"
