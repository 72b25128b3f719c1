from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    name = "docledger.notifications"
    label = "notifications"
    verbose_name = "Notifications"
