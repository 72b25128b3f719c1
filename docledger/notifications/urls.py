from django.urls import path

from . import views

app_name = "notifications"

urlpatterns = [
    path("email/test", views.send_test_email, name="test"),
]
