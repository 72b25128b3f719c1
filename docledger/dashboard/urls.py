from django.urls import path

from . import views

app_name = "dashboard"

urlpatterns = [
    path("admin/dashboard", views.dashboard, name="dashboard"),
]
