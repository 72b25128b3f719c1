from django.urls import path

from . import views

app_name = "customers"

urlpatterns = [
    path("customers", views.customer_collection, name="collection"),
    path("customers/<int:customer_id>", views.customer_detail, name="detail"),
]
