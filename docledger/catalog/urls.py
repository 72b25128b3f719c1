from django.urls import path

from . import views

app_name = "catalog"

urlpatterns = [
    path("products", views.product_collection, name="collection"),
    path("products/<int:product_id>", views.product_detail, name="detail"),
]
