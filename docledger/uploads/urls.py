from django.urls import path

from . import views

app_name = "uploads"

urlpatterns = [
    path("upload/image", views.upload_image, name="image"),
    path("upload/images", views.upload_images, name="images"),
    path("upload/image/<str:filename>", views.delete_image, name="delete"),
]
