"""URL configuration for quotations, including the public approval link."""

from django.urls import path

from . import public_views, views

app_name = "quotations"

urlpatterns = [
    path("quotations", views.quotation_collection, name="collection"),
    path("quotations/<int:quotation_id>", views.quotation_detail, name="detail"),
    path("quotations/<int:quotation_id>/convert-to-invoice", views.convert_to_invoice, name="convert"),
    path("quotations/<int:quotation_id>/signature", views.quotation_signature, name="signature"),
    path("quotations/<int:quotation_id>/images", views.quotation_image, name="images"),
    path("quotations/<int:quotation_id>/send", views.send_quotation, name="send"),
    path("quotations/<int:quotation_id>/pdf", views.quotation_pdf, name="pdf"),

    # Customer approval link (no login required)
    path("public/quotations/<str:token>", public_views.public_quotation, name="public-detail"),
    path("public/quotations/<str:token>/approve", public_views.approve_quotation, name="public-approve"),
    path("public/quotations/<str:token>/reject", public_views.reject_quotation, name="public-reject"),
]
