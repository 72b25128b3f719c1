"""URL configuration for invoicing."""

from django.urls import path

from . import views

app_name = "invoicing"

urlpatterns = [
    path("invoices", views.invoice_collection, name="collection"),
    path("invoices/<int:invoice_id>", views.invoice_detail, name="detail"),
    path("invoices/<int:invoice_id>/status", views.invoice_status, name="status"),
    path("invoices/<int:invoice_id>/payments", views.record_payment, name="payments"),
    path("invoices/<int:invoice_id>/signature", views.invoice_signature, name="signature"),
    path("invoices/<int:invoice_id>/images", views.invoice_image, name="images"),
    path("invoices/<int:invoice_id>/pdf", views.invoice_pdf, name="pdf"),
]
