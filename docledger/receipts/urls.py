from django.urls import path

from . import views

app_name = "receipts"

urlpatterns = [
    path("receipts", views.receipt_list, name="list"),
    path("receipts/<int:receipt_id>", views.receipt_detail, name="detail"),
    path("receipts/invoice/<int:invoice_id>", views.receipts_by_invoice, name="by-invoice"),
    path("receipts/<int:receipt_id>/signature", views.receipt_signature, name="signature"),
    path("receipts/<int:receipt_id>/pdf", views.receipt_pdf, name="pdf"),
]
