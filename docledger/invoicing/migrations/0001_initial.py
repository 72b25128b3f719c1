import django.db.models.deletion
import django.utils.timezone
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        ("customers", "0001_initial"),
        ("quotations", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Invoice",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("customer_name", models.CharField(max_length=255)),
                ("customer_phone", models.CharField(blank=True, max_length=50)),
                ("customer_address", models.TextField(blank=True)),
                ("customer_email", models.EmailField(blank=True, max_length=254)),
                ("subtotal", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("discount_amount", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("vat_percent", models.DecimalField(decimal_places=2, default=Decimal("7"), max_digits=5)),
                ("total", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("notes", models.TextField(blank=True)),
                ("invoice_number", models.CharField(help_text="Human-readable invoice number, e.g. INV2569100001", max_length=50, unique=True)),
                ("paid_amount", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("remaining_amount", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("status", models.CharField(choices=[("unpaid", "Unpaid"), ("partial", "Partially paid"), ("paid", "Paid")], default="unpaid", max_length=20)),
                ("due_date", models.DateField(blank=True, null=True)),
                ("paid_at", models.DateTimeField(blank=True, null=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="invoices_created", to=settings.AUTH_USER_MODEL)),
                ("customer", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="invoices", to="customers.customer")),
                ("quotation", models.OneToOneField(blank=True, help_text="Quotation this invoice was converted from", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="invoice", to="quotations.quotation")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("paid_amount__gte", 0)), name="invoice_paid_non_negative"),
                    models.CheckConstraint(condition=models.Q(("discount_amount__gte", 0)), name="invoice_discount_non_negative"),
                    models.CheckConstraint(condition=models.Q(("status__in", ["unpaid", "partial", "paid"])), name="invoice_status_valid"),
                ],
            },
        ),
        migrations.CreateModel(
            name="InvoiceItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("product_name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("quantity", models.PositiveIntegerField()),
                ("unit_price", models.DecimalField(decimal_places=2, max_digits=14)),
                ("line_total", models.DecimalField(decimal_places=2, max_digits=14)),
                ("position", models.PositiveIntegerField(default=0)),
                ("invoice", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="items", to="invoicing.invoice")),
                ("product", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to="catalog.product")),
            ],
            options={
                "ordering": ["position", "id"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("quantity__gt", 0)), name="invoicing_invoiceitem_quantity_positive"),
                    models.CheckConstraint(condition=models.Q(("unit_price__gte", 0)), name="invoicing_invoiceitem_price_non_negative"),
                ],
            },
        ),
        migrations.CreateModel(
            name="InvoiceImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("url", models.CharField(max_length=500)),
                ("filename", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("invoice", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="images", to="invoicing.invoice")),
            ],
            options={
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="InvoiceSignature",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("signature_data", models.TextField(help_text="Base64 data URL of the signature image")),
                ("signed_by", models.CharField(blank=True, max_length=255)),
                ("signed_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("invoice", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="signatures", to="invoicing.invoice")),
            ],
            options={
                "ordering": ["-signed_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Payment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("amount", models.DecimalField(decimal_places=2, max_digits=14)),
                ("method", models.CharField(default="cash", help_text="cash, transfer, credit, promptpay, cheque, ...", max_length=50)),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("invoice", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="payments", to="invoicing.invoice")),
                ("recorded_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="payments_recorded", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("amount__gt", 0)), name="payment_amount_positive"),
                ],
            },
        ),
    ]
