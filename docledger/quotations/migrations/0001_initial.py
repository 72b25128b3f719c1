import django.db.models.deletion
import django.utils.timezone
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models

import docledger.quotations.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        ("customers", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Quotation",
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
                ("quotation_number", models.CharField(help_text="Human-readable quotation number, e.g. QT2569100001", max_length=50, unique=True)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("accepted", "Accepted"), ("rejected", "Rejected"), ("converted", "Converted")], default="pending", max_length=20)),
                ("approval_token", models.CharField(default=docledger.quotations.models.new_approval_token, editable=False, max_length=64, unique=True)),
                ("approval_status", models.CharField(choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")], default="pending", max_length=20)),
                ("approval_notes", models.TextField(blank=True)),
                ("decided_at", models.DateTimeField(blank=True, null=True)),
                ("valid_until", models.DateField(blank=True, null=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="quotations_created", to=settings.AUTH_USER_MODEL)),
                ("customer", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="quotations", to="customers.customer")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("discount_amount__gte", 0)), name="quotation_discount_non_negative"),
                    models.CheckConstraint(condition=models.Q(("status__in", ["pending", "accepted", "rejected", "converted"])), name="quotation_status_valid"),
                ],
            },
        ),
        migrations.CreateModel(
            name="QuotationItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("product_name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("quantity", models.PositiveIntegerField()),
                ("unit_price", models.DecimalField(decimal_places=2, max_digits=14)),
                ("line_total", models.DecimalField(decimal_places=2, max_digits=14)),
                ("position", models.PositiveIntegerField(default=0)),
                ("product", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to="catalog.product")),
                ("quotation", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="items", to="quotations.quotation")),
            ],
            options={
                "ordering": ["position", "id"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("quantity__gt", 0)), name="quotations_quotationitem_quantity_positive"),
                    models.CheckConstraint(condition=models.Q(("unit_price__gte", 0)), name="quotations_quotationitem_price_non_negative"),
                ],
            },
        ),
        migrations.CreateModel(
            name="QuotationImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("url", models.CharField(max_length=500)),
                ("filename", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("quotation", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="images", to="quotations.quotation")),
            ],
            options={
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="QuotationSignature",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("signature_data", models.TextField(help_text="Base64 data URL of the signature image")),
                ("signed_by", models.CharField(blank=True, max_length=255)),
                ("signed_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("quotation", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="signatures", to="quotations.quotation")),
            ],
            options={
                "ordering": ["-signed_at", "-id"],
            },
        ),
    ]
