import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("invoicing", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Receipt",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("receipt_number", models.CharField(help_text="Human-readable receipt number, e.g. REC2569100001", max_length=50, unique=True)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=14)),
                ("method", models.CharField(default="cash", max_length=50)),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("invoice", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="receipts", to="invoicing.invoice")),
                ("issued_by", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="receipts_issued", to=settings.AUTH_USER_MODEL)),
                ("payment", models.OneToOneField(on_delete=django.db.models.deletion.PROTECT, related_name="receipt", to="invoicing.payment")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="ReceiptSignature",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("signature_data", models.TextField(help_text="Base64 data URL of the signature image")),
                ("signed_by", models.CharField(blank=True, max_length=255)),
                ("signed_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("receipt", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="signatures", to="receipts.receipt")),
            ],
            options={
                "ordering": ["-signed_at", "-id"],
            },
        ),
    ]
