from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="DocumentSequence",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("prefix", models.CharField(help_text="Period-scoped prefix, e.g. 'INV256910'", max_length=20, unique=True)),
                ("kind", models.CharField(help_text="Document kind: quotation, invoice or receipt", max_length=20)),
                ("current_value", models.PositiveBigIntegerField(default=0, help_text="Last number handed out for this prefix")),
                ("pad_width", models.PositiveSmallIntegerField(default=4, help_text="Zero-padding width for the number portion")),
            ],
            options={
                "ordering": ["prefix"],
            },
        ),
    ]
