import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Donor",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                (
                    "blood_group",
                    models.CharField(
                        choices=[
                            ("A_POSITIVE", "A+"), ("A_NEGATIVE", "A-"),
                            ("B_POSITIVE", "B+"), ("B_NEGATIVE", "B-"),
                            ("AB_POSITIVE", "AB+"), ("AB_NEGATIVE", "AB-"),
                            ("O_POSITIVE", "O+"), ("O_NEGATIVE", "O-"),
                        ],
                        db_index=True,
                        max_length=12,
                    ),
                ),
                ("phone_digits", models.CharField(max_length=20)),
                ("phone_display", models.CharField(max_length=30)),
                ("location_normalized", models.CharField(db_index=True, max_length=200)),
                ("location_display", models.CharField(max_length=200)),
                ("photo_url", models.URLField(blank=True, max_length=500, null=True)),
                ("photo_public_id", models.CharField(blank=True, max_length=255, null=True)),
                ("consent_given", models.BooleanField(default=False)),
                ("is_available", models.BooleanField(default=True)),
                ("last_donation_date", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Donor",
                "verbose_name_plural": "Donors",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["blood_group", "is_available"], name="donor_blood_available_idx")],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("phone_digits", "blood_group", "location_normalized"),
                        name="unique_donor_phone_blood_location",
                    ),
                ],
            },
        ),
    ]
