import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("shows", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("user_name", models.CharField(max_length=120)),
                ("roll_number", models.CharField(max_length=40)),
                ("show_name", models.CharField(max_length=200)),
                ("ticket_count", models.PositiveSmallIntegerField()),
                ("purchase_date", models.DateTimeField(auto_now_add=True)),
                ("checked_in_at", models.DateTimeField(blank=True, null=True)),
                ("show", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="tickets", to="shows.show")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="tickets", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-purchase_date"],
            },
        ),
    ]
