from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Show",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(default="Untitled Show", max_length=200)),
                ("description", models.TextField(blank=True)),
                ("image_url", models.CharField(blank=True, help_text="Poster URL. Leave blank for the placeholder poster.", max_length=500)),
                ("total_tickets", models.PositiveIntegerField(default=0)),
                ("tickets_sold", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
