from django.conf import settings
from django.db import models
from django.templatetags.static import static
from django.urls import reverse

DEFAULT_DESCRIPTION = "No description available."


class Show(models.Model):
    name = models.CharField(max_length=200, default="Untitled Show")
    description = models.TextField(blank=True)
    image_url = models.CharField(max_length=500, blank=True,
                                 help_text="Poster URL. Leave blank for the placeholder poster.")
    total_tickets = models.PositiveIntegerField(default=0)
    tickets_sold = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    @property
    def tickets_left(self):
        return max(0, self.total_tickets - self.tickets_sold)

    @property
    def is_sold_out(self):
        return self.tickets_left <= 0

    @property
    def poster_url(self):
        return self.image_url or static(settings.DEFAULT_SHOW_IMAGE)

    @property
    def display_description(self):
        return self.description or DEFAULT_DESCRIPTION

    def get_absolute_url(self):
        return reverse("shows:detail", args=[self.pk])

    def __str__(self):
        return self.name or f"Show {self.pk}"
