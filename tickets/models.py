from django.db import models
from django.utils import timezone
import uuid
from django.conf import settings


class Ticket(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="tickets")
    user_name = models.CharField(max_length=120)
    roll_number = models.CharField(max_length=40)
    show = models.ForeignKey("shows.Show", on_delete=models.PROTECT, related_name="tickets")
    show_name = models.CharField(max_length=200)       # name at booking time
    ticket_count = models.PositiveSmallIntegerField()
    purchase_date = models.DateTimeField(auto_now_add=True)
    checked_in_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-purchase_date"]

    def is_checked_in(self) -> bool:
        return self.checked_in_at is not None

    def check_in(self):
        if not self.checked_in_at:
            self.checked_in_at = timezone.now()
            self.save(update_fields=["checked_in_at"])

    def __str__(self):
        return f"{self.show_name} • {self.user_name} • {self.id}"
