from django.contrib import admin
from .models import Ticket


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ("show_name", "user_name", "roll_number", "ticket_count", "purchase_date", "checked_in_at")
    list_filter = ("show",)
    search_fields = ("user_name", "roll_number", "show_name", "user__email")
    readonly_fields = ("id", "purchase_date")
