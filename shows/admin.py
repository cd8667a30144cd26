from django.contrib import admin
from .models import Show


@admin.register(Show)
class ShowAdmin(admin.ModelAdmin):
    list_display = ("name", "total_tickets", "tickets_sold", "tickets_left", "created_at")
    search_fields = ("name",)
    readonly_fields = ("tickets_sold", "created_at")
