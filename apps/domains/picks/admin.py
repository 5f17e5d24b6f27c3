from django.contrib import admin

from .models import PickEntry


@admin.register(PickEntry)
class PickEntryAdmin(admin.ModelAdmin):
    list_display = ("id", "entry_id", "name", "is_master", "tiebreaker", "created_at")
    search_fields = ("entry_id", "name")
    list_filter = ("is_master",)
    readonly_fields = ("entry_id", "created_at", "updated_at")
