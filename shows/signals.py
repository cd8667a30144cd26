from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Show

SHOW_LIST_CACHE_KEY = "shows:listing"


@receiver(post_save, sender=Show)
@receiver(post_delete, sender=Show)
def drop_cached_listing(sender, instance, **kwargs):
    # after commit, or a concurrent read could re-cache the pre-booking counts
    transaction.on_commit(lambda: cache.delete(SHOW_LIST_CACHE_KEY))
