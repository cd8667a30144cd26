from django.conf import settings
from django.core.cache import cache
from django.shortcuts import render, get_object_or_404

from .models import Show
from .signals import SHOW_LIST_CACHE_KEY


def _listing():
    return list(Show.objects.order_by("id"))


def home(request):
    # served from cache; signals drop it whenever a show changes
    shows = cache.get_or_set(SHOW_LIST_CACHE_KEY, _listing, settings.SHOW_LIST_CACHE_SECONDS)
    return render(request, "shows/index.html", {"shows": shows})


def show_detail(request, pk):
    show = get_object_or_404(Show, pk=pk)
    return render(request, "shows/detail.html", {
        "show": show,
        "max_per_booking": settings.MAX_TICKETS_PER_BOOKING,
    })
