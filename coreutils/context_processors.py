from django.conf import settings
from tickets.utils import can_scan

# pages where "Back" should go home rather than back in history
AUTH_PAGES = {"accounts:login", "accounts:signup"}


def site(request):
    match = getattr(request, "resolver_match", None)
    view_name = match.view_name if match else ""
    return {
        "site_name": settings.SITE_NAME,
        "can_scan_tickets": can_scan(request.user) if hasattr(request, "user") else False,
        "show_back_button": view_name != "shows:home",
        "back_goes_home": view_name in AUTH_PAGES,
    }
