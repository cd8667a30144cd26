from django.conf import settings
from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from functools import wraps
from django.http import HttpResponse, JsonResponse
from django.shortcuts import render, get_object_or_404
from django.views.generic import TemplateView
from django.db import transaction
import json
import logging

from coreutils.mailer import send_booking_confirmation
from .forms import BookingForm, VerifyForm
from .models import Ticket
from .services import book_tickets, BookingError, ShowNotFound, NotEnoughTickets
from .utils import can_scan, extract_ticket_id, qr_image_url, qr_png_bytes, ticket_absolute_url

logger = logging.getLogger(__name__)


def scanner_required(view):
    """Anonymous users go to login; signed-in non-staff get a 403."""
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path())
        if not can_scan(request.user):
            raise PermissionDenied
        return view(request, *args, **kwargs)
    return wrapper


BOOKING_STATUS = {ShowNotFound: 404, NotEnoughTickets: 409}


def _read_payload(request):
    if request.content_type == "application/json":
        try:
            data = json.loads(request.body.decode("utf-8") or "{}")
        except (UnicodeDecodeError, json.JSONDecodeError):
            return None
        return data if isinstance(data, dict) else None
    return request.POST


def book(request):
    """
    POST JSON: {"showId", "ticketCount", "userName", "rollNumber"}
    Returns {"message", "ticketId"?}; the holder is the logged-in user.
    """
    if request.method != "POST":
        return JsonResponse({"message": "Method not allowed"}, status=405)
    if not request.user.is_authenticated:
        return JsonResponse({"message": "Please log in first to book tickets."}, status=401)

    payload = _read_payload(request)
    if payload is None:
        return JsonResponse({"message": "Invalid booking request."}, status=400)

    form = BookingForm(payload)
    if not form.is_valid():
        return JsonResponse({"message": "Invalid booking request.", "errors": form.errors}, status=400)

    cd = form.cleaned_data
    try:
        ticket = book_tickets(
            show_id=cd["showId"],
            ticket_count=cd["ticketCount"],
            user=request.user,
            user_name=cd["userName"],
            roll_number=cd["rollNumber"],
        )
    except BookingError as e:
        logger.warning("Booking refused for user %s on show %s: %s", request.user.pk, cd["showId"], e)
        return JsonResponse({"message": str(e)}, status=BOOKING_STATUS.get(type(e), 400))
    except Exception:
        logger.exception("Booking failed for user %s on show %s", request.user.pk, cd["showId"])
        return JsonResponse({"message": "Internal server error"}, status=500)

    if settings.SEND_BOOKING_EMAILS and request.user.email:
        try:
            send_booking_confirmation(ticket, request=request)
        except Exception:
            logger.exception("Confirmation email failed for ticket %s to %s", ticket.id, request.user.email)

    return JsonResponse({"message": "Booking successful!", "ticketId": str(ticket.id)})


def ticket_page(request, ticket_id):
    t = get_object_or_404(Ticket.objects.select_related("show"), pk=ticket_id)
    return render(request, "tickets/ticket.html", {
        "t": t,
        "qr_src": qr_image_url(t, request),
        "share_url": ticket_absolute_url(t, request),
    })


def qr_png(request, ticket_id):
    t = get_object_or_404(Ticket, pk=ticket_id)
    return HttpResponse(qr_png_bytes(ticket_absolute_url(t, request)), content_type="image/png")


def _lookup(code):
    token = extract_ticket_id(code)
    if not token:
        return None
    return Ticket.objects.select_related("show").filter(pk=token).first()


def _ticket_json(t):
    return {
        "id": str(t.id),
        "name": t.user_name,
        "rollNumber": t.roll_number,
        "show": t.show_name,
        "showId": t.show_id,
        "ticketCount": t.ticket_count,
        "checkedInAt": t.checked_in_at.isoformat() if t.checked_in_at else None,
    }


def _check_in(ticket):
    """Returns True if this call did the check-in, False if it was already done."""
    with transaction.atomic():
        locked = Ticket.objects.select_for_update().get(pk=ticket.pk)
        if locked.is_checked_in():
            ticket.checked_in_at = locked.checked_in_at
            return False
        locked.check_in()
        ticket.checked_in_at = locked.checked_in_at
    logger.info("Checked in ticket %s for show %s", ticket.id, ticket.show_id)
    return True


@scanner_required
def verify(request):
    """Scanner page; also accepts a typed/pasted code as a plain form POST."""
    ctx = {"form": VerifyForm()}
    if request.method == "POST":
        form = VerifyForm(request.POST)
        ctx["form"] = form
        if form.is_valid():
            t = _lookup(form.cleaned_data["code"])
            ctx["scanned"] = form.cleaned_data["code"]
            ctx["ticket"] = t
            if t and t.is_checked_in():
                ctx["already"] = True
            elif t and form.cleaned_data["checkin"]:
                ctx["already"] = not _check_in(t)
    return render(request, "tickets/verify.html", ctx)


def verify_api(request):
    """
    POST JSON: {"code": "...", "checkin": true/false}
    Returns JSON with status: "ok" | "already" | "invalid"
    """
    if request.method != "POST":
        return JsonResponse({"message": "Method not allowed"}, status=405)
    if not request.user.is_authenticated:
        return JsonResponse({"message": "Please log in to verify tickets."}, status=401)
    if not can_scan(request.user):
        return JsonResponse({"message": "Not allowed to verify tickets."}, status=403)

    try:
        data = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return JsonResponse({"message": "Invalid JSON"}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({"message": "Invalid JSON"}, status=400)

    raw = str(data.get("code") or "").strip()
    if not extract_ticket_id(raw):
        return JsonResponse({"status": "invalid", "message": "No valid ticket id found."})

    t = _lookup(raw)
    if not t:
        return JsonResponse({"status": "invalid", "message": "Ticket not found."})

    if t.is_checked_in():
        return JsonResponse({"status": "already", "message": "Already checked in.", "ticket": _ticket_json(t)})

    if data.get("checkin"):
        if not _check_in(t):
            return JsonResponse({"status": "already", "message": "Already checked in.", "ticket": _ticket_json(t)})

    return JsonResponse({"status": "ok", "message": "Ticket verified.", "ticket": _ticket_json(t)})


class ThankYouView(TemplateView):
    template_name = "tickets/thank_you.html"
