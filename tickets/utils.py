import qrcode
import re
from io import BytesIO
from uuid import UUID
from django.conf import settings
from django.urls import reverse
from django.utils.http import urlencode

UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", re.I)

# look of the hosted QR image, matches the dark ticket card
QR_SERVICE_PARAMS = {"size": "150x150", "bgcolor": "1a202c", "color": "f0f0f0", "qzone": "1"}


def qr_png_bytes(data: str) -> bytes:
    qr = qrcode.QRCode(box_size=8, border=2)
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def extract_ticket_id(text: str):
    """Pull a ticket UUID out of a scan: bare id or a full ticket URL."""
    m = UUID_RE.search(text or "")
    if not m:
        return None
    try:
        return UUID(m.group(0))
    except ValueError:
        return None


def ticket_absolute_url(ticket, request=None) -> str:
    path = reverse("tickets:ticket", args=[ticket.id])
    if request is not None:
        return request.build_absolute_uri(path)
    return f"{settings.SITE_BASE_URL}{path}"


def qr_image_url(ticket, request=None) -> str:
    if settings.QR_SERVICE_URL:
        params = dict(QR_SERVICE_PARAMS, data=ticket_absolute_url(ticket, request))
        return f"{settings.QR_SERVICE_URL}?{urlencode(params)}"
    return reverse("tickets:qr_png", args=[ticket.id])


def can_scan(user) -> bool:
    if not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    return (user.email or "").lower() in settings.TICKET_SCANNER_EMAILS
