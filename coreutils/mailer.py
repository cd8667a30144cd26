from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.conf import settings
from tickets.utils import qr_png_bytes, ticket_absolute_url
from email.mime.image import MIMEImage


def send_booking_confirmation(ticket, request=None):
    email = (ticket.user.email or "").strip()
    if not email:
        return 0

    ticket_url = ticket_absolute_url(ticket, request)
    cid = f"qr_{ticket.id}"  # referenced as src="cid:qr_..."
    context = {
        "ticket": ticket,
        "ticket_url": ticket_url,
        "cid": cid,
        "site_name": settings.SITE_NAME,
    }
    html = render_to_string("emails/booking_confirmation.html", context)

    msg = EmailMultiAlternatives(
        subject=f"Your {settings.SITE_NAME} ticket: {ticket.show_name}",
        body=html,
        to=[email],
    )
    msg.content_subtype = "html"
    msg.mixed_subtype = "related"  # so the inline QR binds to the HTML

    img = MIMEImage(qr_png_bytes(ticket_url), _subtype="png")
    img.add_header("Content-ID", f"<{cid}>")  # angle brackets required
    img.add_header("Content-Disposition", "inline", filename=f"ticket_{ticket.id}.png")
    msg.attach(img)

    return msg.send(fail_silently=False)
