from django.urls import path
from . import views

app_name = "tickets"

urlpatterns = [
    path("api/book", views.book, name="book"),
    path("api/book/", views.book),
    path("ticket/<uuid:ticket_id>/", views.ticket_page, name="ticket"),
    path("qr/<uuid:ticket_id>.png", views.qr_png, name="qr_png"),
    path("thank-you/", views.ThankYouView.as_view(), name="thank_you"),

    # door staff
    path("verify/", views.verify, name="verify"),
    path("verify/api/", views.verify_api, name="verify_api"),
]
