import uuid

import pytest
from django.core import mail
from django.urls import reverse

from tickets.models import Ticket

pytestmark = pytest.mark.django_db

URL = "/api/book"


def _payload(show, **overrides):
    data = {"showId": show.pk, "ticketCount": 2, "userName": "Ada Lovelace", "rollNumber": "CS-042"}
    data.update(overrides)
    return data


def test_url_name_resolves():
    assert reverse("tickets:book") == URL


def test_get_not_allowed(auth_client):
    resp = auth_client.get(URL)
    assert resp.status_code == 405
    assert resp.json() == {"message": "Method not allowed"}


def test_anonymous_rejected(client, show):
    resp = client.post(URL, _payload(show), content_type="application/json")
    assert resp.status_code == 401
    assert Ticket.objects.count() == 0


def test_successful_booking(auth_client, show, user):
    resp = auth_client.post(URL, _payload(show), content_type="application/json")

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Booking successful!"
    t = Ticket.objects.get(pk=uuid.UUID(body["ticketId"]))
    assert t.user == user
    assert t.user_name == "Ada Lovelace"
    assert t.roll_number == "CS-042"
    show.refresh_from_db()
    assert show.tickets_sold == 2


def test_trailing_slash_also_accepted(auth_client, show):
    resp = auth_client.post(URL + "/", _payload(show), content_type="application/json")
    assert resp.status_code == 200


def test_form_encoded_body(auth_client, show):
    resp = auth_client.post(URL, _payload(show))
    assert resp.status_code == 200


def test_holder_comes_from_session_not_body(auth_client, show, user, other_user):
    resp = auth_client.post(URL, _payload(show, userId=other_user.pk), content_type="application/json")
    assert resp.status_code == 200
    assert Ticket.objects.get().user == user


@pytest.mark.parametrize("overrides", [
    {"ticketCount": 0},
    {"ticketCount": 4},
    {"ticketCount": -1},
    {"ticketCount": "lots"},
    {"userName": ""},
    {"rollNumber": "   "},
    {"showId": None},
])
def test_invalid_requests(auth_client, show, overrides):
    resp = auth_client.post(URL, _payload(show, **overrides), content_type="application/json")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid booking request."
    show.refresh_from_db()
    assert show.tickets_sold == 0


@pytest.mark.parametrize("field, value", [
    ("userName", ["a"]),
    ("userName", {"first": "Ada"}),
    ("rollNumber", ["CS-042"]),
    ("rollNumber", 42),
])
def test_non_text_names_rejected(auth_client, show, field, value):
    resp = auth_client.post(URL, _payload(show, **{field: value}), content_type="application/json")
    assert resp.status_code == 400
    assert field in resp.json()["errors"]
    assert not Ticket.objects.exists()
    show.refresh_from_db()
    assert show.tickets_sold == 0


def test_missing_field(auth_client, show):
    data = _payload(show)
    del data["rollNumber"]
    resp = auth_client.post(URL, data, content_type="application/json")
    assert resp.status_code == 400
    assert "rollNumber" in resp.json()["errors"]


def test_malformed_json(auth_client):
    resp = auth_client.post(URL, "{not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid booking request."


def test_max_per_booking_follows_setting(auth_client, show, settings):
    settings.MAX_TICKETS_PER_BOOKING = 5
    resp = auth_client.post(URL, _payload(show, ticketCount=5), content_type="application/json")
    assert resp.status_code == 200


def test_unknown_show(auth_client, show):
    resp = auth_client.post(URL, _payload(show, showId=show.pk + 100), content_type="application/json")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Show does not exist!"}


def test_sold_out(auth_client, sold_out_show):
    resp = auth_client.post(URL, _payload(sold_out_show, ticketCount=1), content_type="application/json")
    assert resp.status_code == 409
    assert resp.json() == {"message": "Not enough tickets available!"}
    sold_out_show.refresh_from_db()
    assert sold_out_show.tickets_sold == 5


def test_unexpected_failure_is_500_and_rolls_back(auth_client, show, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError("db went away")

    monkeypatch.setattr(Ticket.objects, "create", boom)
    resp = auth_client.post(URL, _payload(show), content_type="application/json")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
    show.refresh_from_db()
    assert show.tickets_sold == 0


def test_confirmation_email_sent(auth_client, show, user):
    resp = auth_client.post(URL, _payload(show), content_type="application/json")
    assert resp.status_code == 200
    assert len(mail.outbox) == 1
    assert mail.outbox[0].to == [user.email]
    assert "Neon Nights" in mail.outbox[0].subject


def test_email_disabled(auth_client, show, settings):
    settings.SEND_BOOKING_EMAILS = False
    auth_client.post(URL, _payload(show), content_type="application/json")
    assert mail.outbox == []


def test_email_failure_does_not_fail_booking(auth_client, show, monkeypatch):
    def broken(ticket, request=None):
        raise ConnectionError("smtp down")

    monkeypatch.setattr("tickets.views.send_booking_confirmation", broken)
    resp = auth_client.post(URL, _payload(show), content_type="application/json")
    assert resp.status_code == 200
    assert Ticket.objects.count() == 1
