import pytest
from django.core.cache import cache

from shows.models import Show
from tickets.services import book_tickets

PASSWORD = "s3cret-Ticket!"


@pytest.fixture(autouse=True)
def _fresh_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="fan@example.com", email="fan@example.com", password=PASSWORD)


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username="other@example.com", email="other@example.com", password=PASSWORD)


@pytest.fixture
def scanner(django_user_model):
    return django_user_model.objects.create_superuser(
        username="door@example.com", email="door@example.com", password=PASSWORD)


@pytest.fixture
def show(db):
    return Show.objects.create(name="Neon Nights", description="Synthwave all night.",
                               total_tickets=10, tickets_sold=0)


@pytest.fixture
def sold_out_show(db):
    return Show.objects.create(name="Full House", total_tickets=5, tickets_sold=5)


@pytest.fixture
def ticket(show, user):
    return book_tickets(show_id=show.pk, ticket_count=2, user=user,
                        user_name="Ada Lovelace", roll_number="CS-042")


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def scanner_client(client, scanner):
    client.force_login(scanner)
    return client
