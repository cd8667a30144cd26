"""
Booking: the one place that touches show inventory.
"""
import logging

from django.db import transaction

from shows.models import Show
from .models import Ticket

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Base for bookings refused for a domain reason."""


class ShowNotFound(BookingError):
    pass


class NotEnoughTickets(BookingError):
    pass


def book_tickets(*, show_id, ticket_count, user, user_name, roll_number):
    """
    Locks the show row, checks inventory, bumps tickets_sold and issues one
    Ticket covering ticket_count seats. All of it commits or none of it does.
    """
    with transaction.atomic():
        show = Show.objects.select_for_update().filter(pk=show_id).first()
        if show is None:
            raise ShowNotFound("Show does not exist!")

        new_sold = show.tickets_sold + ticket_count
        if new_sold > show.total_tickets:
            raise NotEnoughTickets("Not enough tickets available!")

        show.tickets_sold = new_sold
        show.save(update_fields=["tickets_sold"])

        ticket = Ticket.objects.create(
            user=user,
            user_name=user_name,
            roll_number=roll_number,
            show=show,
            show_name=show.name,
            ticket_count=ticket_count,
        )

    logger.info("Booked %s ticket(s) for show %s (%s/%s sold), ticket %s",
                ticket_count, show.pk, new_sold, show.total_tickets, ticket.id)
    return ticket
