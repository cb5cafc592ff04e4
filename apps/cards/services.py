"""Card balance changes."""

import logging

from django.db import transaction
from django.db.models import F

from .exceptions import CardNotFoundError
from .models import Card

logger = logging.getLogger(__name__)


@transaction.atomic
def increase_available_limit(*, card_id, user, amount):
    """
    Raise the available limit of one of ``user``'s cards by ``amount``.

    Raises:
        CardNotFoundError: The card does not exist or belongs to someone else.
    """
    updated = Card.objects.filter(id=card_id, user=user).update(
        available_limit=F('available_limit') + amount
    )
    if not updated:
        raise CardNotFoundError()

    card = Card.objects.get(id=card_id)
    logger.info("Card %s repaid %s, available %s", card.alias, amount, card.available_limit)
    return card
