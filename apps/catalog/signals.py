"""
Django signals for the catalog app.
entity_viewed is sent after a product detail has been built.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

ENTITY_TYPE_PRODUCT = 3

# Sent with entity_id and entity_type_id keyword arguments.
entity_viewed = Signal()


def notify_viewed(entity_id, entity_type_id):
    """
    Send entity_viewed without letting receivers break the caller.

    Receivers run synchronously in the request, so a slow receiver delays
    the response. Receiver errors are logged and dropped.
    """
    responses = entity_viewed.send_robust(
        sender=None,
        entity_id=entity_id,
        entity_type_id=entity_type_id,
    )
    for handler, response in responses:
        if isinstance(response, Exception):
            logger.warning(
                "entity_viewed receiver %r failed for entity %s (type %s): %s",
                handler, entity_id, entity_type_id, response,
            )
    return responses


@receiver(entity_viewed)
def log_entity_viewed(sender, entity_id, entity_type_id, **kwargs):
    logger.debug("Entity %s (type %s) viewed", entity_id, entity_type_id)
