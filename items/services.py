"""Item catalog mutations (admin only; the caller checks permission)."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from django.db import transaction

from common.db import store_errors
from common.errors import DuplicateItem, EmptyFields, IllegalLocator
from common.media import ITEM_IMAGES, DeleteFile, RenameFile
from common.validators import is_blank, is_identifier

from .models import Item

logger = logging.getLogger(__name__)


@dataclass
class ItemUpdate:
    """Partial item update; None means unchanged."""

    locator: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


def clean_locator(locator):
    if not is_identifier(locator):
        raise IllegalLocator()
    return locator


@store_errors(conflict=DuplicateItem)
def add_item(locator: str, title: str, description: str) -> Item:
    if any(is_blank(value) for value in (locator, title, description)):
        raise EmptyFields()
    locator = clean_locator(locator)
    with transaction.atomic():
        item = Item.objects.create(
            locator=locator, title=title, description=description
        )
    logger.info("Added item %s", locator)
    return item


@store_errors(conflict=DuplicateItem)
def edit_item(locator: str, update: ItemUpdate):
    """Merge `update` into the item; returns (item, intents) or (None, [])."""
    item = Item.objects.filter(locator=locator).first()
    if item is None:
        return None, []

    provided = [value for value in (update.locator, update.title, update.description) if value is not None]
    if any(is_blank(value) for value in provided):
        raise EmptyFields()

    intents: List = []
    changed = []
    if update.locator is not None:
        new_locator = clean_locator(update.locator)
        if new_locator != item.locator:
            intents.append(RenameFile(ITEM_IMAGES, item.locator, new_locator))
            item.locator = new_locator
            changed.append("locator")
    if update.title is not None:
        item.title = update.title
        changed.append("title")
    if update.description is not None:
        item.description = update.description
        changed.append("description")

    if changed:
        with transaction.atomic():
            item.save(update_fields=changed)
        logger.info("Edited item %s (%s)", locator, ", ".join(changed))
    return item, intents


@store_errors()
def remove_item(locator: str) -> List:
    """Delete the item and its reviews; returns image intents."""
    deleted, _ = Item.objects.filter(locator=locator).delete()
    if not deleted:
        return []
    logger.info("Removed item %s", locator)
    return [DeleteFile(ITEM_IMAGES, locator)]
