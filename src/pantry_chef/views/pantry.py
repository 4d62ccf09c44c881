"""
Pantry list view state.

Holds the last read of the user's pantry. Every successful mutation
re-reads the list; every failure becomes a destructive notification and
leaves the view usable.
"""

import logging

from pantry_chef.db.stores import PantryStore
from pantry_chef.models import PantryItem
from pantry_chef.views.notifications import Notification, Notifier, error_notification

logger = logging.getLogger(__name__)


class PantryView:
    def __init__(self, store: PantryStore, notifier: Notifier):
        self.store = store
        self.notifier = notifier
        self.items: list[PantryItem] = []
        self.loading = False

    def refresh(self) -> list[PantryItem]:
        self.loading = True
        try:
            self.items = self.store.list_all()
        except Exception as e:
            logger.warning(f"Failed to load pantry: {e}")
            self.notifier.notify(error_notification(e))
        finally:
            self.loading = False
        return self.items

    def search(self, term: str) -> list[PantryItem]:
        """Case-insensitive substring filter over the loaded items."""
        needle = term.strip().lower()
        if not needle:
            return list(self.items)
        return [item for item in self.items if needle in item.name.lower()]

    def add(self, name: str, quantity: str | None = None) -> PantryItem | None:
        """Add an ingredient. A blank name is ignored."""
        if not name.strip():
            return None
        try:
            item = self.store.add(name, quantity)
        except Exception as e:
            self.notifier.notify(error_notification(e))
            return None

        self.refresh()
        self.notifier.notify(Notification(title="Added!", description=f"{item.name} added to your pantry."))
        return item

    def update(self, item_id: str, name: str, quantity: str | None = None) -> PantryItem | None:
        try:
            item = self.store.update(item_id, name, quantity)
        except Exception as e:
            self.notifier.notify(error_notification(e))
            return None

        self.refresh()
        self.notifier.notify(Notification(title="Updated!"))
        return item

    def delete(self, item_id: str) -> bool:
        try:
            self.store.delete(item_id)
        except Exception as e:
            self.notifier.notify(error_notification(e))
            return False

        self.refresh()
        self.notifier.notify(Notification(title="Removed from pantry."))
        return True
