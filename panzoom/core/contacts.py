# panzoom/core/contacts.py
"""
Active pointer contacts (fingers and the emulated mouse button).

The tracker keeps one `Contact` per pressed id and two ordered pinch slots
(primary, secondary) filled in press order. A contact's position only moves
when it travels further than the sensitivity threshold, which keeps sensor
jitter out of the gesture math.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import pygame

from panzoom.utils.logging_setup import get_logger

Vec2 = pygame.math.Vector2

log = get_logger(__name__)

PINCH_SLOTS = 2


class ContactSource(enum.Enum):
    TOUCH = "touch"
    MOUSE = "mouse"


@dataclass
class Contact:
    id: int
    last_position: Vec2
    source: ContactSource = ContactSource.TOUCH

    def __post_init__(self) -> None:
        if not isinstance(self.last_position, Vec2):
            self.last_position = Vec2(self.last_position)


class ContactTracker:
    """Set of currently pressed contacts keyed by id."""

    def __init__(self, sensitivity: float = 0.0) -> None:
        self.sensitivity = float(sensitivity)
        self._contacts: Dict[int, Contact] = {}  # insertion order == press order
        self._slots: List[int] = []

    # -------------------------
    # Mutation
    # -------------------------

    def on_press(self, contact_id: int, position: Tuple[float, float],
                 source: ContactSource = ContactSource.TOUCH) -> Contact:
        """Insert or overwrite the contact for `contact_id`."""
        existing = self._contacts.get(contact_id)
        if existing is not None:
            existing.last_position = Vec2(position)
            existing.source = source
            return existing
        contact = Contact(contact_id, Vec2(position), source)
        self._contacts[contact_id] = contact
        if len(self._slots) < PINCH_SLOTS:
            self._slots.append(contact_id)
        return contact

    def on_release(self, contact_id: int) -> bool:
        """Remove `contact_id` if present. Returns True if something was removed."""
        if self._contacts.pop(contact_id, None) is None:
            return False
        if contact_id in self._slots:
            self._slots.remove(contact_id)
            self._promote()
        return True

    def on_move(self, contact_id: int, position: Tuple[float, float]) -> bool:
        """
        Accept a move only if it exceeds the sensitivity threshold.
        Returns True when the stored position was updated.
        """
        contact = self._contacts.get(contact_id)
        if contact is None:
            return False
        pos = Vec2(position)
        if contact.last_position.distance_to(pos) > self.sensitivity:
            contact.last_position = pos
            return True
        return False

    def clear(self) -> None:
        self._contacts.clear()
        self._slots.clear()

    def _promote(self) -> None:
        """Fill free pinch slots with the earliest-pressed unslotted contacts."""
        for cid in self._contacts:
            if len(self._slots) >= PINCH_SLOTS:
                break
            if cid not in self._slots:
                self._slots.append(cid)
                log.debug("Contact %s promoted to pinch slot %d", cid, len(self._slots) - 1)

    # -------------------------
    # Queries
    # -------------------------

    def active_count(self) -> int:
        return len(self._contacts)

    def get(self, contact_id: int) -> Optional[Contact]:
        return self._contacts.get(contact_id)

    def has_all(self, ids: Iterable[int]) -> bool:
        return all(cid in self._contacts for cid in ids)

    @property
    def slots(self) -> Tuple[int, ...]:
        """Pinch participants in (primary, secondary) order."""
        return tuple(self._slots)

    def pinch_pair(self) -> Optional[Tuple[Contact, Contact]]:
        """Both pinch-slot contacts, or None if fewer than two are pressed."""
        if len(self._slots) < PINCH_SLOTS or not self.has_all(self._slots):
            return None
        a, b = self._slots
        return self._contacts[a], self._contacts[b]

    def pinch_distance(self) -> Optional[float]:
        pair = self.pinch_pair()
        if pair is None:
            return None
        return pair[0].last_position.distance_to(pair[1].last_position)

    def __len__(self) -> int:
        return len(self._contacts)

    def __contains__(self, contact_id: object) -> bool:
        return contact_id in self._contacts

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts.values()))

    def __repr__(self) -> str:
        return f"ContactTracker(ids={list(self._contacts)}, slots={self._slots})"
