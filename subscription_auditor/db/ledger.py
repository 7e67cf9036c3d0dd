import logging
from typing import Any, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from subscription_auditor.core.exceptions import ValidationError
from subscription_auditor.models.events import LedgerEvent, LedgerObserver
from subscription_auditor.models.subscription import Subscription, SubscriptionCreate

logger = logging.getLogger(__name__)

RecordInput = Union[SubscriptionCreate, Mapping[str, Any]]


def _to_create(record: RecordInput) -> SubscriptionCreate:
    """Coerce a mapping into a validated record, raising our ValidationError on failure."""
    if isinstance(record, SubscriptionCreate):
        return record
    try:
        return SubscriptionCreate.model_validate(dict(record))
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(f"Invalid subscription: {first.get('msg')}", field=field or None) from e


class SubscriptionLedger:
    """
    Ordered, in-memory collection of subscriptions for a single session.

    The ledger is the only mutable state in the auditor. Every calculator reads
    an immutable snapshot from ``all()``; mutations notify registered observers
    once the change is complete.
    """

    def __init__(self) -> None:
        self._items: List[Subscription] = []
        self._observers: List[LedgerObserver] = []

    def add(self, record: RecordInput, *, from_preset: bool = False) -> Subscription:
        """Append a subscription with a freshly generated id."""
        create = _to_create(record)
        sub = Subscription(
            name=create.name,
            price=create.price,
            category=create.category,
            alternative=create.alternative,
            is_preset=from_preset,
        )
        self._items.append(sub)
        logger.info(f"Added subscription {sub.name!r} ({sub.price:.2f}/mo, {sub.category})")
        self._notify(LedgerEvent.from_subscription("add", sub))
        return sub

    def remove(self, subscription_id: str) -> Optional[Subscription]:
        """Remove by id. Unknown ids are a no-op and return ``None``."""
        for index, sub in enumerate(self._items):
            if sub.id == subscription_id:
                del self._items[index]
                logger.info(f"Removed subscription {sub.name!r}")
                self._notify(LedgerEvent.from_subscription("remove", sub))
                return sub
        logger.debug(f"Remove ignored, no subscription with id {subscription_id}")
        return None

    def get(self, subscription_id: str) -> Optional[Subscription]:
        return next((sub for sub in self._items if sub.id == subscription_id), None)

    def all(self) -> Tuple[Subscription, ...]:
        return tuple(self._items)

    def names(self) -> set:
        return {sub.name for sub in self._items}

    def subscribe(self, observer: LedgerObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: LedgerObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, event: LedgerEvent) -> None:
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception:
                logger.exception(f"Ledger observer failed on {event.action} event for {event.name!r}")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Subscription]:
        return iter(self.all())

    def __contains__(self, subscription_id: object) -> bool:
        return any(sub.id == subscription_id for sub in self._items)
