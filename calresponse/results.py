"""
The result of saving or sending a calendar response message.
"""
from typing import Any
from typing import Iterable
from typing import Optional
from typing import Tuple

from .operations.results_ops import classify_items
from .operations.results_ops import ItemRole


class CalendarActionResults:
    """
    The items that were created or modified as a result of a response
    message being saved or sent.

    Any slot may be None; a plain send typically creates nothing in the
    mailbox of the sender.  The object is read-only once constructed.
    """

    __slots__ = ("_items", "_by_role", "_unclassified")

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        items = tuple(items or ())
        classified = classify_items(items)
        object.__setattr__(self, "_items", items)
        object.__setattr__(self, "_by_role", dict(classified.by_role))
        object.__setattr__(self, "_unclassified", classified.unclassified)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("CalendarActionResults is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("CalendarActionResults is read-only")

    def _get(self, role: ItemRole) -> Any:
        return self._by_role.get(role)

    @property
    def appointment(self) -> Any:
        """The calendar item that was created or updated"""
        return self._get(ItemRole.APPOINTMENT)

    @property
    def meeting_request(self) -> Any:
        """The meeting request that was updated"""
        return self._get(ItemRole.MEETING_REQUEST)

    @property
    def meeting_response(self) -> Any:
        """The response message that was saved"""
        return self._get(ItemRole.MEETING_RESPONSE)

    @property
    def meeting_cancellation(self) -> Any:
        """The cancellation message that was saved"""
        return self._get(ItemRole.MEETING_CANCELLATION)

    @property
    def response_copy(self) -> Any:
        """The item created from the response action itself, if any"""
        if self.meeting_response is not None:
            return self.meeting_response
        return self.meeting_cancellation

    @property
    def original_item(self) -> Any:
        """The original item as modified by the response action, if any"""
        if self.appointment is not None:
            return self.appointment
        return self.meeting_request

    @property
    def unclassified(self) -> Tuple[Any, ...]:
        return self._unclassified

    @property
    def items(self) -> Tuple[Any, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        slots = ", ".join(
            "%s=%r" % (role.value, self._by_role[role])
            for role in ItemRole
            if role in self._by_role
        )
        return "CalendarActionResults(%s)" % slots
