"""
Result operations - Sans-I/O classification of the items a response created.

The service reports the items it created or modified while processing a
response message as an unordered collection.  The functions in this module
work out what each item is from what the item says about itself, never from
its position in the collection.
"""
from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional
from typing import Tuple

import icalendar

from calresponse.lib import error


class ItemRole(Enum):
    APPOINTMENT = "appointment"
    MEETING_REQUEST = "meeting_request"
    MEETING_RESPONSE = "meeting_response"
    MEETING_CANCELLATION = "meeting_cancellation"


# Exchange message classes, longest prefix first
ITEM_CLASS_ROLES = (
    ("ipm.schedule.meeting.request", ItemRole.MEETING_REQUEST),
    ("ipm.schedule.meeting.resp", ItemRole.MEETING_RESPONSE),
    ("ipm.schedule.meeting.canceled", ItemRole.MEETING_CANCELLATION),
    ("ipm.appointment", ItemRole.APPOINTMENT),
)

# iTIP methods (RFC 5546)
ITIP_METHOD_ROLES = {
    "REQUEST": ItemRole.MEETING_REQUEST,
    "REPLY": ItemRole.MEETING_RESPONSE,
    "CANCEL": ItemRole.MEETING_CANCELLATION,
}

ITEM_ROLE_VALUES = frozenset(role.value for role in ItemRole)


@dataclass(frozen=True)
class ClassifiedItems:
    """Items grouped by role, plus whatever could not be placed."""

    by_role: Dict[ItemRole, Any] = field(default_factory=dict)
    unclassified: Tuple[Any, ...] = ()


def role_from_item_class(item_class: Optional[str]) -> Optional[ItemRole]:
    """
    Map an Exchange item class like ``IPM.Schedule.Meeting.Resp.Pos`` to a role.
    """
    if not item_class or not isinstance(item_class, str):
        return None
    item_class = item_class.lower()
    for prefix, role in ITEM_CLASS_ROLES:
        if item_class == prefix or item_class.startswith(prefix + "."):
            return role
    return None


def role_from_icalendar(data: Any) -> Optional[ItemRole]:
    """
    Work out a role from iCalendar data.

    The iTIP method decides for scheduling messages.  A calendar without a
    method holding an event is a plain appointment.

    Args:
        data: iCalendar data as str or bytes, or a parsed icalendar.Calendar

    Returns:
        The role, or None if the data does not look like any of them
    """
    if not data:
        return None
    if isinstance(data, icalendar.Calendar):
        ical = data
    elif isinstance(data, (str, bytes)):
        try:
            ical = icalendar.Calendar.from_ical(data)
        except ValueError:
            return None
    else:
        return None
    method = ical.get("method")
    if method:
        return ITIP_METHOD_ROLES.get(str(method).upper())
    if any(comp.name == "VEVENT" for comp in ical.subcomponents):
        return ItemRole.APPOINTMENT
    return None


def classify_item(item: Any) -> Optional[ItemRole]:
    """
    Find the role of a single item returned by the service.

    Signals are tried in order: an explicit ``item_role`` attribute,
    the Exchange ``item_class``, then iCalendar ``data``.
    """
    role = getattr(item, "item_role", None)
    if isinstance(role, ItemRole):
        return role
    if isinstance(role, str) and role in ITEM_ROLE_VALUES:
        return ItemRole(role)
    role = role_from_item_class(getattr(item, "item_class", None))
    if role is not None:
        return role
    return role_from_icalendar(getattr(item, "data", None))


def classify_items(items: Iterable[Any]) -> ClassifiedItems:
    """
    Group the items a response created or modified by role.

    Never raises.  Items without a role, and items whose
    role is claimed by more than one item (like a series master returned
    together with one of its occurrences), go to ``unclassified``.
    """
    candidates: Dict[ItemRole, List[Any]] = {}
    unclassified = []
    for item in items:
        role = classify_item(item)
        if role is None:
            error.weirdness("could not classify item returned by the service", item)
            unclassified.append(item)
        else:
            candidates.setdefault(role, []).append(item)
    by_role: Dict[ItemRole, Any] = {}
    for role, claimants in candidates.items():
        if len(claimants) == 1:
            by_role[role] = claimants[0]
        else:
            error.weirdness(
                "the service returned more than one %s item" % role.value, *claimants
            )
            unclassified.extend(claimants)
    return ClassifiedItems(by_role=by_role, unclassified=tuple(unclassified))
