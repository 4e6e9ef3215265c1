#!/usr/bin/env python
import logging

__version__ = "0.9.0"

from .folders import FolderId
from .folders import WellKnownFolderName
from .messages import AcceptMeetingInvitationMessage
from .messages import CalendarResponseMessage
from .messages import CancelMeetingMessage
from .messages import DeclineMeetingInvitationMessage
from .messages import MeetingResponseMixin
from .messages import ResponseContent
from .messages import ResponseType
from .operations.disposition_ops import MessageDisposition
from .operations.disposition_ops import NO_DESTINATION
from .operations.results_ops import ItemRole
from .results import CalendarActionResults

# Silence notification of no default logging handler
log = logging.getLogger("calresponse")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "AcceptMeetingInvitationMessage",
    "CalendarActionResults",
    "CalendarResponseMessage",
    "CancelMeetingMessage",
    "DeclineMeetingInvitationMessage",
    "FolderId",
    "ItemRole",
    "MeetingResponseMixin",
    "MessageDisposition",
    "NO_DESTINATION",
    "ResponseContent",
    "ResponseType",
    "WellKnownFolderName",
]
