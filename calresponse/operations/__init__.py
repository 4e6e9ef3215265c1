"""
Operations Layer - Sans-I/O logic for calendar response messages.

This package contains pure functions that decide what a response message
asks of the service and how to read the answer, without performing any
network I/O.  Both CalendarResponseMessage and AsyncCalendarResponseMessage
use these same functions.

Usage:
    from calresponse.operations import disposition_ops, results_ops

    # Build the request (Sans-I/O)
    request = disposition_ops.build_disposition_request(
        disposition_ops.ResponseAction.SAVE, WellKnownFolderName.DRAFTS
    )

    # The service performs the create call
    items = service.create_response_object(
        item, content, request.destination, request.disposition
    )

    # Classify the result (Sans-I/O)
    classified = results_ops.classify_items(items)

Modules:
    disposition_ops: disposition and destination folder resolution
    results_ops: classification of created/modified items by role
"""
from calresponse.operations.disposition_ops import build_disposition_request
from calresponse.operations.disposition_ops import DispositionRequest
from calresponse.operations.disposition_ops import MessageDisposition
from calresponse.operations.disposition_ops import NO_DESTINATION
from calresponse.operations.disposition_ops import resolve_destination
from calresponse.operations.disposition_ops import ResponseAction
from calresponse.operations.results_ops import classify_item
from calresponse.operations.results_ops import classify_items
from calresponse.operations.results_ops import ClassifiedItems
from calresponse.operations.results_ops import ItemRole
from calresponse.operations.results_ops import role_from_icalendar
from calresponse.operations.results_ops import role_from_item_class

__all__ = [
    # Disposition operations
    "MessageDisposition",
    "ResponseAction",
    "NO_DESTINATION",
    "DispositionRequest",
    "resolve_destination",
    "build_disposition_request",
    # Result operations
    "ItemRole",
    "ClassifiedItems",
    "classify_item",
    "classify_items",
    "role_from_item_class",
    "role_from_icalendar",
]
