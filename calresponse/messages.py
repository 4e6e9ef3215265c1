"""
Calendar response messages.

A response message is the reply to a calendar item: accepting, tentatively
accepting or declining a meeting request, or cancelling a meeting as its
organizer.  It is created from the item it responds to, is saved, sent or
sent-and-saved exactly once, and tells what that did through a
``CalendarActionResults``.

The service that performs the actual create call is a collaborator: any
object with a matching ``create_response_object`` method will do.  Errors it
raises are passed on to the caller untouched.
"""
import logging
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import List
from typing import Optional
from typing import Protocol
from typing import Sequence
from typing import Union

from .folders import FolderId
from .lib.error import InvalidOperationError
from .lib.error import validate_param
from .operations.disposition_ops import build_disposition_request
from .operations.disposition_ops import Destination
from .operations.disposition_ops import DispositionRequest
from .operations.disposition_ops import MessageDisposition
from .operations.disposition_ops import NO_DESTINATION
from .operations.disposition_ops import ResponseAction
from .results import CalendarActionResults

log = logging.getLogger("calresponse")


class ResponseType(Enum):
    ACCEPT = "Accept"
    TENTATIVELY_ACCEPT = "TentativelyAccept"
    DECLINE = "Decline"
    CANCEL = "Cancel"


@dataclass
class ResponseContent:
    """The outgoing-message fields of a response."""

    response_type: ResponseType
    subject: Optional[str] = None
    body: Optional[str] = None
    to_recipients: List[str] = field(default_factory=list)
    cc_recipients: List[str] = field(default_factory=list)
    bcc_recipients: List[str] = field(default_factory=list)


class CreateResponseService(Protocol):
    def create_response_object(
        self,
        reference_item: Any,
        content: ResponseContent,
        destination: Optional[FolderId],
        disposition: MessageDisposition,
    ) -> Sequence[Any]:
        ...


class ResponseMessageBase:
    """
    Binding and validation shared by the sync and async response messages.

    Args:
        reference_item: The calendar item being responded to.  It must
            have been saved to the service (have an ``item_id``).
        response_type: What kind of response this is
        service: The service to create the response with.  Defaults to
            ``reference_item.service``.
        **fields: Initial values for the ResponseContent fields
            (subject, body, to_recipients, ...)
    """

    def __init__(
        self,
        reference_item: Any,
        response_type: Union[ResponseType, str],
        service: Optional[Any] = None,
        **fields: Any,
    ) -> None:
        validate_param(reference_item, "reference_item")
        if service is None:
            service = getattr(reference_item, "service", None)
        validate_param(service, "service")
        if getattr(reference_item, "item_id", None) is None:
            raise InvalidOperationError(
                "cannot respond to an item that has not been saved to the service"
            )
        self._reference_item = reference_item
        self._service = service
        self.content = ResponseContent(
            response_type=ResponseType(response_type), **fields
        )

    @property
    def reference_item(self) -> Any:
        return self._reference_item

    @property
    def service(self) -> Any:
        return self._service

    @property
    def response_type(self) -> ResponseType:
        return self.content.response_type

    def _disposition_request(
        self, action: ResponseAction, destination: Destination = NO_DESTINATION
    ) -> DispositionRequest:
        request = build_disposition_request(action, destination)
        log.debug(
            "%s response to %s: disposition %s, destination %s",
            self.response_type.value,
            getattr(self._reference_item, "item_id", None),
            request.disposition.value,
            request.destination if request.destination else "(service default)",
        )
        return request

    def __repr__(self) -> str:
        return "%s(%r)" % (
            self.__class__.__name__,
            getattr(self._reference_item, "item_id", None),
        )


class CalendarResponseMessage(ResponseMessageBase):
    """
    A response to a calendar item.

    save(), send() and send_and_save_copy() each make exactly one call to
    the service and return a CalendarActionResults.  An explicit None as
    destination folder is rejected with InvalidArgumentError before the
    service is called.
    """

    def _create(
        self, action: ResponseAction, destination: Destination = NO_DESTINATION
    ) -> CalendarActionResults:
        request = self._disposition_request(action, destination)
        items = self._service.create_response_object(
            self._reference_item,
            self.content,
            request.destination,
            request.disposition,
        )
        return CalendarActionResults(items)

    def save(
        self, destination_folder_id: Destination = NO_DESTINATION
    ) -> CalendarActionResults:
        """
        Saves the response.  Without a destination the service saves it
        in the Drafts folder.

        Args:
            destination_folder_id: A FolderId or a WellKnownFolderName
        """
        return self._create(ResponseAction.SAVE, destination_folder_id)

    def send(self) -> CalendarActionResults:
        """
        Sends the response without saving a copy.
        """
        return self._create(ResponseAction.SEND)

    def send_and_save_copy(
        self, destination_folder_id: Destination = NO_DESTINATION
    ) -> CalendarActionResults:
        """
        Sends the response and saves a copy.  Without a destination the
        service saves the copy in the Sent Items folder.

        Args:
            destination_folder_id: A FolderId or a WellKnownFolderName
        """
        return self._create(ResponseAction.SEND_AND_SAVE_COPY, destination_folder_id)


class AcceptMeetingInvitationMessage(CalendarResponseMessage):
    def __init__(
        self,
        reference_item: Any,
        tentative: bool = False,
        service: Optional[Any] = None,
        **fields: Any,
    ) -> None:
        response_type = (
            ResponseType.TENTATIVELY_ACCEPT if tentative else ResponseType.ACCEPT
        )
        super().__init__(reference_item, response_type, service, **fields)

    @property
    def tentative(self) -> bool:
        return self.response_type is ResponseType.TENTATIVELY_ACCEPT


class DeclineMeetingInvitationMessage(CalendarResponseMessage):
    def __init__(
        self, reference_item: Any, service: Optional[Any] = None, **fields: Any
    ) -> None:
        super().__init__(reference_item, ResponseType.DECLINE, service, **fields)


class CancelMeetingMessage(CalendarResponseMessage):
    def __init__(
        self, reference_item: Any, service: Optional[Any] = None, **fields: Any
    ) -> None:
        super().__init__(reference_item, ResponseType.CANCEL, service, **fields)


class MeetingResponseMixin:
    """
    Response shortcuts for calendar item classes.

    The class mixing this in must provide ``item_id`` and ``service``
    attributes.
    """

    def create_accept_message(
        self, tentative: bool = False
    ) -> AcceptMeetingInvitationMessage:
        return AcceptMeetingInvitationMessage(self, tentative=tentative)

    def create_decline_message(self) -> DeclineMeetingInvitationMessage:
        return DeclineMeetingInvitationMessage(self)

    def create_cancel_meeting_message(self) -> CancelMeetingMessage:
        return CancelMeetingMessage(self)

    @staticmethod
    def _send_or_save(
        message: CalendarResponseMessage, send_response: bool
    ) -> CalendarActionResults:
        if send_response:
            return message.send_and_save_copy()
        return message.save()

    def accept(self, send_response: bool) -> CalendarActionResults:
        """
        Accepts the meeting.  If send_response is set the response is sent
        to the organizer and a copy is kept in Sent Items, otherwise it is
        saved in Drafts.
        """
        return self._send_or_save(self.create_accept_message(), send_response)

    def accept_tentatively(self, send_response: bool) -> CalendarActionResults:
        return self._send_or_save(
            self.create_accept_message(tentative=True), send_response
        )

    def decline(self, send_response: bool) -> CalendarActionResults:
        return self._send_or_save(self.create_decline_message(), send_response)

    def cancel_meeting(
        self, cancellation_message_text: Optional[str] = None
    ) -> CalendarActionResults:
        """
        Cancels the meeting and notifies the attendees.  A copy of the
        cancellation is kept in Sent Items.
        """
        message = self.create_cancel_meeting_message()
        if cancellation_message_text is not None:
            message.content.body = cancellation_message_text
        return message.send_and_save_copy()
