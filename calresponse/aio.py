#!/usr/bin/env python
"""
Async calendar response messages.

Same contract as ``calresponse.messages``, for services whose create call
is a coroutine:

    from calresponse import aio

    message = aio.AsyncCalendarResponseMessage(item, ResponseType.ACCEPT)
    results = await message.send_and_save_copy(WellKnownFolderName.SENT_ITEMS)

Validation happens before the service is awaited, and classification of
the returned items is shared with the sync API.
"""
from typing import Any
from typing import Optional
from typing import Protocol
from typing import Sequence

from .folders import FolderId
from .messages import ResponseContent
from .messages import ResponseMessageBase
from .messages import ResponseType
from .operations.disposition_ops import Destination
from .operations.disposition_ops import MessageDisposition
from .operations.disposition_ops import NO_DESTINATION
from .operations.disposition_ops import ResponseAction
from .results import CalendarActionResults


class AsyncCreateResponseService(Protocol):
    async def create_response_object(
        self,
        reference_item: Any,
        content: ResponseContent,
        destination: Optional[FolderId],
        disposition: MessageDisposition,
    ) -> Sequence[Any]:
        ...


class AsyncCalendarResponseMessage(ResponseMessageBase):
    """
    Async version of CalendarResponseMessage.
    """

    async def _create(
        self, action: ResponseAction, destination: Destination = NO_DESTINATION
    ) -> CalendarActionResults:
        request = self._disposition_request(action, destination)
        items = await self._service.create_response_object(
            self._reference_item,
            self.content,
            request.destination,
            request.disposition,
        )
        return CalendarActionResults(items)

    async def save(
        self, destination_folder_id: Destination = NO_DESTINATION
    ) -> CalendarActionResults:
        return await self._create(ResponseAction.SAVE, destination_folder_id)

    async def send(self) -> CalendarActionResults:
        return await self._create(ResponseAction.SEND)

    async def send_and_save_copy(
        self, destination_folder_id: Destination = NO_DESTINATION
    ) -> CalendarActionResults:
        return await self._create(
            ResponseAction.SEND_AND_SAVE_COPY, destination_folder_id
        )


__all__ = [
    "AsyncCreateResponseService",
    "AsyncCalendarResponseMessage",
    "ResponseType",
]
