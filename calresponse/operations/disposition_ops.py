"""
Disposition operations - Sans-I/O logic for response messages.

Maps a requested action (save, send, send and save a copy) plus an optional
destination folder onto the message disposition and folder reference that
get submitted to the service.  Nothing here talks to the network; both the
sync and the async response message use these same functions.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from typing import Union

from calresponse.folders import FolderId
from calresponse.folders import WellKnownFolderName
from calresponse.lib.error import InvalidArgumentError
from calresponse.lib.error import validate_param


class MessageDisposition(Enum):
    """How the service should materialize the message."""

    SAVE_ONLY = "SaveOnly"
    SEND_ONLY = "SendOnly"
    SEND_AND_SAVE_COPY = "SendAndSaveCopy"


class ResponseAction(Enum):
    SAVE = "save"
    SEND = "send"
    SEND_AND_SAVE_COPY = "send_and_save_copy"


DISPOSITION_BY_ACTION = {
    ResponseAction.SAVE: MessageDisposition.SAVE_ONLY,
    ResponseAction.SEND: MessageDisposition.SEND_ONLY,
    ResponseAction.SEND_AND_SAVE_COPY: MessageDisposition.SEND_AND_SAVE_COPY,
}


class _NoDestination:
    """Marker for "no folder argument given" (as opposed to an explicit None)"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DESTINATION"

    def __bool__(self) -> bool:
        return False


NO_DESTINATION = _NoDestination()

Destination = Union[FolderId, WellKnownFolderName, _NoDestination]


@dataclass(frozen=True)
class DispositionRequest:
    """
    What to ask the service for.

    Attributes:
        disposition: The message disposition to submit
        destination: Folder to save into, or None to let the service
            pick its default folder for the disposition
    """

    disposition: MessageDisposition
    destination: Optional[FolderId] = None


def resolve_destination(
    destination: Destination = NO_DESTINATION,
    param_name: str = "destination_folder_id",
) -> Optional[FolderId]:
    """
    Normalize a destination argument to a FolderId, or None.

    Args:
        destination: NO_DESTINATION, a FolderId or a WellKnownFolderName
        param_name: Parameter name reported if destination is None

    Returns:
        The folder to submit, or None when no destination was given

    Raises:
        InvalidArgumentError: destination was explicitly given as None
    """
    if destination is NO_DESTINATION:
        return None
    validate_param(destination, param_name)
    if isinstance(destination, FolderId):
        return destination
    if isinstance(destination, WellKnownFolderName):
        return FolderId.from_well_known(destination)
    raise TypeError(
        "%s must be a FolderId or a WellKnownFolderName, not %s"
        % (param_name, type(destination).__name__)
    )


def build_disposition_request(
    action: ResponseAction,
    destination: Destination = NO_DESTINATION,
    param_name: str = "destination_folder_id",
) -> DispositionRequest:
    """
    Work out the disposition and folder for an action.

    A plain send never stores the message anywhere, so it takes no
    destination.
    """
    action = ResponseAction(action)
    if action is ResponseAction.SEND and destination is not NO_DESTINATION:
        raise InvalidArgumentError(
            param_name, "a message that is only sent cannot have a destination"
        )
    return DispositionRequest(
        disposition=DISPOSITION_BY_ACTION[action],
        destination=resolve_destination(destination, param_name),
    )
