"""
Folder references.

A response message can be saved to a folder given either by its
server-assigned id or by one of the well-known (distinguished) folder
names every mailbox has.  Both shapes are represented by ``FolderId``.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from typing import Union

from .lib.error import InvalidArgumentError


class WellKnownFolderName(Enum):
    """Distinguished folder names, as understood by the service."""

    CALENDAR = "calendar"
    CONTACTS = "contacts"
    DELETED_ITEMS = "deleteditems"
    DRAFTS = "drafts"
    INBOX = "inbox"
    JOURNAL = "journal"
    NOTES = "notes"
    OUTBOX = "outbox"
    SENT_ITEMS = "sentitems"
    TASKS = "tasks"
    MSG_FOLDER_ROOT = "msgfolderroot"
    PUBLIC_FOLDERS_ROOT = "publicfoldersroot"
    ROOT = "root"
    JUNK_EMAIL = "junkemail"
    SEARCH_FOLDERS = "searchfolders"
    VOICE_MAIL = "voicemail"
    RECOVERABLE_ITEMS_ROOT = "recoverableitemsroot"
    RECOVERABLE_ITEMS_DELETIONS = "recoverableitemsdeletions"
    ARCHIVE_MSG_FOLDER_ROOT = "archivemsgfolderroot"
    CONFLICTS = "conflicts"
    SYNC_ISSUES = "syncissues"
    LOCAL_FAILURES = "localfailures"
    SERVER_FAILURES = "serverfailures"


@dataclass(frozen=True)
class FolderId:
    """
    Identifies a folder, either explicitly or by well-known name.

    Attributes:
        unique_id: Server-assigned folder id
        change_key: Optional change key accompanying unique_id
        folder_name: Well-known folder name, used instead of unique_id
        mailbox: Optional SMTP address of the mailbox owning folder_name
    """

    unique_id: Optional[str] = None
    change_key: Optional[str] = None
    folder_name: Optional[WellKnownFolderName] = None
    mailbox: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.unique_id is None) == (self.folder_name is None):
            raise InvalidArgumentError(
                "unique_id",
                "exactly one of unique_id and folder_name must be given",
            )
        if self.folder_name is not None and not isinstance(
            self.folder_name, WellKnownFolderName
        ):
            object.__setattr__(
                self, "folder_name", WellKnownFolderName(self.folder_name)
            )
        if self.unique_id is not None and (self.mailbox is not None):
            raise InvalidArgumentError(
                "mailbox", "mailbox only applies to well-known folders"
            )

    @classmethod
    def from_well_known(
        cls,
        name: Union[WellKnownFolderName, str],
        mailbox: Optional[str] = None,
    ) -> "FolderId":
        return cls(folder_name=WellKnownFolderName(name), mailbox=mailbox)

    @property
    def is_well_known(self) -> bool:
        return self.folder_name is not None

    def __str__(self) -> str:
        if self.is_well_known:
            if self.mailbox:
                return "%s (%s)" % (self.folder_name.value, self.mailbox)
            return self.folder_name.value
        return self.unique_id
