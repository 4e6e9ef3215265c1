import pytest

from calresponse.folders import FolderId
from calresponse.folders import WellKnownFolderName
from calresponse.lib.error import InvalidArgumentError


class TestFolderId:
    def test_explicit_id(self):
        folder = FolderId(unique_id="AAMkAD", change_key="CQAAAB")
        assert not folder.is_well_known
        assert folder.folder_name is None
        assert str(folder) == "AAMkAD"

    def test_well_known(self):
        folder = FolderId.from_well_known(WellKnownFolderName.SENT_ITEMS)
        assert folder.is_well_known
        assert folder.unique_id is None
        assert str(folder) == "sentitems"

    def test_well_known_by_value(self):
        assert FolderId.from_well_known("drafts") == FolderId(
            folder_name=WellKnownFolderName.DRAFTS
        )
        assert FolderId(folder_name="inbox").folder_name is WellKnownFolderName.INBOX

    def test_mailbox(self):
        folder = FolderId.from_well_known("calendar", mailbox="boss@example.com")
        assert folder != FolderId.from_well_known("calendar")
        assert str(folder) == "calendar (boss@example.com)"

    def test_value_semantics(self):
        assert FolderId(unique_id="a") == FolderId(unique_id="a")
        assert hash(FolderId(unique_id="a")) == hash(FolderId(unique_id="a"))
        with pytest.raises(AttributeError):
            FolderId(unique_id="a").unique_id = "b"

    def test_needs_exactly_one_identity(self):
        with pytest.raises(InvalidArgumentError):
            FolderId()
        with pytest.raises(InvalidArgumentError):
            FolderId(unique_id="a", folder_name=WellKnownFolderName.INBOX)

    def test_mailbox_only_for_well_known(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            FolderId(unique_id="a", mailbox="boss@example.com")
        assert excinfo.value.param_name == "mailbox"

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            FolderId.from_well_known("attic")
