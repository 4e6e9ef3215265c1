"""
Tests for the disposition operations module.

These tests verify the Sans-I/O disposition and destination resolution
without any service calls.
"""
import pytest

from calresponse.folders import FolderId
from calresponse.folders import WellKnownFolderName
from calresponse.lib.error import InvalidArgumentError
from calresponse.operations.disposition_ops import build_disposition_request
from calresponse.operations.disposition_ops import DispositionRequest
from calresponse.operations.disposition_ops import MessageDisposition
from calresponse.operations.disposition_ops import NO_DESTINATION
from calresponse.operations.disposition_ops import resolve_destination
from calresponse.operations.disposition_ops import ResponseAction


class TestNoDestination:
    def test_singleton(self):
        """The marker is unique and falsy"""
        assert type(NO_DESTINATION)() is NO_DESTINATION
        assert not NO_DESTINATION
        assert repr(NO_DESTINATION) == "NO_DESTINATION"


class TestResolveDestination:
    """Tests for resolve_destination function."""

    def test_no_destination(self):
        """Absent destination resolves to None, not a guessed default"""
        assert resolve_destination() is None
        assert resolve_destination(NO_DESTINATION) is None

    def test_explicit_none_rejected(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            resolve_destination(None)
        assert excinfo.value.param_name == "destination_folder_id"

    def test_param_name_reported(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            resolve_destination(None, param_name="parent_folder_id")
        assert excinfo.value.param_name == "parent_folder_id"

    def test_folder_id_passed_through(self):
        folder = FolderId(unique_id="AAMkAD", change_key="CQAAAB")
        assert resolve_destination(folder) is folder

    def test_well_known_name(self):
        """Well-known names resolve like the equivalent explicit FolderId"""
        resolved = resolve_destination(WellKnownFolderName.DRAFTS)
        assert resolved == FolderId(folder_name=WellKnownFolderName.DRAFTS)
        assert resolved.is_well_known

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            resolve_destination("drafts")


class TestBuildDispositionRequest:
    """Tests for build_disposition_request function."""

    @pytest.mark.parametrize(
        "action,disposition",
        [
            (ResponseAction.SAVE, MessageDisposition.SAVE_ONLY),
            (ResponseAction.SEND, MessageDisposition.SEND_ONLY),
            (ResponseAction.SEND_AND_SAVE_COPY, MessageDisposition.SEND_AND_SAVE_COPY),
        ],
    )
    def test_disposition_by_action(self, action, disposition):
        request = build_disposition_request(action)
        assert request == DispositionRequest(disposition=disposition, destination=None)

    def test_action_by_value(self):
        request = build_disposition_request("send_and_save_copy")
        assert request.disposition is MessageDisposition.SEND_AND_SAVE_COPY

    def test_save_to_well_known_folder(self):
        request = build_disposition_request(
            ResponseAction.SAVE, WellKnownFolderName.DRAFTS
        )
        assert request.disposition is MessageDisposition.SAVE_ONLY
        assert request.destination == FolderId.from_well_known("drafts")

    def test_send_and_save_copy_to_folder(self):
        folder = FolderId(unique_id="AAMkAD")
        request = build_disposition_request(ResponseAction.SEND_AND_SAVE_COPY, folder)
        assert request.destination is folder

    def test_send_rejects_destination(self):
        with pytest.raises(InvalidArgumentError):
            build_disposition_request(
                ResponseAction.SEND, WellKnownFolderName.SENT_ITEMS
            )

    @pytest.mark.parametrize(
        "action", [ResponseAction.SAVE, ResponseAction.SEND_AND_SAVE_COPY]
    )
    def test_none_destination_rejected(self, action):
        with pytest.raises(InvalidArgumentError) as excinfo:
            build_disposition_request(action, None)
        assert "destination_folder_id" in str(excinfo.value)

    def test_request_immutable(self):
        request = build_disposition_request(ResponseAction.SAVE)
        with pytest.raises(AttributeError):
            request.disposition = MessageDisposition.SEND_ONLY

    def test_no_discard_disposition(self):
        """There are exactly three dispositions"""
        assert {d.value for d in MessageDisposition} == {
            "SaveOnly",
            "SendOnly",
            "SendAndSaveCopy",
        }
