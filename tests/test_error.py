import logging
from types import SimpleNamespace

import pytest
from lxml import etree

from calresponse.lib import error
from calresponse.lib.debug import xmlstring


class TestErrors:
    def test_invalid_argument(self):
        err = error.InvalidArgumentError("destination_folder_id")
        assert isinstance(err, ValueError)
        assert isinstance(err, error.CalResponseError)
        assert err.param_name == "destination_folder_id"
        assert "destination_folder_id" in str(err)
        assert "must not be None" in err.reason

    def test_invalid_argument_custom_reason(self):
        err = error.InvalidArgumentError("mailbox", "not allowed here")
        assert err.reason == "not allowed here"

    def test_default_reason(self):
        err = error.RemoteOperationError()
        assert str(err) == "RemoteOperationError, reason no reason"
        assert str(error.InvalidOperationError("item not saved")) == (
            "InvalidOperationError, reason item not saved"
        )

    def test_validate_param(self):
        error.validate_param("", "subject")
        error.validate_param(0, "count")
        with pytest.raises(error.InvalidArgumentError) as excinfo:
            error.validate_param(None, "reference_item")
        assert excinfo.value.param_name == "reference_item"


class TestDiagnostics:
    def test_weirdness_logs(self, caplog):
        with caplog.at_level(logging.WARNING, logger="calresponse"):
            error.weirdness("odd", SimpleNamespace(item_id="x"))
        assert "Deviation from expectations found: odd : <SimpleNamespace item_id='x'>" in (
            caplog.text
        )

    def test_xmlstring(self):
        root = etree.Element("Items")
        etree.SubElement(root, "MeetingResponseMessage")
        assert "<MeetingResponseMessage/>" in xmlstring(root)
        assert xmlstring("plain") == "plain"

    def test_xmlstring_xmlelement(self):
        item = SimpleNamespace(xmlelement=lambda: etree.Element("CalendarItem"))
        assert xmlstring(item).strip() == "<CalendarItem/>"

    def test_xmlstring_item_summary(self):
        item = SimpleNamespace(item_id="AAMk1", item_class="IPM.Appointment", data="x")
        assert xmlstring(item) == (
            "<SimpleNamespace item_id='AAMk1' item_class='IPM.Appointment'>"
        )

    def test_xmlstring_without_item_attributes(self):
        assert xmlstring(SimpleNamespace(data="x")) == "namespace(data='x')"
