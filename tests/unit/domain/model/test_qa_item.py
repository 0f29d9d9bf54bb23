"""Unit tests for QAItem wire parsing."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from forum.domain.model.qa_item import QAItem
from forum.domain.value import AttachmentKind


def wire_item(**overrides) -> dict:
    payload = {
        "id": "q1",
        "parent_id": None,
        "author": "Asha",
        "author_id": "u1",
        "user_id": "u1",
        "isOrganizer": True,
        "timestamp": "2025-03-01T12:00:00Z",
        "text": "<p>How do I apply?</p>",
        "attachment": {"name": "deck.pdf", "url": "https://f/deck.pdf", "type": "pdf"},
        "replies": [],
    }
    payload.update(overrides)
    return payload


class TestQAItemParsing:
    """Tests for parsing backend payloads."""

    def test_parses_backend_keys(self):
        item = QAItem.model_validate(wire_item())

        assert item.id == "q1"
        assert item.author_display_name == "Asha"
        assert item.is_organizer is True
        assert item.created_at == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
        assert item.body_html == "<p>How do I apply?</p>"
        assert item.attachment.kind == AttachmentKind.PDF
        assert item.is_question

    def test_parses_nested_replies(self):
        reply = wire_item(id="r1", parent_id="q1", attachment=None)
        nested = wire_item(id="r2", parent_id="r1", attachment=None)
        reply["replies"] = [nested]

        item = QAItem.model_validate(wire_item(replies=[reply]))

        assert item.replies[0].id == "r1"
        assert item.replies[0].replies[0].id == "r2"
        assert not item.replies[0].is_question

    def test_missing_or_null_replies_are_empty(self):
        payload = wire_item()
        del payload["replies"]

        assert QAItem.model_validate(payload).replies == ()
        assert QAItem.model_validate(wire_item(replies=None)).replies == ()

    def test_naive_timestamp_is_utc(self):
        item = QAItem.model_validate(wire_item(timestamp="2025-03-01T12:00:00"))

        assert item.created_at.tzinfo == timezone.utc

    def test_numeric_ids_become_strings(self):
        item = QAItem.model_validate(wire_item(id=5, parent_id=3, author_id=9))

        assert item.id == "5"
        assert item.parent_id == "3"
        assert item.author_id == "9"

    def test_unknown_attachment_type_rejected(self):
        bad = {"name": "a.exe", "url": "https://f/a.exe", "type": "binary"}

        with pytest.raises(ValidationError):
            QAItem.model_validate(wire_item(attachment=bad))

    def test_items_are_frozen(self):
        item = QAItem.model_validate(wire_item())

        with pytest.raises(ValidationError):
            item.body_html = "changed"

    def test_to_wire_uses_backend_keys(self):
        wire = QAItem.model_validate(wire_item()).to_wire()

        assert wire["author"] == "Asha"
        assert wire["isOrganizer"] is True
        assert wire["text"] == "<p>How do I apply?</p>"
        assert wire["attachment"]["type"] == "pdf"
        assert wire["replies"] == []
