from unittest.mock import MagicMock

import pytest

from medfiling.extraction.models import ExtractedFields
from medfiling.extraction.vocabulary import CATEGORIES, STORE_IN_OPTIONS
from medfiling.pipeline.models import BatchResult, ProcessedDocument, SelectedFile
from medfiling.pipeline.review_session import ReviewSession
from medfiling.submission.base import BaseSubmissionSink, SubmissionReceipt


def _document(name: str, category: str = "Letter") -> ProcessedDocument:
    file = SelectedFile(name=name, content_type="application/pdf", size=4, data=b"%PDF")
    return ProcessedDocument(file=file, fields=ExtractedFields(category=category, store_in="Correspondence"))


def _make_session(*names: str) -> tuple[ReviewSession, MagicMock]:
    sink = MagicMock(spec=BaseSubmissionSink)
    sink.submit.side_effect = lambda file_name, fields: SubmissionReceipt(
        success=True, file_name=file_name
    )
    batch = BatchResult.of([_document(name) for name in names]) if names else None
    return ReviewSession(sink, batch), sink


class TestLoadAndSelect:
    def test_active_index_starts_at_zero(self) -> None:
        session, _sink = _make_session("a.pdf", "b.pdf")
        assert session.active_index == 0
        assert session.active_document.name == "a.pdf"

    def test_select_changes_active_document(self) -> None:
        session, _sink = _make_session("a.pdf", "b.pdf")
        document = session.select(1)
        assert document.name == "b.pdf"
        assert session.active_index == 1

    @pytest.mark.parametrize("index", [5, 2, -1])
    def test_select_out_of_range_keeps_index(self, index: int) -> None:
        session, _sink = _make_session("a.pdf", "b.pdf")
        session.select(1)
        with pytest.raises(IndexError):
            session.select(index)
        assert session.active_index == 1

    def test_load_replaces_documents_and_resets_index(self) -> None:
        session, _sink = _make_session("a.pdf", "b.pdf")
        session.select(1)
        session.load(BatchResult.of([_document("c.pdf")]))
        assert [d.name for d in session.documents] == ["c.pdf"]
        assert session.active_index == 0


class TestEdit:
    def test_edit_changes_only_active_document(self) -> None:
        session, _sink = _make_session("a.pdf", "b.pdf")
        session.select(1)
        session.edit("doctor", "Dr. Who")
        assert session.documents[1].fields.doctor == "Dr. Who"
        assert session.documents[0].fields.doctor == ""

    def test_edit_stores_value_verbatim(self) -> None:
        session, _sink = _make_session("a.pdf")
        session.edit("category", "not a real category  ")
        session.edit("store_in", "Somewhere else")
        assert session.active_document.fields.category == "not a real category  "
        assert session.active_document.fields.store_in == "Somewhere else"

    def test_edit_unknown_field_raises(self) -> None:
        session, _sink = _make_session("a.pdf")
        with pytest.raises(KeyError):
            session.edit("ward", "4B")

    def test_edit_on_empty_session_raises(self) -> None:
        session, _sink = _make_session()
        with pytest.raises(IndexError):
            session.edit("doctor", "Dr. Who")


class TestConfirm:
    def test_hands_current_fields_to_sink(self) -> None:
        session, sink = _make_session("a.pdf", "b.pdf")
        session.select(1)
        session.edit("subject", "ECHO")
        receipt = session.confirm_current()

        assert receipt.success
        file_name, fields = sink.submit.call_args.args
        assert file_name == "b.pdf"
        assert fields.subject == "ECHO"

    def test_keeps_document_and_index(self) -> None:
        session, _sink = _make_session("a.pdf", "b.pdf")
        session.confirm_current()
        assert session.active_index == 0
        assert len(session.documents) == 2

    def test_submitted_record_is_a_snapshot(self) -> None:
        session, sink = _make_session("a.pdf")
        session.confirm_current()
        session.edit("subject", "changed later")
        _name, fields = sink.submit.call_args.args
        assert fields.subject == ""


class TestReset:
    def test_reset_empties_session(self) -> None:
        session, _sink = _make_session("a.pdf", "b.pdf")
        session.select(1)
        session.reset()
        assert session.is_empty
        assert session.active_index == 0
        with pytest.raises(IndexError):
            session.select(0)


class TestOptions:
    def test_closed_set_fields_use_canonical_options(self) -> None:
        assert ReviewSession.options_for("category") == CATEGORIES
        assert ReviewSession.options_for("store_in") == STORE_IN_OPTIONS

    def test_free_text_fields_have_no_options(self) -> None:
        assert ReviewSession.options_for("patient_name") is None
