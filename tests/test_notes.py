import pytest
from pydantic import ValidationError

from app.core.errors import ValidationFailed
from app.domains.notes.composer import ComposerState, NoteComposer
from app.domains.notes.schemas import NoteCreate
from app.domains.notes.services import NoteService


@pytest.fixture
def note_service(storage):
    return NoteService(storage.notes)


def _note(text="excerpt", content="my note"):
    return NoteCreate(selected_text=text, note_content=content, start_offset="0", end_offset="0")


def test_created_note_is_listed_then_deleted(note_service):
    note = note_service.create_note("post-1", _note())

    assert note_service.get_post_notes("post-1") == [note]
    assert note.created_at is not None

    note_service.delete_note(note.id)

    assert note_service.get_post_notes("post-1") == []


def test_delete_unknown_note_is_noop(note_service):
    note_service.delete_note("does-not-exist")
    note_service.delete_note("does-not-exist")


def test_notes_are_scoped_and_ordered(note_service):
    first = note_service.create_note("post-1", _note(content="first"))
    note_service.create_note("post-2", _note(content="elsewhere"))
    second = note_service.create_note("post-1", _note(content="second"))

    assert note_service.get_post_notes("post-1") == [first, second]


def test_post_id_is_not_validated(note_service):
    note = note_service.create_note("no-such-post", _note())

    assert note.post_id == "no-such-post"


@pytest.mark.parametrize("payload", [
    {"selectedText": "", "noteContent": "x"},
    {"selectedText": "x", "noteContent": "   "},
    {"noteContent": "x"},
])
def test_note_payload_validation(payload):
    with pytest.raises(ValidationError):
        NoteCreate.model_validate(payload)


def test_integer_offsets_are_stored_as_strings():
    data = NoteCreate.model_validate({"selectedText": "x", "noteContent": "y", "startOffset": 4, "endOffset": 9})

    assert (data.start_offset, data.end_offset) == ("4", "9")


def test_offsets_default_to_zero():
    data = NoteCreate.model_validate({"selectedText": "x", "noteContent": "y"})

    assert (data.start_offset, data.end_offset) == ("0", "0")


class TestNoteComposer:

    def test_happy_path(self, note_service):
        composer = NoteComposer("post-1", note_service)
        assert composer.state == ComposerState.IDLE

        composer.select_text("  important sentence ")
        assert composer.state == ComposerState.TEXT_SELECTED
        assert composer.selected_text == "important sentence"

        composer.compose("remember this")
        assert composer.state == ComposerState.COMPOSING

        note = composer.submit()

        assert composer.state == ComposerState.IDLE
        assert composer.selected_text == ""
        assert composer.note_content == ""
        assert composer.last_saved is note
        assert note.selected_text == "important sentence"
        assert (note.start_offset, note.end_offset) == ("0", "0")
        assert composer.notes() == [note]

    def test_blank_selection_is_ignored(self, note_service):
        composer = NoteComposer("post-1", note_service)

        composer.select_text("   ")

        assert composer.state == ComposerState.IDLE

    def test_submit_without_selection_fails_before_saving(self, note_service):
        composer = NoteComposer("post-1", note_service)
        composer.compose("note without anchor")

        with pytest.raises(ValidationFailed) as exc_info:
            composer.submit()

        assert exc_info.value.errors[0]["field"] == "selectedText"
        assert note_service.get_post_notes("post-1") == []
        assert composer.state == ComposerState.COMPOSING

    def test_submit_without_content_fails_before_saving(self, note_service):
        composer = NoteComposer("post-1", note_service)
        composer.select_text("anchor")
        composer.compose("  ")

        with pytest.raises(ValidationFailed) as exc_info:
            composer.submit()

        assert exc_info.value.message == "Please enter note content."
        assert note_service.get_post_notes("post-1") == []

    def test_delete_removes_note(self, note_service):
        composer = NoteComposer("post-1", note_service)
        composer.select_text("anchor")
        composer.compose("text")
        note = composer.submit()

        composer.delete(note.id)

        assert composer.notes() == []
