"""Tests for session lifecycle and client selection."""

import threading

import pytest

from photoflow.adapters.memory_photo_repository import InMemoryPhotoRepository
from photoflow.adapters.memory_session_repository import InMemorySessionRepository
from photoflow.domain.errors import (
    GalleryNotFoundError,
    InvalidStatusTransitionError,
    NoSelectionError,
    PhotoNotFoundError,
    SessionNotActiveError,
    SessionNotFoundError,
    ValidationError,
)
from photoflow.domain.photos import SelectionUpdate
from photoflow.domain.sessions import (
    ACCESS_CODE_LENGTH,
    SESSION_ACTIVE,
    SESSION_ARCHIVED,
    SESSION_COMPLETED,
)
from photoflow.services.sessions import SessionService, generate_access_code
from tests.conftest import make_session, sequential_codes, upload


def test_generate_access_code_uses_uppercase_alphanumerics() -> None:
    code = generate_access_code(6)

    assert len(code) == 6
    assert code.isalnum()
    assert code == code.upper()


def test_create_session_retries_on_code_collision() -> None:
    service = SessionService(
        session_repository=InMemorySessionRepository(),
        photo_repository=InMemoryPhotoRepository(),
        code_factory=sequential_codes("ABC123", "ABC123", "xyz789"),
    )

    first = make_session(service)
    second = make_session(service)

    assert first.access_code == "ABC123"
    assert second.access_code == "XYZ789"
    assert first.status == SESSION_ACTIVE


def test_create_session_requests_fixed_length_codes() -> None:
    lengths: list[int] = []

    def factory(length: int) -> str:
        lengths.append(length)
        return generate_access_code(length)

    service = SessionService(
        session_repository=InMemorySessionRepository(),
        photo_repository=InMemoryPhotoRepository(),
        code_factory=factory,
    )

    session = make_session(service)

    assert lengths == [ACCESS_CODE_LENGTH]
    assert len(session.access_code) == ACCESS_CODE_LENGTH


def test_find_by_access_code_is_case_insensitive(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)

    found = session_service.find_by_access_code(session.access_code.lower())

    assert found.id == session.id


def test_unknown_access_code_raises(session_service: SessionService) -> None:
    with pytest.raises(GalleryNotFoundError):
        session_service.find_by_access_code("NOPE00")


def test_get_owned_session_hides_foreign_sessions(
    session_service: SessionService,
) -> None:
    session = make_session(session_service, photographer_id=1)

    with pytest.raises(SessionNotFoundError):
        session_service.get_owned_session(session.id, photographer_id=2)


def test_upload_requires_ownership(session_service: SessionService) -> None:
    session = make_session(session_service, photographer_id=1)

    with pytest.raises(SessionNotFoundError):
        session_service.record_photo_upload(session.id, 2, [])


def test_stats_count_pending_as_unflagged_photos(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)
    photos = upload(session_service, session, "a.jpg", "b.jpg", "c.jpg", "d.jpg")
    session_service.update_selection(
        photos[0].id, SelectionUpdate(for_album=True, for_editing=True)
    )
    session_service.update_selection(photos[1].id, SelectionUpdate(by_client=True))

    stats = session_service.session_stats(session.id)

    assert stats.total == 4
    assert stats.selected_for_album == 1
    assert stats.selected_for_editing == 1
    assert stats.selected_by_client == 1
    assert stats.pending == 2


def test_select_photo_sets_category_and_notes(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)
    photo = upload(session_service, session, "a.jpg")[0]

    updated, stats = session_service.select_photo(
        session.access_code, photo.id, "album", True, client_notes="cover"
    )

    assert updated.selection.for_album
    assert not updated.selection.by_client
    assert updated.client_notes == "cover"
    assert stats.selected_for_album == 1


def test_select_photo_keeps_notes_when_omitted(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)
    photo = upload(session_service, session, "a.jpg")[0]
    session_service.select_photo(
        session.access_code, photo.id, "general", True, client_notes="love it"
    )

    updated, _ = session_service.select_photo(
        session.access_code, photo.id, "general", False
    )

    assert not updated.selection.by_client
    assert updated.client_notes == "love it"


def test_select_photo_rejects_unknown_category(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)
    photo = upload(session_service, session, "a.jpg")[0]

    with pytest.raises(ValidationError):
        session_service.select_photo(session.access_code, photo.id, "print", True)


def test_select_photo_from_another_session_is_not_found(
    session_service: SessionService,
) -> None:
    first = make_session(session_service)
    second = make_session(session_service)
    photo = upload(session_service, second, "a.jpg")[0]

    with pytest.raises(PhotoNotFoundError):
        session_service.select_photo(first.access_code, photo.id, "album", True)


def test_finalize_without_selection_keeps_session_active(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)
    upload(session_service, session, "a.jpg", "b.jpg")

    with pytest.raises(NoSelectionError):
        session_service.finalize(session.access_code)

    assert session_service.find_by_access_code(session.access_code).is_active


def test_finalize_completes_session_and_builds_filter(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)
    photos = upload(session_service, session, "DSC_0001.NEF", "DSC_0002.NEF", "x.jpg")
    session_service.select_photo(session.access_code, photos[0].id, "album", True)
    session_service.select_photo(session.access_code, photos[2].id, "general", True)

    result = session_service.finalize(session.access_code)

    assert result.filter_code.startswith(f"PHOTOFLOW_{session.access_code}_")
    assert len(result.filter_code.rsplit("_", 1)[1]) == 10
    assert result.selected_count == 2
    assert result.total_photos == 3
    assert result.lightroom_filter == "DSC_0001 OR x"
    completed = session_service.find_by_access_code(session.access_code)
    assert completed.status == SESSION_COMPLETED
    assert result.session == completed


def test_completed_session_rejects_client_mutations(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)
    photo = upload(session_service, session, "a.jpg")[0]
    session_service.select_photo(session.access_code, photo.id, "album", True)
    session_service.finalize(session.access_code)

    with pytest.raises(SessionNotActiveError):
        session_service.finalize(session.access_code)
    with pytest.raises(SessionNotActiveError):
        session_service.select_photo(session.access_code, photo.id, "album", False)
    with pytest.raises(SessionNotActiveError):
        session_service.reset_selections(session.access_code)


def test_reset_clears_flags_and_notes(session_service: SessionService) -> None:
    session = make_session(session_service)
    photos = upload(session_service, session, "a.jpg", "b.jpg")
    session_service.select_photo(
        session.access_code, photos[0].id, "editing", True, client_notes="fix"
    )

    reset_count = session_service.reset_selections(session.access_code)

    assert reset_count == 2
    for photo in session_service.list_photos(session.id):
        assert not photo.selection.any_selected
        assert photo.client_notes == ""


def test_selection_summary_reports_percentage(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)
    photos = upload(session_service, session, "a.jpg", "b.jpg", "c.jpg", "d.jpg")
    session_service.select_photo(session.access_code, photos[1].id, "album", True)

    summary = session_service.selection_summary(session.access_code)

    assert summary.selection_percentage == 25
    assert summary.can_finalize
    assert [photo.id for photo in summary.selected_photos] == [photos[1].id]


def test_selection_summary_with_no_photos(session_service: SessionService) -> None:
    session = make_session(session_service)

    summary = session_service.selection_summary(session.access_code)

    assert summary.selection_percentage == 0
    assert not summary.can_finalize


def test_archive_is_terminal(session_service: SessionService) -> None:
    session = make_session(session_service)

    archived = session_service.archive_session(session.id, session.photographer_id)

    assert archived.status == SESSION_ARCHIVED
    with pytest.raises(InvalidStatusTransitionError):
        session_service.archive_session(session.id, session.photographer_id)
    assert session_service.find_by_access_code(session.access_code).id == session.id


def test_export_filters_requires_ownership(session_service: SessionService) -> None:
    session = make_session(session_service, photographer_id=1)
    photos = upload(session_service, session, "A.NEF", "B.NEF")
    session_service.update_selection(photos[1].id, SelectionUpdate(for_editing=True))

    export = session_service.export_filters(session.id, photographer_id=1)

    assert export.filters.editing_filter == "B"
    assert export.stats.pending == 1
    with pytest.raises(SessionNotFoundError):
        session_service.export_filters(session.id, photographer_id=2)


def test_dashboard_totals(session_service: SessionService) -> None:
    first = make_session(session_service)
    second = make_session(session_service)
    make_session(session_service, photographer_id=2)
    photos = upload(session_service, first, "a.jpg", "b.jpg")
    upload(session_service, second, "c.jpg")
    session_service.update_selection(photos[0].id, SelectionUpdate(by_client=True))
    session_service.archive_session(second.id, 1)

    dashboard = session_service.dashboard(1)

    assert dashboard.total_sessions == 2
    assert dashboard.active_sessions == 1
    assert dashboard.total_photos == 3
    assert dashboard.selected_photos == 1
    assert [session.id for session, _ in dashboard.recent_sessions] == [
        first.id,
        second.id,
    ]


def test_stats_stay_readable_during_concurrent_uploads(
    session_service: SessionService,
) -> None:
    session = make_session(session_service)
    errors: list[Exception] = []
    done = threading.Event()

    def writer() -> None:
        try:
            for index in range(2000):
                upload(session_service, session, f"IMG_{index:04d}.jpg")
        finally:
            done.set()

    def reader() -> None:
        try:
            while not done.is_set():
                session_service.session_stats(session.id)
                session_service.list_photos(session.id)
        except Exception as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert session_service.session_stats(session.id).total == 2000
