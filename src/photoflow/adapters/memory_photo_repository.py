"""In-memory photo repository."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from photoflow.adapters.memory_table import InMemoryTable
from photoflow.domain.photos import PhotoRecord, PhotoSelection, PhotoUpload
from photoflow.services.sessions import PhotoRepository


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """Process-local storage for session photos."""

    table: InMemoryTable[PhotoRecord] = field(default_factory=InMemoryTable)

    def create_photos(
        self, session_id: int, photographer_id: int, uploads: list[PhotoUpload]
    ) -> list[PhotoRecord]:
        """Store each upload as an unselected photo, in batch order."""
        now = datetime.now(tz=UTC)
        return [
            self.table.insert(
                lambda photo_id, upload=upload: _build_photo(
                    photo_id, session_id, photographer_id, upload, now
                )
            )
            for upload in uploads
        ]

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        return self.table.get(photo_id)

    def list_by_session(self, session_id: int) -> list[PhotoRecord]:
        return self.table.filter(lambda photo: photo.session_id == session_id)

    def update_selection(
        self, photo_id: int, selection: PhotoSelection, client_notes: str
    ) -> PhotoRecord:
        photo = self.table.rows[photo_id]
        return self.table.replace(
            photo_id,
            replace(
                photo,
                selection=selection,
                client_notes=client_notes,
                updated_at=datetime.now(tz=UTC),
            ),
        )


def _build_photo(
    photo_id: int,
    session_id: int,
    photographer_id: int,
    upload: PhotoUpload,
    created_at: datetime,
) -> PhotoRecord:
    return PhotoRecord(
        id=photo_id,
        session_id=session_id,
        photographer_id=photographer_id,
        filename=upload.filename,
        original_filename=upload.original_filename or upload.filename,
        file_path=upload.file_path or f"/uploads/{session_id}/{upload.filename}",
        thumbnail_path=(
            upload.thumbnail_path or f"/thumbnails/{session_id}/{upload.filename}"
        ),
        file_size=upload.file_size,
        width=upload.width,
        height=upload.height,
        selection=PhotoSelection(),
        client_notes="",
        metadata=dict(upload.metadata),
        created_at=created_at,
        updated_at=created_at,
    )
