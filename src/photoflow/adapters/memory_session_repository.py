"""In-memory session repository."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from photoflow.adapters.memory_table import InMemoryTable
from photoflow.domain.sessions import SESSION_ACTIVE, SessionRecord, SessionSettings
from photoflow.services.sessions import SessionRepository


@dataclass
class InMemorySessionRepository(SessionRepository):
    """Process-local storage for photo sessions."""

    table: InMemoryTable[SessionRecord] = field(default_factory=InMemoryTable)

    def create_session(  # noqa: PLR0913
        self,
        photographer_id: int,
        name: str,
        description: str | None,
        client_name: str,
        client_email: str,
        session_date: datetime,
        access_code: str,
        settings: SessionSettings,
    ) -> SessionRecord:
        """Store an active session under the next id."""
        now = datetime.now(tz=UTC)
        return self.table.insert(
            lambda session_id: SessionRecord(
                id=session_id,
                photographer_id=photographer_id,
                name=name,
                description=description,
                client_name=client_name,
                client_email=client_email,
                session_date=session_date,
                access_code=access_code,
                status=SESSION_ACTIVE,
                settings=settings,
                created_at=now,
                updated_at=now,
            )
        )

    def get_session(self, session_id: int) -> SessionRecord | None:
        return self.table.get(session_id)

    def get_by_access_code(self, access_code: str) -> SessionRecord | None:
        for session in self.table:
            if session.access_code == access_code:
                return session
        return None

    def list_by_photographer(self, photographer_id: int) -> list[SessionRecord]:
        return self.table.filter(
            lambda session: session.photographer_id == photographer_id
        )

    def update_status(self, session_id: int, status: str) -> SessionRecord:
        session = self.table.rows[session_id]
        return self.table.replace(
            session_id,
            replace(session, status=status, updated_at=datetime.now(tz=UTC)),
        )
