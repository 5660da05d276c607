from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer, LargeBinary, String, inspect
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentModel(Base):
    """Stored document: file content plus its descriptive metadata.

    ``file_data`` is deferred so metadata queries never pull the binary
    payload; callers that need the bytes must undefer it explicitly.
    """

    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_type: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    file_data: Mapped[bytes] = mapped_column(
        LargeBinary, nullable=False, deferred=True
    )
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    upload_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    def replace_content(self, content: bytes, content_type: str) -> None:
        """Swap the stored file; type, bytes and size always change together."""
        self.file_type = content_type
        self.file_data = content
        self.file_size = len(content)

    def __repr__(self) -> str:
        state = inspect(self)
        if state.detached or state.expired:
            return f"<DocumentModel at {hex(id(self))}>"
        return (
            f"<DocumentModel(id={self.id}, file_name={self.file_name!r}, "
            f"category={self.category!r})>"
        )
