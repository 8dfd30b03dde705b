# db/models.py
import time
import uuid

from sqlalchemy import (
    JSON,
    BigInteger,
    Column,
    Float,
    String,
    Text,
)
from .session import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def _now_ms() -> int:
    return int(time.time() * 1000)


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(String(32), primary_key=True, default=_new_id)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(Float, nullable=False)  # epoch, as supplied by the client
    status = Column(String(64), nullable=False)
    stream_call_id = Column(String(255), nullable=False, unique=True, index=True)
    candidate_id = Column(String(320), nullable=False, index=True)
    # ordered, duplicates kept exactly as submitted
    interviewer_ids = Column(JSON, nullable=False)
    end_time = Column(BigInteger, nullable=True)  # epoch ms, stamped on "completed"
    creation_time = Column(BigInteger, nullable=False, default=_now_ms)

    def __repr__(self) -> str:
        return f"<Interview id={self.id} status={self.status!r}>"
