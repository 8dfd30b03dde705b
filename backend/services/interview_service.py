# services/interview_service.py
"""
Authorization-aware access to interview records.

Every operation takes the caller's verified identity explicitly (None when
the request carried no valid token). Rules are evaluated against the
caller's email-equivalent token using exact string comparison.
"""
import logging
import time
from typing import Callable, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import Conflict, Forbidden, InvalidStatus, NotFound, Unauthorized
from db.models import Interview
from models.identity import CallerIdentity
from models.interview import InterviewCreate

logger = logging.getLogger(__name__)

COMPLETED = "completed"


def epoch_ms() -> int:
    return int(time.time() * 1000)


def _require_identity(caller: Optional[CallerIdentity]) -> CallerIdentity:
    if caller is None:
        raise Unauthorized()
    return caller


def _is_interviewer(email: Optional[str], interviewer_ids: Iterable[str]) -> bool:
    return email is not None and email in set(interviewer_ids)


class InterviewAccessService:
    def __init__(
        self,
        db: Session,
        *,
        clock: Callable[[], int] = epoch_ms,
        status_allowlist: Optional[Iterable[str]] = None,
    ):
        self.db = db
        self.clock = clock
        self.status_allowlist = frozenset(status_allowlist or ())

    def _check_status(self, status: str) -> None:
        if self.status_allowlist and status not in self.status_allowlist:
            raise InvalidStatus(f"status '{status}' is not allowed")

    # ---------------------------
    # Reads
    # ---------------------------

    def list_all(self, caller: Optional[CallerIdentity]) -> List[Interview]:
        _require_identity(caller)
        return self.db.query(Interview).all()

    def list_for_candidate(
        self, caller: Optional[CallerIdentity], candidate_id: str
    ) -> List[Interview]:
        # unauthenticated clients get an empty list rather than an error
        if caller is None:
            return []
        if caller.email is None or caller.email != candidate_id:
            logger.warning(
                "candidate listing rejected",
                extra={"caller": caller.subject, "candidate_id": candidate_id},
            )
            raise Forbidden()
        return self.db.query(Interview).filter(Interview.candidate_id == candidate_id).all()

    def find_by_stream_call_id(self, stream_call_id: str) -> Optional[Interview]:
        return (
            self.db.query(Interview)
            .filter(Interview.stream_call_id == stream_call_id)
            .first()
        )

    # ---------------------------
    # Writes
    # ---------------------------

    def create(self, caller: Optional[CallerIdentity], data: InterviewCreate) -> str:
        caller = _require_identity(caller)
        if caller.email is None or (
            caller.email != data.candidate_id
            and not _is_interviewer(caller.email, data.interviewer_ids)
        ):
            logger.warning("interview create rejected", extra={"caller": caller.subject})
            raise Forbidden()
        self._check_status(data.status)

        interview = Interview(
            title=data.title,
            description=data.description,
            start_time=data.start_time,
            status=data.status,
            stream_call_id=data.stream_call_id,
            candidate_id=data.candidate_id,
            interviewer_ids=list(data.interviewer_ids),
        )
        self.db.add(interview)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise Conflict(f"streamCallId '{data.stream_call_id}' is already in use")
        self.db.refresh(interview)

        logger.info("interview created", extra={"interview_id": interview.id, "caller": caller.subject})
        return interview.id

    def update_status(self, caller: Optional[CallerIdentity], interview_id: str, status: str) -> None:
        caller = _require_identity(caller)

        interview = self.db.get(Interview, interview_id)
        if interview is None:
            raise NotFound()

        # membership as of now, not as of creation
        if not _is_interviewer(caller.email, interview.interviewer_ids):
            logger.warning(
                "status update rejected",
                extra={"interview_id": interview_id, "caller": caller.subject},
            )
            raise Forbidden()
        self._check_status(status)

        interview.status = status
        if status == COMPLETED:
            interview.end_time = self.clock()
        self.db.commit()

        logger.info(
            "interview status changed",
            extra={"interview_id": interview_id, "status": status, "caller": caller.subject},
        )
