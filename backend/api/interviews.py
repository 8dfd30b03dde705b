# backend/api/interviews.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from api.deps import get_caller_identity, get_interview_service, require_caller_identity
from models.identity import CallerIdentity
from models.interview import InterviewCreate, InterviewCreated, InterviewOut, StatusUpdate
from services.interview_service import InterviewAccessService

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.get("", response_model=List[InterviewOut])
def list_interviews(
    caller: CallerIdentity = Depends(require_caller_identity),
    svc: InterviewAccessService = Depends(get_interview_service),
):
    return svc.list_all(caller)


@router.get("/mine", response_model=List[InterviewOut])
def list_my_interviews(
    user_email: str = Query(..., alias="userEmail"),
    caller: Optional[CallerIdentity] = Depends(get_caller_identity),
    svc: InterviewAccessService = Depends(get_interview_service),
):
    return svc.list_for_candidate(caller, user_email)


# call ids come from the video backend and may contain "/"
@router.get("/by-call/{stream_call_id:path}", response_model=Optional[InterviewOut])
def get_by_stream_call_id(
    stream_call_id: str,
    svc: InterviewAccessService = Depends(get_interview_service),
):
    return svc.find_by_stream_call_id(stream_call_id)


@router.post("", response_model=InterviewCreated, status_code=status.HTTP_201_CREATED)
def create_interview(
    payload: InterviewCreate,
    caller: CallerIdentity = Depends(require_caller_identity),
    svc: InterviewAccessService = Depends(get_interview_service),
):
    return InterviewCreated(id=svc.create(caller, payload))


@router.patch("/{interview_id}/status", status_code=status.HTTP_204_NO_CONTENT)
def update_interview_status(
    interview_id: str,
    payload: StatusUpdate,
    caller: CallerIdentity = Depends(require_caller_identity),
    svc: InterviewAccessService = Depends(get_interview_service),
):
    svc.update_status(caller, interview_id, payload.status)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
