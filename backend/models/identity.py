# models/identity.py
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CallerIdentity(BaseModel):
    """Verified identity of the caller for a single request.

    `email` is the email-equivalent token used by every authorization rule.
    It may be missing from an otherwise valid token; such a caller is
    authenticated but can never match a candidate or interviewer.
    """

    model_config = ConfigDict(frozen=True)

    subject: str
    email: Optional[str] = None
