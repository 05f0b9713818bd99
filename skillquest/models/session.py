# skillquest/models/session.py
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field


class SessionQuestion(BaseModel):
    # only the public fields of an upstream question; answers never leave the server
    id: Union[int, str, None] = None
    question: str = ""
    options: List[Any] = Field(default_factory=list)
    topic: str


class SessionTopic(BaseModel):
    name: str
    questions: List[SessionQuestion] = Field(default_factory=list)


class SessionPayload(BaseModel):
    sessionId: str
    testId: str
    startTime: str
    duration: int
    topics: List[SessionTopic] = Field(default_factory=list)
    totalQuestions: int = 0


class SessionRecord(SessionPayload):
    userId: str
    passingScore: Optional[float] = None
