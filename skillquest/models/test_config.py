# skillquest/models/test_config.py
from typing import List, Optional
from pydantic import BaseModel

DEFAULT_DURATION = 45
DEFAULT_PASSING_SCORE = 60


class TestConfigIn(BaseModel):
    # presence of the required fields is checked by the service so the
    # error message stays the same for absent and empty values
    testId: Optional[str] = None
    jobId: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    topics: Optional[List[str]] = None
    questionsPerTopic: Optional[int] = None
    passingScore: Optional[float] = None
    isActive: Optional[bool] = None


class TestConfigOut(BaseModel):
    testId: str
    company: str
    jobId: Optional[str] = None
    name: str
    description: Optional[str] = None
    duration: int
    topics: List[str]
    questionsPerTopic: int
    passingScore: float
    isActive: bool
    createdAt: str


class TopicsOut(BaseModel):
    topics: List[str]
