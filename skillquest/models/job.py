# skillquest/models/job.py
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator

EmploymentType = Literal["Full-time", "Part-time", "Contract", "Internship"]
QuestType = Literal["aptitude", "technical", "dsa", "behavioral"]
Difficulty = Literal["Easy", "Medium", "Hard", "Expert"]


class Salary(BaseModel):
    # free text ("50k", "competitive"); numbers are kept as their string form
    min: str
    max: str

    @field_validator("min", "max", mode="before")
    @classmethod
    def coerce_number(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class Quest(BaseModel):
    """A reusable assessment template embedded in a job posting."""
    type: QuestType
    title: str
    description: Optional[str] = None
    difficulty: Difficulty = "Medium"
    duration: int = Field(ge=1)
    questions: int = Field(ge=1)
    passingScore: float = Field(ge=0, le=100)
    enabled: bool = True
    topics: List[str] = Field(default_factory=list)
    questionsPerTopic: int = Field(default=5, ge=1)


class JobCreate(BaseModel):
    title: str = Field(min_length=1)
    department: str = Field(min_length=1)
    location: str = Field(min_length=1)
    type: EmploymentType
    description: str = Field(min_length=1)
    requirements: List[str] = Field(default_factory=list)
    salary: Salary
    quests: List[Quest] = Field(default_factory=list)
    isActive: bool = True


class CompanyRef(BaseModel):
    id: str
    companyName: Optional[str] = None


class JobOut(BaseModel):
    id: str
    company: Union[CompanyRef, str, None] = None
    title: str
    department: str
    location: str
    type: EmploymentType
    description: str
    requirements: List[str] = Field(default_factory=list)
    salary: Salary
    # embedded quest templates and attached test configurations
    quests: List[Dict[str, Any]] = Field(default_factory=list)
    isActive: bool = True
    createdAt: Optional[datetime] = None
