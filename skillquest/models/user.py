# skillquest/models/user.py
from typing import Literal, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

Role = Literal["candidate", "company", "admin"]


class RegisterIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)
    role: Role = "candidate"
    companyName: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class LoginIn(BaseModel):
    # any string; a malformed address is just an unknown one
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class PublicUser(BaseModel):
    id: str
    email: str
    name: str
    role: Role
    companyName: Optional[str] = None

    @classmethod
    def from_doc(cls, doc: dict) -> "PublicUser":
        # never carries the password hash
        return cls(
            id=str(doc["id"]),
            email=doc["email"],
            name=doc["name"],
            role=doc["role"],
            companyName=doc.get("companyName"),
        )


class AuthOut(BaseModel):
    token: str
    user: PublicUser
