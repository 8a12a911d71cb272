from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Role


class LoginPayload(BaseModel):
    email: str = Field(..., min_length=1)
    role: Optional[Role] = None


class SignupPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    role: Role
    class_id: Optional[int] = Field(default=None, alias="classId")


class StudentPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    role: Literal["student"] = "student"
    class_id: int = Field(..., ge=1, alias="classId")
