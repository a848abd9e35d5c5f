from pydantic import BaseModel, ConfigDict, Field, field_validator, constr
from pydantic.alias_generators import to_camel
from bson import ObjectId
from datetime import datetime
from typing import Optional


class AppointmentCreate(BaseModel):
    doctor_id: constr(strip_whitespace=True, min_length=1)  # type: ignore
    doctor_name: Optional[str] = None
    service: Optional[str] = None
    user_name: constr(strip_whitespace=True, min_length=1)  # type: ignore
    user_email: constr(strip_whitespace=True, min_length=1)  # type: ignore
    date: constr(strip_whitespace=True, min_length=1)  # type: ignore
    time: constr(strip_whitespace=True, min_length=1)  # type: ignore

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AppointmentCreated(BaseModel):
    message: str
    appointment_id: str


class AppointmentResponse(BaseModel):
    id: str = Field(alias="_id")
    doctor_id: str
    doctor_name: Optional[str] = None
    service: Optional[str] = None
    user_name: str
    user_email: str
    date: str
    time: str
    created_at: datetime

    @field_validator("id", "doctor_id", mode="before")
    @classmethod
    def convert_objectid(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )
