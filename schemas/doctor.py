from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from bson import ObjectId
from typing import List


class AvailabilityWindowResponse(BaseModel):
    day: str
    start_time: str
    end_time: str

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


class DoctorResponse(BaseModel):
    id: str = Field(alias="_id")
    name: str
    specialization: str
    service: str
    availability: List[AvailabilityWindowResponse]

    @field_validator("id", mode="before")
    @classmethod
    def convert_objectid(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )
