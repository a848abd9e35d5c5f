from beanie import Document, PydanticObjectId
from pydantic import Field
from pymongo import ASCENDING, IndexModel
from typing import Optional
from datetime import datetime


class Appointment(Document):
    doctor_id: PydanticObjectId
    doctor_name: Optional[str] = None
    service: Optional[str] = None
    user_name: str
    user_email: str
    date: str  # "YYYY-MM-DD"
    time: str  # zero-padded "HH:MM"
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "appointments"
        # One appointment per slot
        indexes = [
            IndexModel(
                [("doctor_id", ASCENDING), ("date", ASCENDING), ("time", ASCENDING)],
                unique=True,
                name="unique_doctor_slot",
            )
        ]
