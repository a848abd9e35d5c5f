from beanie import Document
from pydantic import BaseModel
from typing import List


class AvailabilityWindow(BaseModel):
    day: str  # "Mon", "Tue", ...
    start_time: str  # "HH:MM"
    end_time: str  # "HH:MM"


class Doctor(Document):
    name: str
    specialization: str
    service: str
    availability: List[AvailabilityWindow] = []

    class Settings:
        name = "doctors"

    def window_for(self, day: str):
        """Return the first availability window on ``day``, or None."""
        for window in self.availability:
            if window.day == day:
                return window
        return None
