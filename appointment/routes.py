from fastapi import APIRouter, Depends, HTTPException
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError
from beanie import PydanticObjectId
from bson.errors import InvalidId
from typing import List
from models.appointment import Appointment
from models.doctor import Doctor
from schemas.appointment import AppointmentCreate, AppointmentCreated, AppointmentResponse
from appointment.availability import normalize_time, weekday_label, within_window
from database import get_database
import logging

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_database)])

SLOT_TAKEN = "Doctor already has an appointment at this time"


async def find_doctor(doctor_id: str):
    try:
        object_id = PydanticObjectId(doctor_id)
    except (InvalidId, TypeError):
        return None
    return await Doctor.get(object_id)


@router.post("/appointment", status_code=201, response_model=AppointmentCreated)
async def book_appointment(booking: AppointmentCreate):
    try:
        appointment_day = weekday_label(booking.date)
    except ValueError:
        raise HTTPException(
            status_code=400, detail="Invalid date, expected YYYY-MM-DD"
        )
    try:
        time = normalize_time(booking.time)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid time, expected HH:MM")

    doctor = await find_doctor(booking.doctor_id)
    if not doctor:
        raise HTTPException(status_code=404, detail="Doctor not found")

    window = doctor.window_for(appointment_day)
    if not window:
        raise HTTPException(
            status_code=400, detail=f"Doctor is not available on {appointment_day}"
        )

    if not within_window(time, window):
        raise HTTPException(
            status_code=400,
            detail=(
                f"Doctor is available on {appointment_day} only between "
                f"{window.start_time} and {window.end_time}"
            ),
        )

    existing = await Appointment.find_one(
        Appointment.doctor_id == doctor.id,
        Appointment.date == booking.date,
        Appointment.time == time,
    )
    if existing:
        raise HTTPException(status_code=409, detail=SLOT_TAKEN)

    appointment = Appointment(
        doctor_id=doctor.id,
        doctor_name=booking.doctor_name,
        service=booking.service,
        user_name=booking.user_name,
        user_email=booking.user_email,
        date=booking.date,
        time=time,
    )
    try:
        await appointment.insert()
    except DuplicateKeyError:
        # Lost the race against a concurrent booking of the same slot
        raise HTTPException(status_code=409, detail=SLOT_TAKEN)

    logger.info(
        "Booked %s on %s at %s for %s",
        doctor.name,
        booking.date,
        time,
        booking.user_email,
    )
    return AppointmentCreated(
        message="Appointment booked successfully", appointment_id=str(appointment.id)
    )


@router.get("/appointments", response_model=List[AppointmentResponse])
async def list_appointments():
    appointments = (
        await Appointment.find_all()
        .sort([("created_at", DESCENDING), ("_id", DESCENDING)])
        .to_list()
    )
    return [AppointmentResponse.model_validate(a) for a in appointments]
