from fastapi import APIRouter, Depends
from typing import List
from models.doctor import Doctor
from schemas.doctor import DoctorResponse
from database import get_database

router = APIRouter(dependencies=[Depends(get_database)])


@router.get("/doctors", response_model=List[DoctorResponse])
async def list_doctors():
    doctors = await Doctor.find_all().to_list()
    return [DoctorResponse.model_validate(doctor) for doctor in doctors]
