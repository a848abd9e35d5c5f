from models.doctor import AvailabilityWindow, Doctor
import logging

logger = logging.getLogger(__name__)


def _weekly(days, start_time, end_time):
    return [
        AvailabilityWindow(day=day, start_time=start_time, end_time=end_time)
        for day in days
    ]


def default_doctors():
    return [
        Doctor(
            name="Dr. Anjali Nair",
            specialization="Cosmetic Dentistry",
            service="Cosmetic Dentistry",
            availability=_weekly(["Mon", "Wed", "Fri"], "10:00", "14:00"),
        ),
        Doctor(
            name="Dr. Ravi Menon",
            specialization="Orthodontics",
            service="Orthodontics",
            availability=_weekly(["Tue", "Thu"], "11:00", "16:00"),
        ),
        Doctor(
            name="Dr. Meera Thomas",
            specialization="Pediatric Dentistry",
            service="Cosmetic Dentistry",
            availability=_weekly(["Mon", "Tue", "Wed", "Thu", "Fri"], "14:00", "18:00"),
        ),
        Doctor(
            name="Dr. Arun Das",
            specialization="Dental Implants",
            service="Dental Implants",
            availability=_weekly(["Sat", "Sun"], "09:00", "13:00"),
        ),
        Doctor(
            name="Dr. Sneha Pillai",
            specialization="Endodontics",
            service="Cosmetic Dentistry",
            availability=_weekly(["Wed", "Fri"], "15:00", "18:00"),
        ),
    ]


async def preload_doctors(doctors=None) -> bool:
    """Insert the clinic's doctors if the collection is empty.

    Returns True when documents were inserted, False when the collection
    already held doctors and was left untouched.
    """
    if await Doctor.find_all().count() > 0:
        return False

    doctors = doctors if doctors is not None else default_doctors()
    await Doctor.insert_many(doctors)
    logger.info("Doctors preloaded: %d", len(doctors))
    return True
