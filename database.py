from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from fastapi import HTTPException, Request
from models.user import User
from models.doctor import Doctor
from models.appointment import Appointment
from doctor.seed import preload_doctors
from typing import Optional
import asyncio
import logging

logger = logging.getLogger(__name__)

DOCUMENT_MODELS = [User, Doctor, Appointment]


class MongoConnection:
    """Process-wide MongoDB handle.

    Beanie is initialized on the first successful ``connect()``; later calls
    return immediately. The doctor collection is seeded on that first
    initialization only.
    """

    def __init__(self, uri: Optional[str], db_name: str, client=None):
        self.uri = uri
        self.db_name = db_name
        self.client = client
        self.owns_client = client is None
        self.connected = False
        self._lock = asyncio.Lock()

    async def connect(self) -> bool:
        if self.connected:
            return True

        async with self._lock:
            # Another request may have finished connecting while we waited
            if self.connected:
                return True

            if self.client is None:
                if not self.uri:
                    logger.error("Missing MONGODB_URI in environment variables")
                    return False
                self.client = AsyncIOMotorClient(self.uri)

            await init_beanie(
                database=self.client[self.db_name], document_models=DOCUMENT_MODELS
            )
            logger.info("Successfully connected to MongoDB database %s", self.db_name)

            await preload_doctors()
            self.connected = True
            return True

    def close(self):
        if self.owns_client and self.client is not None:
            self.client.close()
            self.client = None
        self.connected = False


async def get_database(request: Request) -> MongoConnection:
    db: MongoConnection = request.app.state.db
    if not await db.connect():
        raise HTTPException(status_code=500, detail="Server error")
    return db
