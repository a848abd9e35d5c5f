from fastapi import APIRouter, Depends, HTTPException
from pymongo.errors import DuplicateKeyError
from schemas.user import UserCreate, UserLogin, PasswordReset, SignInResponse, UserPublic
from models.user import User
from auth.auth_handler import hash_password, verify_password
from database import get_database
import logging

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_database)])


@router.post("/register", status_code=201)
async def register(user: UserCreate):
    existing_user = await User.find_one(User.email == user.email)
    if existing_user:
        raise HTTPException(status_code=409, detail="User already exists")

    new_user = User(
        name=user.name,
        email=user.email,
        password=hash_password(user.password),
    )
    try:
        await new_user.insert()
    except DuplicateKeyError:
        raise HTTPException(status_code=409, detail="User already exists")

    logger.info("Registered user %s", new_user.email)
    return {"message": "User registered successfully"}


@router.post("/signin", response_model=SignInResponse)
async def signin(user: UserLogin):
    db_user = await User.find_one(User.email == user.email)
    if not db_user or not verify_password(user.password, db_user.password):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    return SignInResponse(
        message="Sign-in successful",
        user=UserPublic(name=db_user.name, email=db_user.email),
    )


@router.post("/resetpassword")
async def reset_password(data: PasswordReset):
    user = await User.find_one(User.email == data.email)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    user.password = hash_password(data.password)
    await user.save()
    return {"message": "Password reset successfully"}
