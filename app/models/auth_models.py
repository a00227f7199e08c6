# models/auth_models.py
from pydantic import BaseModel, EmailStr


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class UserOut(BaseModel):
    id: str
    email: str

class AuthResponse(BaseModel):
    token: str
    user: UserOut

class ErrorResponse(BaseModel):
    error: str
    code: str
