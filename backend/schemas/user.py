from pydantic import BaseModel

# Schema for login credentials
class UserLogin(BaseModel):
    username: str
    password: str

# Public part of a user row
class UserResponse(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True

# Result of a successful credential check
class LoginResponse(BaseModel):
    success: bool = True
    user: UserResponse
