from pydantic import BaseModel, Field

class UserCredentials(BaseModel):
    """Schema para signup e login"""
    username: str = Field(..., min_length=1, description="Nome de usuário")
    password: str = Field(..., min_length=1, description="Senha do usuário")

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "username": "alice",
                "password": "pw1"
            }
        }

class SignupResponse(BaseModel):
    username: str
    token: str

class LoginResponse(BaseModel):
    username: str
    token: str
    admin: bool

class UserResponse(BaseModel):
    """Usuário sem o hash da senha"""
    username: str
    admin: bool = False
