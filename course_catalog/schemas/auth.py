from pydantic import BaseModel, ConfigDict, Field
from course_catalog.models.user import Role

class SignUpIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=120)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=256)
    confirm_password: str = Field(alias="confirmPassword", min_length=1, max_length=256)
    role: Role = Role.user

class LoginIn(BaseModel):
    email: str = Field(min_length=1)
    password: str

class MessageOut(BaseModel):
    message: str
