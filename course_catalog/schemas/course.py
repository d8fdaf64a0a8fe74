from pydantic import BaseModel, ConfigDict, Field

class CourseIn(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str
    price: float
    image: str

class CourseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    price: float
    image: str

class CourseListOut(BaseModel):
    message: str
    courses: list[CourseOut]
