from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from course_catalog.auth.deps import get_db, require_role
from course_catalog.courses.service import create_course, update_course, delete_course, list_courses
from course_catalog.models.user import Role
from course_catalog.schemas.auth import MessageOut
from course_catalog.schemas.course import CourseIn, CourseOut, CourseListOut

router = APIRouter(prefix="/api/course", tags=["course"])

@router.post(
    "/create",
    response_model=MessageOut,
    dependencies=[Depends(require_role(Role.admin))],
)
def create(body: CourseIn, db: Session = Depends(get_db)):
    create_course(db, body)
    return MessageOut(message="newCourse added successfully")

@router.put("/update/{course_id}", response_model=MessageOut)
def update(course_id: str, body: CourseIn, db: Session = Depends(get_db)):
    update_course(db, course_id, body)
    return MessageOut(message="course updated successfully")

@router.delete("/delete/{course_id}", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def delete(course_id: str, db: Session = Depends(get_db)):
    delete_course(db, course_id)
    return MessageOut(message="Course deleted Successfully")

@router.get("/get", response_model=CourseListOut)
def get_all(db: Session = Depends(get_db)):
    return CourseListOut(
        message="courses found successfully",
        courses=[CourseOut.model_validate(c) for c in list_courses(db)],
    )
