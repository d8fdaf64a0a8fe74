import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from course_catalog.models.course import Course
from course_catalog.schemas.course import CourseIn

logger = logging.getLogger(__name__)

def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="course not found")

def create_course(db: Session, body: CourseIn) -> Course:
    if db.query(Course).filter(Course.title == body.title).first():
        logger.info("Course title already taken: %s", body.title)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="course already exists")
    course = Course(**body.model_dump())
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info("Created course %s", course.id)
    return course

def update_course(db: Session, course_id: str, body: CourseIn) -> Course:
    course = db.get(Course, course_id)
    if course is None:
        raise _not_found()
    for field, value in body.model_dump().items():
        setattr(course, field, value)
    db.commit()
    db.refresh(course)
    return course

def delete_course(db: Session, course_id: str) -> None:
    course = db.get(Course, course_id)
    if course is None:
        raise _not_found()
    db.delete(course)
    db.commit()
    logger.info("Deleted course %s", course_id)

def list_courses(db: Session) -> list[Course]:
    return db.query(Course).order_by(Course.created_at, Course.title).all()
