from typing import List

from sqlalchemy.orm import Session

from skillupnow.data.models.course import CourseModel
from skillupnow.domain.errors import NotFoundError
from skillupnow.repos.course_repo import CourseRepo


class CatalogService:
    """Katalog kursow, tylko odczyt."""

    def __init__(self, db: Session):
        self.repo = CourseRepo(db)

    def list_courses(self) -> List[CourseModel]:
        return self.repo.list_courses()

    def get_course(self, course_id: int) -> CourseModel:
        course = self.repo.get_course(course_id)
        if not course:
            raise NotFoundError(f"Kurs {course_id} nie istnieje")
        return course
