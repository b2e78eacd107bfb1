from typing import Iterable, List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from skillupnow.data.models.course import CourseModel


class CourseRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_course(self, course_id: int) -> CourseModel | None:
        return self.db.get(CourseModel, course_id)

    def list_courses(self) -> List[CourseModel]:
        return list(self.db.execute(select(CourseModel).order_by(CourseModel.id)).scalars().all())

    def count(self) -> int:
        return self.db.execute(select(func.count(CourseModel.id))).scalar_one()

    def add_all(self, courses: Iterable[CourseModel]):
        self.db.add_all(list(courses))
        self.db.commit()
