from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skillupnow.data.database import get_db
from skillupnow.domain.schemas import CourseOut
from skillupnow.services.catalog_service import CatalogService

router = APIRouter(prefix="/courses", tags=["courses"])


def get_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.get("", response_model=List[CourseOut])
def list_courses(svc: CatalogService = Depends(get_service)):
    return svc.list_courses()


@router.get("/{course_id}", response_model=CourseOut)
def get_course(course_id: int, svc: CatalogService = Depends(get_service)):
    return svc.get_course(course_id)
