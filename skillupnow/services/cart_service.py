from decimal import Decimal
from typing import Dict, Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from skillupnow.data.models.cart import CartModel
from skillupnow.data.models.course import CourseModel
from skillupnow.domain.errors import ConflictError, ConcurrentModificationError, NotFoundError
from skillupnow.domain.schemas import ModifyCartRequest
from skillupnow.repos.cart_repo import CartRepo
from skillupnow.repos.course_repo import CourseRepo
from skillupnow.utils.retry import cart_retry
from skillupnow.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Prosta implementacja cqrs i proste use case dla domeny cart
    commands (add, remove, modify) modyfikuja stan
    query (get) tylko odczyt

    Polityka: duplikat kursu -> ConflictError, usuniecie kursu spoza
    koszyka -> NotFoundError, wiec total zawsze = suma cen kursow.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.courses = CourseRepo(db)

    #query - odczyt
    def get_cart(self, username: str) -> Dict[str, Any]:
        cart = self._require_cart(username)
        return self._cart_view(cart, username)

    #commands
    def modify_cart(self, request: ModifyCartRequest) -> Dict[str, Any]:
        if request.delete == 1:
            return self.remove_course(request.username, request.course_id)
        return self.add_course(request.username, request.course_id)

    @cart_retry()
    def add_course(self, username: str, course_id: int) -> Dict[str, Any]:
        cart = self._require_cart(username)
        course = self._require_course(course_id)

        if any(c.id == course.id for c in cart.courses):
            logger.warning(f"Kurs {course_id} juz jest w koszyku {cart.id}")
            raise ConflictError(f"Kurs {course_id} juz jest w koszyku")

        old_version = cart.version
        new_total = (cart.total or Decimal("0.00")) + course.price

        logger.info(f"Dodaje kurs {course_id} do koszyka {cart.id}")
        cart.courses.append(course)

        self._write(cart, old_version, new_total)

        logger.info(
            f"Kurs {course_id} dodany do koszyka {cart.id}, "
            f"total: {new_total}, nowa wersja: {old_version + 1}"
        )

        return self._cart_view(cart, username)

    @cart_retry()
    def remove_course(self, username: str, course_id: int) -> Dict[str, Any]:
        cart = self._require_cart(username)
        course = self._require_course(course_id)

        if not any(c.id == course.id for c in cart.courses):
            logger.warning(f"Kursu {course_id} nie ma w koszyku {cart.id}")
            raise NotFoundError(f"Kursu {course_id} nie ma w koszyku")

        old_version = cart.version
        new_total = (cart.total or Decimal("0.00")) - course.price

        logger.info(f"Usuwanie kursu {course_id} z koszyka {cart.id}")
        cart.courses.remove(course)

        self._write(cart, old_version, new_total)

        logger.info(
            f"Kurs {course_id} usuniety z koszyka {cart.id}, "
            f"total: {new_total}, nowa wersja: {old_version + 1}"
        )

        return self._cart_view(cart, username)

    def _write(self, cart: CartModel, old_version: int, new_total: Decimal):
        # Optimistic locking
        # np w bazie update set total ..., version 2 where id 1 and version 1
        rowcount = self.repo.update_cart_version(
            cart_id=cart.id,
            old_version=old_version,
            new_total=new_total,
        )

        if rowcount == 0: #jesli tj 0 rows affected
            self.repo.rollback()
            logger.warning(f"Konflikt wersji koszyka {cart.id} (wersja {old_version})")
            raise ConcurrentModificationError(
                "Konflikt wspolbieznosci - koszyk zostal zmodyfikowany przez inna operacje"
            )

        try:
            self.repo.commit()
        except IntegrityError:
            #rownolegle dodanie tego samego kursu, PK cart_courses
            self.repo.rollback()
            raise ConflictError("Kurs juz jest w koszyku")

    def _require_cart(self, username: str) -> CartModel:
        cart = self.repo.get_cart_by_username(username)
        if not cart:
            raise NotFoundError(f"Koszyk uzytkownika {username} nie istnieje")
        return cart

    def _require_course(self, course_id: int) -> CourseModel:
        course = self.courses.get_course(course_id)
        if not course:
            raise NotFoundError(f"Kurs {course_id} nie istnieje")
        return course

    @staticmethod
    def _cart_view(cart: CartModel, username: str) -> Dict[str, Any]:
        #dict przyksztalcany w jsona
        return {
            "id": cart.id,
            "username": username,
            "courses": [
                {
                    "id": c.id,
                    "title": c.title,
                    "description": c.description,
                    "price": c.price,
                }
                for c in cart.courses
            ],
            "total": cart.total,
        }
