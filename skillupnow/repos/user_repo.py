from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from skillupnow.data.models.user import UserModel, CustomerModel, OrganizationModel
from skillupnow.domain.errors import ConflictError


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_by_username(self, username: str) -> UserModel | None:
        #polymorphic load: wraca CustomerModel albo OrganizationModel
        return self.db.execute(
            select(UserModel).where(UserModel.username == username)
        ).scalar_one_or_none()

    def get_customer_by_username(self, username: str) -> CustomerModel | None:
        return self.db.execute(
            select(CustomerModel).where(CustomerModel.username == username)
        ).scalar_one_or_none()

    def get_organization(self, organization_id: int) -> OrganizationModel | None:
        return self.db.get(OrganizationModel, organization_id)

    def exists(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def insert(self, user: UserModel) -> UserModel:
        """
        Insert z ograniczeniem unikalnosci username. Duplikat
        (takze wyscig dwoch rejestracji) -> ConflictError.
        """
        self.db.add(user)
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Uzytkownik {user.username} juz istnieje")
        return user

    def save(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        return user

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def refresh(self, user: UserModel) -> UserModel:
        self.db.refresh(user)
        return user
