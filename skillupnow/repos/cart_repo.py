# skillupnow/repos/cart_repo.py
from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from skillupnow.data.models.cart import CartModel
from skillupnow.data.models.user import CustomerModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart(self, cart_id: int) -> CartModel | None:
        return self.db.get(CartModel, cart_id)

    def get_cart_by_username(self, username: str) -> CartModel | None:
        return self.db.execute(
            select(CartModel)
            .join(CustomerModel, CustomerModel.cart_id == CartModel.id)
            .where(CustomerModel.username == username)
        ).scalar_one_or_none()

    def get_owner(self, cart_id: int) -> CustomerModel | None:
        #reverse lookup cart -> customer po indeksie customers.cart_id
        return self.db.execute(
            select(CustomerModel).where(CustomerModel.cart_id == cart_id)
        ).scalar_one_or_none()

    def update_cart_version(self, cart_id: int, old_version: int, new_total: Decimal) -> int:
        """
        Compare-and-set: UPDATE carts SET total, version+1
        WHERE id = :id AND version = :old. Zwraca rowcount (0 = konflikt).
        """
        result = self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id, CartModel.version == old_version)
            .values(total=new_total, version=old_version + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
