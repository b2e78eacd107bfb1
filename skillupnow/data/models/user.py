from enum import Enum

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from skillupnow.data.database import Base


class UserType(str, Enum):
    CUSTOMER = "CUSTOMER"
    ORGANIZATION = "ORGANIZATION"


class UserModel(Base):
    """
    Bazowa tozsamosc. Dziedziczenie joined-table: wiersz w users
    + wiersz w customers/organizations z tym samym id, wybor po user_type.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)  # hash, nigdy plaintext
    user_type = Column(String(20), nullable=False)

    __mapper_args__ = {"polymorphic_on": user_type}


class CustomerModel(UserModel):
    __tablename__ = "customers"

    id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    firstname = Column(String(100))
    lastname = Column(String(100))
    email = Column(String(255))
    headline = Column(String(255))

    #forward reference customer -> cart, reverse lookup po indeksie (CartRepo.get_owner)
    cart_id = Column(Integer, ForeignKey("carts.id"), nullable=False, unique=True, index=True)
    cart = relationship("CartModel", cascade="all, delete-orphan", single_parent=True)

    __mapper_args__ = {"polymorphic_identity": UserType.CUSTOMER.value}


class OrganizationModel(UserModel):
    __tablename__ = "organizations"

    id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    name = Column(String(200))
    description = Column(Text)
    website = Column(String(255))

    __mapper_args__ = {"polymorphic_identity": UserType.ORGANIZATION.value}
