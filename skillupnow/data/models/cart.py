#skillupnow/data/models/cart.py
from decimal import Decimal

from sqlalchemy import Column, Integer, ForeignKey, Numeric, Table
from sqlalchemy.orm import relationship

from skillupnow.data.database import Base

#many-to-many koszyk <-> kurs, PK zlozony = kurs max raz w koszyku
cart_courses = Table(
    "cart_courses",
    Base.metadata,
    Column("cart_id", Integer, ForeignKey("carts.id", ondelete="CASCADE"), primary_key=True),
    Column("course_id", Integer, ForeignKey("courses.id"), primary_key=True),
)


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    total = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))
    version = Column(Integer, nullable=False, default=1)

    #jednokierunkowo: z koszyka do kursow, bez back-reference do klienta
    courses = relationship(
        "CourseModel",
        secondary=cart_courses,
        order_by="CourseModel.id",
    )
