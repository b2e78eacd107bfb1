#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from skillupnow.data.models.user import UserType, UserModel, CustomerModel, OrganizationModel
from skillupnow.data.models.cart import CartModel, cart_courses
from skillupnow.data.models.course import CourseModel

__all__ = [
    "UserType",
    "UserModel",
    "CustomerModel",
    "OrganizationModel",
    "CartModel",
    "cart_courses",
    "CourseModel",
]
