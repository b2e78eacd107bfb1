# skillupnow/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr, model_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from decimal import Decimal

from skillupnow.data.models.user import UserType

CUSTOMER_FIELDS = ("firstname", "lastname", "email", "headline")


class ApiModel(BaseModel):
    """JSON w camelCase (userType, courseId), w Pythonie snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CreateUserRequest(ApiModel):
    """Schema dla rejestracji (klient albo organizacja)."""

    username: str = Field(..., min_length=1, max_length=100, description="Unikalna nazwa uzytkownika")
    password: str = Field(..., min_length=7, max_length=128, description="Haslo (min. 7 znakow)")
    user_type: UserType = UserType.CUSTOMER

    # pola klienta, wymagane dla CUSTOMER
    firstname: Optional[str] = Field(None, min_length=1, max_length=100)
    lastname: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    headline: Optional[str] = Field(None, min_length=1, max_length=255)

    # pola organizacji
    name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    website: Optional[str] = Field(None, max_length=255)

    @model_validator(mode="after")
    def customer_profile_required(self):
        if self.user_type == UserType.CUSTOMER:
            missing = [f for f in CUSTOMER_FIELDS if getattr(self, f) is None]
            if missing:
                raise ValueError(f"Brak pol klienta: {', '.join(missing)}")
        return self


class LoginRequest(ApiModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ModifyCustomerRequest(ApiModel):
    """Schema dla aktualizacji profilu klienta (echo w odpowiedzi). Wszystkie pola wymagane."""

    firstname: str = Field(..., min_length=1, max_length=100)
    lastname: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    headline: str = Field(..., min_length=1, max_length=255)


class ModifyCredentialRequest(ApiModel):
    """
    Schema dla zmiany hasla. W odpowiedzi pola z haslami sa czyszczone,
    dlatego wszystkie sa Optional.
    """

    current_password: Optional[str] = Field(None, min_length=1)
    new_password: Optional[str] = Field(None, min_length=7, max_length=128)
    confirm_password: Optional[str] = None


class ModifyCartRequest(ApiModel):
    """Schema dla modyfikacji koszyka: delete=0 dodaje, delete=1 usuwa."""

    username: str = Field(..., min_length=1, description="Wlasciciel koszyka")
    course_id: int = Field(..., gt=0, description="ID kursu (musi byc > 0)")
    delete: int = Field(0, ge=0, le=1, description="0 albo 1")


class CourseOut(ApiModel):
    id: int
    title: str
    description: Optional[str] = None
    price: Decimal


class CartOut(ApiModel):
    id: int
    courses: List[CourseOut]
    total: Decimal


class CartView(CartOut):
    """Koszyk z nazwa wlasciciela (GET /cart, POST /cart/modify)."""

    username: str


class UserOut(ApiModel):
    """Wspolne pola uzytkownika. Hash hasla nigdy nie wychodzi na zewnatrz."""

    id: int
    username: str
    user_type: UserType


class CustomerOut(UserOut):
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    headline: Optional[str] = None
    cart: Optional[CartOut] = None


class OrganizationOut(UserOut):
    name: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
