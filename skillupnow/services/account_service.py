# skillupnow/services/account_service.py
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from skillupnow.data.models.cart import CartModel
from skillupnow.data.models.user import UserType, UserModel, CustomerModel, OrganizationModel
from skillupnow.domain.errors import ConflictError, NotFoundError, ValidationError, AuthenticationError
from skillupnow.domain.schemas import CreateUserRequest, ModifyCustomerRequest, ModifyCredentialRequest
from skillupnow.repos.user_repo import UserRepo
from skillupnow.utils.passwords import get_password_hash, verify_password
from skillupnow.utils.logging import get_logger

logger = get_logger(__name__)


class AccountService:
    """
    Use case'y konta: rejestracja klienta/organizacji, profil klienta,
    zmiana hasla, logowanie. Kazda komenda = jedna transakcja.
    Zalogowany uzytkownik przychodzi jawnie jako acting_username.
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    #query
    def find_by_username(self, username: str) -> CustomerModel:
        customer = self.repo.get_customer_by_username(username)
        if not customer:
            raise NotFoundError(f"Klient {username} nie istnieje")
        return customer

    def find_organization(self, organization_id: int) -> OrganizationModel:
        organization = self.repo.get_organization(organization_id)
        if not organization:
            raise NotFoundError(f"Organizacja {organization_id} nie istnieje")
        return organization

    @staticmethod
    def roles_for(user: UserModel) -> List[str]:
        return [f"ROLE_{UserType(user.user_type).value}"]

    #commands
    def create_user(self, request: CreateUserRequest) -> UserModel:
        if request.user_type == UserType.CUSTOMER:
            return self.create_customer(request)
        return self.create_organization(request)

    def create_customer(self, request: CreateUserRequest) -> CustomerModel:
        self._check_username_free(request.username)

        #klient + pusty koszyk w jednym unit of work (cascade)
        customer = CustomerModel(
            username=request.username,
            password=get_password_hash(request.password),
            user_type=UserType.CUSTOMER.value,
            firstname=request.firstname,
            lastname=request.lastname,
            email=request.email,
            headline=request.headline,
            cart=CartModel(total=Decimal("0.00"), version=1),
        )

        self.repo.insert(customer)
        self.repo.commit()
        self.repo.refresh(customer)

        logger.info(f"Utworzono klienta {customer.username} (id={customer.id}, koszyk={customer.cart_id})")
        return customer

    def create_organization(self, request: CreateUserRequest) -> OrganizationModel:
        self._check_username_free(request.username)

        organization = OrganizationModel(
            username=request.username,
            password=get_password_hash(request.password),
            user_type=UserType.ORGANIZATION.value,
            name=request.name,
            description=request.description,
            website=request.website,
        )

        self.repo.insert(organization)
        self.repo.commit()
        self.repo.refresh(organization)

        logger.info(f"Utworzono organizacje {organization.username} (id={organization.id})")
        return organization

    def update_customer(self, request: ModifyCustomerRequest, acting_username: str) -> ModifyCustomerRequest:
        """
        Nadpisuje firstname/lastname/email/headline. Zwraca zastosowane
        wartosci (request), nie cala encje. Idempotentne.
        """
        customer = self.find_by_username(acting_username)

        customer.firstname = request.firstname
        customer.lastname = request.lastname
        customer.email = request.email
        customer.headline = request.headline

        self.repo.save(customer)
        self.repo.commit()

        logger.info(f"Zaktualizowano profil klienta {acting_username}")
        return request

    def update_credential(self, request: ModifyCredentialRequest, acting_username: str) -> None:
        #walidacja przed jakimkolwiek odczytem/zapisem
        if not request.new_password or request.new_password != request.confirm_password:
            logger.warning(f"Zmiana hasla {acting_username} odrzucona: hasla sie nie zgadzaja")
            raise ValidationError("Nowe haslo i potwierdzenie musza byc takie same")

        user = self.repo.get_by_username(acting_username)
        if not user:
            raise NotFoundError(f"Uzytkownik {acting_username} nie istnieje")

        if not request.current_password or not verify_password(request.current_password, user.password):
            logger.warning(f"Zmiana hasla {acting_username} odrzucona: zle obecne haslo")
            raise AuthenticationError("Obecne haslo jest nieprawidlowe")

        user.password = get_password_hash(request.new_password)
        self.repo.save(user)
        self.repo.commit()

        logger.info(f"Zmieniono haslo uzytkownika {acting_username}")

    def authenticate(self, username: str, password: str) -> UserModel:
        user = self.repo.get_by_username(username)

        #ten sam komunikat dla nieznanego usera i zlego hasla
        if not user or not verify_password(password, user.password):
            logger.warning(f"Nieudane logowanie: {username}")
            raise AuthenticationError("Nieprawidlowy login lub haslo")

        return user

    def _check_username_free(self, username: str):
        if self.repo.exists(username):
            logger.warning(f"Rejestracja odrzucona: {username} juz istnieje")
            raise ConflictError(f"Uzytkownik {username} juz istnieje")
