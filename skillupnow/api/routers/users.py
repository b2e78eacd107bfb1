from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from skillupnow.api.deps import get_current_username, get_token_service
from skillupnow.data.database import get_db
from skillupnow.data.models.user import CustomerModel, UserModel
from skillupnow.domain.schemas import (
    CreateUserRequest,
    LoginRequest,
    ModifyCustomerRequest,
    ModifyCredentialRequest,
    CustomerOut,
    OrganizationOut,
)
from skillupnow.services.account_service import AccountService
from skillupnow.services.token_service import TokenService
from skillupnow.utils.settings import HEADER_STRING

router = APIRouter(tags=["users"])


def get_service(db: Session = Depends(get_db)) -> AccountService:
    return AccountService(db)


def _authorized_response(user: UserModel, tokens: TokenService) -> JSONResponse:
    #body = user bez hasha, token w naglowku Authorization
    schema = CustomerOut if isinstance(user, CustomerModel) else OrganizationOut
    body = schema.model_validate(user).model_dump(mode="json", by_alias=True)

    token = tokens.issue_token(user.username, AccountService.roles_for(user))
    return JSONResponse(
        content=body,
        headers={HEADER_STRING: TokenService.authorization_header(token)},
    )


@router.post("/signup")
def create_user(
    payload: CreateUserRequest,
    service: AccountService = Depends(get_service),
    tokens: TokenService = Depends(get_token_service),
):
    user = service.create_user(payload)
    return _authorized_response(user, tokens)


@router.post("/login")
def login(
    payload: LoginRequest,
    service: AccountService = Depends(get_service),
    tokens: TokenService = Depends(get_token_service),
):
    user = service.authenticate(payload.username, payload.password)
    return _authorized_response(user, tokens)


@router.get("/customer", response_model=CustomerOut)
def get_customer_info(
    username: str = Depends(get_current_username),
    service: AccountService = Depends(get_service),
):
    return service.find_by_username(username)


@router.put("/customer", response_model=ModifyCustomerRequest)
def update_customer_info(
    payload: ModifyCustomerRequest,
    username: str = Depends(get_current_username),
    service: AccountService = Depends(get_service),
):
    return service.update_customer(payload, username)


@router.put("/user/credential", response_model=ModifyCredentialRequest)
def update_credential(
    payload: ModifyCredentialRequest,
    username: str = Depends(get_current_username),
    service: AccountService = Depends(get_service),
):
    service.update_credential(payload, username)
    #nigdy nie odsylamy hasel plaintextem
    return payload.model_copy(
        update={"current_password": None, "new_password": None, "confirm_password": None}
    )


@router.get("/organization/{organization_id}", response_model=OrganizationOut)
def get_organization(
    organization_id: int,
    service: AccountService = Depends(get_service),
):
    return service.find_organization(organization_id)
