#skillupnow/api/routers/carts.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skillupnow.api.deps import get_current_username
from skillupnow.data.database import get_db
from skillupnow.domain.errors import AccessDeniedError
from skillupnow.domain.schemas import ModifyCartRequest, CartView
from skillupnow.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session = Depends(get_db)) -> CartService:
    return CartService(db)


@router.get("", response_model=CartView)
def get_cart(
    username: str = Depends(get_current_username),
    svc: CartService = Depends(get_service),
):
    return svc.get_cart(username)


@router.post("/modify", response_model=CartView)
def modify_cart(
    payload: ModifyCartRequest,
    username: str = Depends(get_current_username),
    svc: CartService = Depends(get_service),
):
    #koszyk z payloadu musi nalezec do zalogowanego
    if payload.username != username:
        raise AccessDeniedError("Brak dostepu do koszyka")
    return svc.modify_cart(payload)
