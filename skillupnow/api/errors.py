# skillupnow/api/errors.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from skillupnow.domain.errors import SkillUpNowError, AuthenticationError
from skillupnow.utils.logging import get_logger

logger = get_logger(__name__)


def setup_error_handlers(app: FastAPI):
    """Tlumaczenie bledow domeny na statusy HTTP i wspolny format odpowiedzi."""

    @app.exception_handler(SkillUpNowError)
    async def domain_error_handler(request: Request, exc: SkillUpNowError):
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}"
        )
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response(),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = []
        for error in exc.errors():
            errors.append({
                "field": " -> ".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            })

        logger.warning(f"{request.method} {request.url.path} -> 400 niepoprawne dane: {errors}")

        return JSONResponse(
            status_code=400,
            content=jsonable_encoder({
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Niepoprawne dane wejsciowe",
                    "details": errors,
                }
            }),
        )
