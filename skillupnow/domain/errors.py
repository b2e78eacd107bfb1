# skillupnow/domain/errors.py


class SkillUpNowError(Exception):
    """
    Bazowy blad domeny. Kazdy podtyp ma staly status HTTP i kod,
    tlumaczone na odpowiedz w skillupnow.api.errors.
    """

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class ConflictError(SkillUpNowError):
    """Duplikat: zajety username, kurs juz w koszyku."""

    status_code = 409
    code = "CONFLICT"


class ConcurrentModificationError(ConflictError):
    """Koszyk zmieniony przez inna operacje (konflikt wersji)."""

    code = "CONCURRENT_MODIFICATION"


class NotFoundError(SkillUpNowError):
    status_code = 404
    code = "NOT_FOUND"


class ValidationError(SkillUpNowError):
    status_code = 400
    code = "VALIDATION_ERROR"


class AuthenticationError(SkillUpNowError):
    """Zle haslo, zly/wygasly/brakujacy token."""

    status_code = 401
    code = "AUTHENTICATION_FAILED"


class AccessDeniedError(SkillUpNowError):
    status_code = 403
    code = "ACCESS_DENIED"
