# jerarquía de errores del cliente

from __future__ import annotations


class HoyolabError(Exception):
    """Error base de la librería. Todo lo que lanzamos hereda de aquí."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CredentialError(HoyolabError):
    """Cookie sin campos obligatorios o con valores inválidos."""


class MalformedCredentialError(CredentialError):
    """Faltan ltoken / ltuid tras parsear o al serializar."""


class InvalidIdentifierError(HoyolabError):
    """El UID no encaja en ninguna regla de región."""


class MissingAccountContextError(HoyolabError):
    """La operación necesita uid/región y nunca se resolvieron."""


class TransportError(HoyolabError):
    """
    Fallo HTTP (status no 2xx) o de transporte (conexión, timeout...).
    status_code puede ser None si ni siquiera hubo respuesta.
    """

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None):
        self.status_code = status_code
        self.code = code if code is not None else (str(status_code) if status_code is not None else None)
        super().__init__(f"Request Error: [{self.code}] - {message}")


class RateLimitedRetryExhausted(HoyolabError):
    """Se agotaron los reintentos y el servidor sigue devolviendo -2016."""

    def __init__(self, attempts: int, response: dict):
        self.attempts = attempts
        self.response = response
        super().__init__(f"Retcode -2016 tras {attempts} intentos")
