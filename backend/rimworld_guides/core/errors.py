"""Errores de dominio del sitio de guías.

Cada error lleva el código HTTP al que se traduce en la capa de API.
Sólo ValidationError y NotFound exponen su mensaje al cliente; el resto
se registra y se responde con un 500 genérico.
"""


class GuideSiteError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        super().__init__(message)


class ValidationError(GuideSiteError):
    """Entrada requerida ausente o inválida."""

    status_code = 400


class NotFound(GuideSiteError):
    """No existe el registro solicitado."""

    status_code = 404


class StorageError(GuideSiteError):
    """Fallo del almacén: archivo inaccesible, esquema roto o tags corruptos."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        self.original_error = original_error
        super().__init__(message, status_code=500)
