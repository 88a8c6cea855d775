# app/core/exceptions.py
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class NotFoundException(HTTPException):
    """El id referenciado no corresponde a ninguna entidad almacenada"""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BusinessRuleException(HTTPException):
    """La operación rompería una regla de negocio del almacén"""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _field_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    errors = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            # loc trae la posición del error en el texto, no un campo
            loc = []
        else:
            # "body" / "query" / "path" no aportan al cliente
            loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append({
            "field": ".".join(loc),
            "message": error.get("msg", "Valor inválido")
        })
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Errores de validación de campos -> 400 con detalle por campo"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = _field_errors(exc)
        logger.info(f"Validación fallida en {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Datos de entrada inválidos", "errors": errors}
        )
