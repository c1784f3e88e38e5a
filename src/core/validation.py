"""Esquemas de validación compartidos por formularios, CLI y seed.

Los esquemas son los propios modelos Pydantic del dominio; este módulo los
publica con un nombre estable y traduce los `ValidationError` a un resultado
plano con mensajes por campo.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from core.domain.models import (
    EspecieCreate,
    EspecieParametroCreate,
    EspecieParametroUpdate,
    ParametroCreate,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

INVALID_INPUT_MESSAGE = "Datos de entrada inválidos"

SCHEMAS: dict[str, type[BaseModel]] = {
    "especie_parametro_create": EspecieParametroCreate,
    "especie_parametro_update": EspecieParametroUpdate,
    "especie_create": EspecieCreate,
    "parametro_create": ParametroCreate,
}


@dataclass
class FieldError:
    field: str
    message: str


@dataclass
class ValidationResult(Generic[ModelT]):
    success: bool
    data: ModelT | None = None
    error: str | None = None
    details: list[FieldError] = field(default_factory=list)


def _field_errors(exc: ValidationError) -> list[FieldError]:
    out: list[FieldError] = []
    for err in exc.errors():
        # Los errores de @model_validator llegan sin `loc`.
        loc = ".".join(str(part) for part in err.get("loc", ()))
        out.append(FieldError(field=loc, message=err.get("msg", "")))
    return out


def validate_request_body(schema: type[ModelT], body: Any) -> ValidationResult[ModelT]:
    """Valida `body` contra `schema` sin lanzar excepciones."""

    try:
        data = schema.model_validate(body)
    except ValidationError as exc:
        return ValidationResult(
            success=False,
            error=INVALID_INPUT_MESSAGE,
            details=_field_errors(exc),
        )
    return ValidationResult(success=True, data=data)


def get_schema(name: str) -> type[BaseModel]:
    try:
        return SCHEMAS[name]
    except KeyError:
        raise KeyError(f"esquema desconocido: {name!r}") from None
