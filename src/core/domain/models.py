"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los modelos son a la vez el contrato de la API (wire) y el esquema de
  validación de los payloads de creación/actualización.
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.

Nota:
- `Rmin`/`Rmax` conservan el nombre exacto de la API.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, PositiveInt, ValidationError, model_validator
from pydantic.config import ConfigDict


class EstadoRegistro(str, Enum):
    """Estado de ciclo de vida (borrado lógico)."""

    ACTIVO = "activo"
    INACTIVO = "inactivo"


class EstadoEspecie(str, Enum):
    ACTIVA = "activa"
    INACTIVA = "inactiva"


def _check_rango(rmin: float | None, rmax: float | None) -> None:
    if rmin is not None and rmax is not None and rmin > rmax:
        raise ValueError("Rmin debe ser menor o igual que Rmax")


class EspecieParametro(BaseModel):
    """Rango aceptable (`Rmin`..`Rmax`) de un parámetro para una especie."""

    model_config = ConfigDict(extra="ignore")

    id_especie_parametro: int = Field(..., description="Identificador asignado por el servidor.")
    id_especie: int = Field(..., description="Especie a la que aplica el rango.")
    id_parametro: int = Field(..., description="Parámetro monitoreado (temperatura, pH...).")
    Rmin: float = Field(..., description="Límite inferior aceptable.")
    Rmax: float = Field(..., description="Límite superior aceptable.")
    fecha_creacion: str | None = Field(
        default=None,
        description="Fecha de creación (texto, la asigna el servidor).",
    )
    estado: EstadoRegistro | None = Field(
        default=None,
        description="Estado del registro; `inactivo` equivale a borrado lógico.",
    )

    @model_validator(mode="after")
    def _rango_ordenado(self) -> "EspecieParametro":
        _check_rango(self.Rmin, self.Rmax)
        return self


class EspecieParametroCreate(BaseModel):
    """Payload de alta: sin identificador ni campos de ciclo de vida."""

    model_config = ConfigDict(extra="forbid")

    id_especie: PositiveInt = Field(..., description="Debe seleccionar una especie.")
    id_parametro: PositiveInt = Field(..., description="Debe seleccionar un parámetro.")
    Rmin: float
    Rmax: float

    @model_validator(mode="after")
    def _rango_ordenado(self) -> "EspecieParametroCreate":
        _check_rango(self.Rmin, self.Rmax)
        return self


class EspecieParametroUpdate(BaseModel):
    """Patch parcial: todos los campos son opcionales y `{}` no cambia nada."""

    model_config = ConfigDict(extra="forbid")

    Rmin: float | None = None
    Rmax: float | None = None
    estado: EstadoRegistro | None = None

    @model_validator(mode="after")
    def _rango_ordenado(self) -> "EspecieParametroUpdate":
        _check_rango(self.Rmin, self.Rmax)
        return self


def apply_update(entity: EspecieParametro, patch: EspecieParametroUpdate) -> EspecieParametro:
    """Aplica un patch parcial y devuelve una entidad nueva.

    Solo se fusionan los campos presentes en el patch; un `None` explícito se
    trata como "sin cambio". El resultado se revalida, así que un patch que
    deje `Rmin > Rmax` lanza `ValidationError`.
    """

    changes = patch.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        return entity.model_copy()

    merged = entity.model_dump()
    merged.update(changes)
    return EspecieParametro.model_validate(merged)


def deactivate(entity: EspecieParametro) -> EspecieParametro:
    """Borrado lógico: transición de `estado` a `inactivo`."""

    return apply_update(entity, EspecieParametroUpdate(estado=EstadoRegistro.INACTIVO))


class Especie(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id_especie: int
    nombre: str = Field(..., min_length=1, max_length=120)
    fecha_creacion: str | None = None
    estado: EstadoEspecie | None = None


class EspecieCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nombre: str = Field(..., min_length=1, max_length=120, description="Nombre común de la especie.")
    estado: EstadoEspecie | None = None


class Parametro(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id_parametro: int
    nombre_parametro: str = Field(..., min_length=1)
    unidad_medida: str
    descripcion: str | None = None


class ParametroCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nombre_parametro: str = Field(..., min_length=1, max_length=120)
    unidad_medida: str = Field(..., min_length=1, max_length=40)
    descripcion: str | None = Field(default=None, max_length=255)


class Instalacion(BaseModel):
    """Vista tipada (y tolerante) de un registro de instalación.

    El loader de instalaciones conserva los registros tal como llegan; este
    modelo solo se usa para presentarlos.
    """

    model_config = ConfigDict(extra="allow")

    id_instalacion: int | None = None
    id_empresa_sucursal: int | None = None
    nombre_instalacion: str | None = None
    fecha_instalacion: str | None = None
    estado_operativo: str | None = None
    descripcion: str | None = None
    tipo_uso: str | None = None
    id_proceso: int | None = None

    @classmethod
    def from_record(cls, record: Any) -> "Instalacion":
        """Vista del registro; si algún campo no tiene el tipo esperado, se muestra como texto."""

        if not isinstance(record, dict):
            return cls()
        try:
            return cls.model_validate(record)
        except ValidationError:
            return cls.model_construct(**{k: v if v is None else str(v) for k, v in record.items()})
