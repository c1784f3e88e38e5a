"""Seed del catálogo base a través de la API.

Idempotente: antes de crear, lista lo que ya existe y omite especies y
parámetros con el mismo nombre, y rangos con el mismo par
`(id_especie, id_parametro)`.

Cualquier respuesta no-2xx corta el proceso con `SeedError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_async_client
from core.catalog import ESPECIES, PARAMETROS, RANGOS
from core.config import AppSettings
from core.domain.models import (
    Especie,
    EspecieCreate,
    EspecieParametroCreate,
    Parametro,
    ParametroCreate,
)
from core.errors import SeedError
from core.logger import get_logger

ESPECIES_PATH = "/api/especies"
PARAMETROS_PATH = "/api/parametros"
ESPECIE_PARAMETROS_PATH = "/api/especie-parametros"

ModelT = TypeVar("ModelT", bound=BaseModel)

_log = get_logger("seed")


@dataclass
class SeedReport:
    especies_creadas: int = 0
    especies_existentes: int = 0
    parametros_creados: int = 0
    parametros_existentes: int = 0
    rangos_creados: int = 0
    rangos_existentes: int = 0


def _ensure_ok(resp: httpx.Response, action: str) -> None:
    if resp.is_success:
        return
    raise SeedError(f"no se pudo {action}", url=str(resp.request.url), status_code=resp.status_code)


def _unwrap(payload: Any) -> Any:
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


async def _get_list(client: httpx.AsyncClient, path: str) -> list[dict[str, Any]]:
    resp = await client.get(path)
    _ensure_ok(resp, f"listar {path}")
    payload = _unwrap(resp.json())
    if not isinstance(payload, list):
        raise SeedError(f"respuesta inesperada de {path}: se esperaba una lista")
    return [row for row in payload if isinstance(row, dict)]


async def _post(client: httpx.AsyncClient, path: str, body: BaseModel) -> dict[str, Any]:
    resp = await client.post(path, json=body.model_dump(mode="json", exclude_none=True))
    _ensure_ok(resp, f"crear en {path}")
    data = _unwrap(resp.json())
    if not isinstance(data, dict):
        raise SeedError(f"respuesta inesperada de {path}: se esperaba un objeto")
    return data


def _parse(model: type[ModelT], row: dict[str, Any], path: str) -> ModelT:
    try:
        return model.model_validate(row)
    except ValidationError as exc:
        raise SeedError(f"registro inválido en {path}: {exc.error_count()} error(es)") from exc


async def _seed_especies(client: httpx.AsyncClient, report: SeedReport) -> dict[str, int]:
    existentes = [_parse(Especie, row, ESPECIES_PATH) for row in await _get_list(client, ESPECIES_PATH)]
    ids = {e.nombre: e.id_especie for e in existentes}
    for nombre in ESPECIES:
        if nombre in ids:
            report.especies_existentes += 1
            _log.info("• Especie ya existe: %s", nombre)
            continue
        created = await _post(client, ESPECIES_PATH, EspecieCreate(nombre=nombre))
        ids[nombre] = _parse(Especie, created, ESPECIES_PATH).id_especie
        report.especies_creadas += 1
        _log.info("✔ Especie creada: %s", nombre)
    return ids


async def _seed_parametros(client: httpx.AsyncClient, report: SeedReport) -> dict[str, int]:
    existentes = [_parse(Parametro, row, PARAMETROS_PATH) for row in await _get_list(client, PARAMETROS_PATH)]
    ids = {p.nombre_parametro: p.id_parametro for p in existentes}
    for nombre, unidad in PARAMETROS:
        if nombre in ids:
            report.parametros_existentes += 1
            _log.info("• Parámetro ya existe: %s", nombre)
            continue
        body = ParametroCreate(nombre_parametro=nombre, unidad_medida=unidad)
        created = await _post(client, PARAMETROS_PATH, body)
        ids[nombre] = _parse(Parametro, created, PARAMETROS_PATH).id_parametro
        report.parametros_creados += 1
        _log.info("✔ Parámetro creado: %s", nombre)
    return ids


async def _seed_rangos(
    client: httpx.AsyncClient,
    report: SeedReport,
    especie_ids: dict[str, int],
    parametro_ids: dict[str, int],
) -> None:
    existing = {
        (row.get("id_especie"), row.get("id_parametro"))
        for row in await _get_list(client, ESPECIE_PARAMETROS_PATH)
    }
    for rango in RANGOS:
        body = EspecieParametroCreate(
            id_especie=especie_ids[rango.especie],
            id_parametro=parametro_ids[rango.parametro],
            Rmin=rango.Rmin,
            Rmax=rango.Rmax,
        )
        if (body.id_especie, body.id_parametro) in existing:
            report.rangos_existentes += 1
            continue
        await _post(client, ESPECIE_PARAMETROS_PATH, body)
        existing.add((body.id_especie, body.id_parametro))
        report.rangos_creados += 1
        _log.info("✔ Rango creado: %s / %s [%s, %s]", rango.especie, rango.parametro, rango.Rmin, rango.Rmax)


async def _seed(client: httpx.AsyncClient) -> SeedReport:
    report = SeedReport()
    especie_ids = await _seed_especies(client, report)
    parametro_ids = await _seed_parametros(client, report)
    await _seed_rangos(client, report, especie_ids, parametro_ids)
    return report


async def seed_database(
    settings: AppSettings | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> SeedReport:
    """Crea especies, parámetros y rangos base que falten en la API."""

    if client is not None:
        return await _seed(client)
    async with build_async_client(settings or AppSettings()) as own_client:
        return await _seed(own_client)
