"""Tests for the species-parameter contract and its lifecycle helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.models import (
    EspecieParametro,
    EspecieParametroCreate,
    EspecieParametroUpdate,
    EstadoRegistro,
    Instalacion,
    apply_update,
    deactivate,
)


def _entity(**overrides: object) -> EspecieParametro:
    data: dict[str, object] = {
        "id_especie_parametro": 10,
        "id_especie": 1,
        "id_parametro": 2,
        "Rmin": 22.0,
        "Rmax": 30.0,
        "fecha_creacion": "2024-01-01T00:00:00Z",
        "estado": "activo",
    }
    data.update(overrides)
    return EspecieParametro.model_validate(data)


@pytest.mark.parametrize("missing", ["Rmin", "Rmax"])
def test_create_requires_both_bounds(missing: str) -> None:
    payload = {"id_especie": 1, "id_parametro": 2, "Rmin": 6.5, "Rmax": 8.5}
    payload.pop(missing)

    with pytest.raises(ValidationError) as excinfo:
        EspecieParametroCreate.model_validate(payload)

    assert excinfo.value.errors()[0]["loc"] == (missing,)


def test_create_rejects_inverted_range() -> None:
    with pytest.raises(ValidationError, match="Rmin debe ser menor o igual que Rmax"):
        EspecieParametroCreate(id_especie=1, id_parametro=2, Rmin=9, Rmax=3)


def test_create_accepts_equal_bounds() -> None:
    body = EspecieParametroCreate(id_especie=1, id_parametro=2, Rmin=7, Rmax=7)

    assert body.Rmin == body.Rmax == 7.0


def test_create_rejects_server_fields_and_non_positive_ids() -> None:
    with pytest.raises(ValidationError):
        EspecieParametroCreate.model_validate(
            {"id_especie": 1, "id_parametro": 2, "Rmin": 1, "Rmax": 2, "id_especie_parametro": 5}
        )
    with pytest.raises(ValidationError):
        EspecieParametroCreate(id_especie=0, id_parametro=2, Rmin=1, Rmax=2)


def test_empty_update_is_valid_and_a_no_op() -> None:
    entity = _entity()
    patch = EspecieParametroUpdate.model_validate({})

    updated = apply_update(entity, patch)

    assert updated == entity
    assert updated is not entity


def test_update_merges_only_given_fields() -> None:
    updated = apply_update(_entity(), EspecieParametroUpdate(Rmax=32))

    assert updated.Rmin == 22.0
    assert updated.Rmax == 32.0
    assert updated.estado is EstadoRegistro.ACTIVO
    assert updated.fecha_creacion == "2024-01-01T00:00:00Z"


def test_update_that_breaks_range_is_rejected() -> None:
    with pytest.raises(ValidationError):
        apply_update(_entity(), EspecieParametroUpdate(Rmin=35))


def test_update_with_inverted_bounds_is_invalid() -> None:
    with pytest.raises(ValidationError):
        EspecieParametroUpdate(Rmin=10, Rmax=1)


def test_explicit_none_in_patch_means_no_change() -> None:
    updated = apply_update(_entity(), EspecieParametroUpdate(Rmin=None, estado=None))

    assert updated == _entity()


def test_deactivate_is_a_soft_delete() -> None:
    entity = _entity()

    removed = deactivate(entity)

    assert removed.estado is EstadoRegistro.INACTIVO
    assert removed.id_especie_parametro == entity.id_especie_parametro
    assert entity.estado is EstadoRegistro.ACTIVO


def test_entity_rejects_unknown_estado() -> None:
    with pytest.raises(ValidationError):
        _entity(estado="borrado")


def test_instalacion_view_keeps_extra_fields() -> None:
    inst = Instalacion.from_record({"id_instalacion": 3, "nombre_instalacion": "Granja", "latitud": 21.3})

    assert inst.id_instalacion == 3
    assert inst.model_extra == {"latitud": 21.3}
    assert Instalacion.from_record("no es un registro") == Instalacion()


def test_instalacion_view_tolerates_off_shape_fields() -> None:
    record = {"id_instalacion": 1, "estado_operativo": True, "descripcion": {"x": 1}}

    inst = Instalacion.from_record(record)

    assert inst.estado_operativo == "True"
    assert inst.descripcion == "{'x': 1}"
    assert inst.id_instalacion == "1"
