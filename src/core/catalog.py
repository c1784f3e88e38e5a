"""Catálogo base que instala el seed.

Especies y parámetros habituales en granjas acuícolas del sureste, con los
rangos óptimos documentados para cada especie.
"""

from __future__ import annotations

from dataclasses import dataclass

ESPECIES: tuple[str, ...] = (
    "Tilapia",
    "Camarón",
    "Lobina",
    "Carpa",
    "Bagre",
)

# (nombre_parametro, unidad_medida)
PARAMETROS: tuple[tuple[str, str], ...] = (
    ("pH", "pH"),
    ("Temperatura", "°C"),
    ("Oxígeno Disuelto", "mg/L"),
    ("Salinidad", "ppt"),
    ("Turbidez", "NTU"),
    ("Nitratos", "mg/L"),
    ("Amonio", "mg/L"),
)


@dataclass(frozen=True)
class RangoBase:
    especie: str
    parametro: str
    Rmin: float
    Rmax: float


RANGOS: tuple[RangoBase, ...] = (
    RangoBase("Tilapia", "Temperatura", 22.0, 30.0),
    RangoBase("Tilapia", "pH", 6.5, 8.5),
    RangoBase("Tilapia", "Oxígeno Disuelto", 4.0, 10.0),
    RangoBase("Camarón", "Temperatura", 26.0, 32.0),
    RangoBase("Camarón", "Salinidad", 15.0, 25.0),
    RangoBase("Camarón", "pH", 7.5, 8.5),
    RangoBase("Lobina", "Temperatura", 18.0, 24.0),
    RangoBase("Lobina", "Salinidad", 30.0, 40.0),
)
