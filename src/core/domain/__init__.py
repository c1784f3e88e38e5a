"""Entidades de AquaMonitor.

- Especies, parámetros y los rangos que los relacionan (`EspecieParametro`).
- Instalaciones como registros opacos con una vista tipada opcional.
"""
