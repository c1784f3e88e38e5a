"""Errores del dominio AquaMonitor."""

from __future__ import annotations

from enum import Enum


class AquaMonitorError(Exception):
    """Base de todos los errores propios del proyecto."""


class LoadErrorKind(str, Enum):
    """Clase de fallo al cargar una colección."""

    NETWORK = "network"
    STATUS = "status"
    DECODE = "decode"
    UNKNOWN = "unknown"


class LoadError(AquaMonitorError):
    def __init__(self, kind: LoadErrorKind, message: str, status_code: int | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code


class SeedError(AquaMonitorError):
    """La API rechazó una operación del seed."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is None:
            return base
        return f"{base} (HTTP {self.status_code} en {self.url})"
