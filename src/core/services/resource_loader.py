"""Carga de colecciones con estado observable.

Equivalente en asyncio del patrón "fetch al montar" de la UI: cada loader
emite un único GET por activación y publica un snapshot inmutable
`{items, loading, error}` a sus suscriptores.

Reglas:
- El fetch es el único punto de suspensión; el estado solo cambia en su
  continuación, con un único snapshot final que ya trae `loading=False`.
- Tras `unmount()` no se publica ningún cambio más y el request en vuelo se
  cancela.
- Todo fallo queda absorbido en el estado: el llamador ve un mensaje fijo y
  la clase de error (`error_kind`), nunca una excepción.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Mapping, TypeVar

import httpx

from core.domain.models import Especie, EspecieParametro, Parametro
from core.errors import LoadError, LoadErrorKind
from core.interfaces.fetcher import Fetcher
from core.logger import get_logger

T = TypeVar("T")

INSTALACIONES_PATH = "/api/instalaciones"
INSTALACIONES_ERROR = "Error al cargar las instalaciones"
ESPECIE_PARAMETROS_PATH = "/api/especie-parametros"
ESPECIE_PARAMETROS_ERROR = "Error al cargar los parámetros de especie"
ESPECIES_PATH = "/api/especies"
ESPECIES_ERROR = "Error al cargar especies"
PARAMETROS_PATH = "/api/parametros"
PARAMETROS_ERROR = "Error al cargar parámetros"

_log = get_logger("loader")


@dataclass(frozen=True)
class ResourceState(Generic[T]):
    """Snapshot de solo lectura del loader.

    `items` es una tupla para que el snapshot sea inmutable: conserva el orden
    de la respuesta, y `list(state.items)` es igual a la lista recibida.
    """

    items: tuple[T, ...] = ()
    loading: bool = True
    error: str | None = None
    error_kind: LoadErrorKind | None = None


Subscriber = Callable[[ResourceState[Any]], None]


class ResourceLoader(Generic[T]):
    """Ciclo request/loading/error para una colección fija.

    No hay refetch manual, paginación, reintentos ni caché. Para volver a
    cargar hay que desmontar y montar de nuevo (nueva activación).
    """

    def __init__(
        self,
        fetcher: Fetcher,
        path: str,
        *,
        error_message: str,
        parse_item: Callable[[Any], T] | None = None,
        error_messages: Mapping[LoadErrorKind, str] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._path = path
        self._error_message = error_message
        self._error_messages = dict(error_messages or {})
        self._parse_item = parse_item
        self._state: ResourceState[T] = ResourceState()
        self._subscribers: list[Subscriber] = []
        self._task: asyncio.Task[None] | None = None
        self._alive = False
        self._activation = 0

    @property
    def path(self) -> str:
        return self._path

    @property
    def state(self) -> ResourceState[T]:
        return self._state

    @property
    def mounted(self) -> bool:
        return self._alive

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Registra `callback` para cada cambio de estado; devuelve la baja."""

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def mount(self) -> asyncio.Task[None]:
        """Inicia la activación. Debe llamarse con un event loop en marcha."""

        if self._alive:
            raise RuntimeError(f"el loader de {self._path} ya está montado")
        loop = asyncio.get_running_loop()
        self._alive = True
        self._activation += 1
        activation = self._activation
        self._update(activation, loading=True, error=None, error_kind=None)
        self._task = loop.create_task(self._load(activation))
        return self._task

    def unmount(self) -> None:
        self._alive = False
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    async def wait(self) -> ResourceState[T]:
        """Espera a que termine la activación en curso y devuelve el snapshot."""

        task = self._task
        if task is not None:
            await asyncio.wait({task})
        return self._state

    async def _load(self, activation: int) -> None:
        try:
            response = await self._fetcher.fetch(self._path)
            items = self._decode(response)
        except LoadError as exc:
            self._fail(activation, exc)
        except httpx.RequestError as exc:
            self._fail(activation, LoadError(LoadErrorKind.NETWORK, str(exc) or type(exc).__name__))
        except Exception as exc:
            _log.exception("error inesperado cargando %s", self._path)
            self._fail(activation, LoadError(LoadErrorKind.UNKNOWN, str(exc) or type(exc).__name__))
        else:
            self._update(activation, items=tuple(items), loading=False)

    def _decode(self, response: httpx.Response) -> list[T]:
        if not response.is_success:
            raise LoadError(
                LoadErrorKind.STATUS,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise LoadError(LoadErrorKind.DECODE, f"respuesta no es JSON: {exc}") from exc

        # Backend paginado: {"data": [...], "pagination": {...}}
        if isinstance(payload, dict) and isinstance(payload.get("data"), list):
            payload = payload["data"]
        if not isinstance(payload, list):
            raise LoadError(LoadErrorKind.DECODE, f"se esperaba una lista, llegó {type(payload).__name__}")

        if self._parse_item is None:
            return payload
        try:
            return [self._parse_item(raw) for raw in payload]
        except ValueError as exc:
            raise LoadError(LoadErrorKind.DECODE, f"registro inválido: {exc}") from exc

    def _fail(self, activation: int, exc: LoadError) -> None:
        _log.warning("fallo al cargar %s [%s]: %s", self._path, exc.kind.value, exc.message)
        message = self._error_messages.get(exc.kind, self._error_message)
        self._update(activation, error=message, error_kind=exc.kind, loading=False)

    def _update(self, activation: int, **changes: Any) -> None:
        # Activaciones viejas (ya desmontadas) no tocan el estado.
        if not self._alive or activation != self._activation:
            return
        self._state = replace(self._state, **changes)
        for callback in list(self._subscribers):
            try:
                callback(self._state)
            except Exception:
                _log.exception("suscriptor de %s falló", self._path)


def facilities_loader(fetcher: Fetcher) -> ResourceLoader[Any]:
    """Loader de `/api/instalaciones`; los registros se conservan tal cual llegan."""

    return ResourceLoader(fetcher, INSTALACIONES_PATH, error_message=INSTALACIONES_ERROR)


def especie_parametros_loader(fetcher: Fetcher) -> ResourceLoader[EspecieParametro]:
    return ResourceLoader(
        fetcher,
        ESPECIE_PARAMETROS_PATH,
        error_message=ESPECIE_PARAMETROS_ERROR,
        parse_item=EspecieParametro.model_validate,
    )


def especies_loader(fetcher: Fetcher) -> ResourceLoader[Especie]:
    return ResourceLoader(
        fetcher,
        ESPECIES_PATH,
        error_message=ESPECIES_ERROR,
        parse_item=Especie.model_validate,
    )


def parametros_loader(fetcher: Fetcher) -> ResourceLoader[Parametro]:
    return ResourceLoader(
        fetcher,
        PARAMETROS_PATH,
        error_message=PARAMETROS_ERROR,
        parse_item=Parametro.model_validate,
    )


async def load_collection(loader: ResourceLoader[T]) -> ResourceState[T]:
    """Monta, espera el resultado y desmonta. Pensado para la CLI."""

    loader.mount()
    try:
        return await loader.wait()
    finally:
        loader.unmount()
