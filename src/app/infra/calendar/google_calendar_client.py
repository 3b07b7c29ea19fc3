"""Client concreto de Google Calendar para a sincronizacao de schedules."""

from __future__ import annotations

import asyncio
import json
import logging
import threading
from typing import TYPE_CHECKING, Any

import httplib2
from google.oauth2 import service_account
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import (
    extract_event_id,
    http_status,
    is_not_found,
)
from app.observability import get_correlation_id
from app.protocols.calendar_service import CalendarServiceProtocol
from utils.errors import (
    CalendarEventNotFoundError,
    CalendarServiceError,
    CalendarTimeoutError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.calendar_resource import CalendarResource

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"
_CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar"


class GoogleCalendarClient(CalendarServiceProtocol):
    """Implementacao do protocolo de calendario usando API v3 do Google.

    Cada chamada roda em thread propria com um `httplib2.Http` novo
    (httplib2 nao e thread-safe) e e limitada por `timeout_seconds` tanto
    no socket quanto no `asyncio.wait_for`.
    """

    __slots__ = ("_calendar_id", "_credentials", "_service", "_timeout_seconds")

    def __init__(
        self,
        *,
        calendar_id: str,
        credentials_json: str,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._credentials = service_account.Credentials.from_service_account_info(
            json.loads(credentials_json),
            scopes=[_CALENDAR_SCOPE],
        )
        self._calendar_id = calendar_id
        self._timeout_seconds = timeout_seconds
        self._service = build(
            "calendar",
            "v3",
            http=self._authorized_http(),
            cache_discovery=False,
        )

    async def insert_event(self, resource: CalendarResource) -> str:
        response = await self._call("insert_event", self._insert_event_sync, resource.to_google_body())
        event_id = extract_event_id(response)
        if event_id is None:
            self._log_error(action="insert_event", result="missing_event_id")
            raise CalendarServiceError("missing_event_id")
        return event_id

    async def update_event(self, event_id: str, resource: CalendarResource) -> str:
        response = await self._call(
            "update_event",
            self._update_event_sync,
            event_id,
            resource.to_google_body(),
        )
        return extract_event_id(response) or event_id

    async def delete_event(self, event_id: str) -> None:
        await self._call("delete_event", self._delete_event_sync, event_id)

    async def _call(self, action: str, func: Callable[..., Any], *args: Any) -> Any:
        timed_out = threading.Event()
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._run_sync, action, timed_out, func, *args),
                timeout=self._timeout_seconds,
            )
        except TimeoutError as exc:
            # A thread segue rodando: a chamada ainda pode ser aplicada no Google
            timed_out.set()
            self._log_error(action=action, result="timeout")
            raise CalendarTimeoutError("calendar_timeout") from exc
        except HttpError as exc:
            status_code = http_status(exc)
            if is_not_found(exc):
                logger.info(
                    "google_calendar_event_missing",
                    extra={
                        "component": _COMPONENT,
                        "action": action,
                        "result": "not_found",
                        "status_code": status_code,
                        "correlation_id": get_correlation_id(),
                    },
                )
                raise CalendarEventNotFoundError(
                    "calendar_event_not_found", status_code=status_code
                ) from exc
            self._log_error(action=action, result="error", exc=exc)
            raise CalendarServiceError("calendar_http_error", status_code=status_code) from exc
        except Exception as exc:
            self._log_error(action=action, result="error")
            raise CalendarServiceError("calendar_unexpected_error") from exc

    def _run_sync(
        self,
        action: str,
        timed_out: threading.Event,
        func: Callable[..., Any],
        *args: Any,
    ) -> Any:
        response = func(*args)
        if timed_out.is_set():
            logger.warning(
                "google_calendar_late_completion",
                extra={
                    "component": _COMPONENT,
                    "action": action,
                    "result": "applied_after_timeout",
                    "event_id": extract_event_id(response),
                    "correlation_id": get_correlation_id(),
                },
            )
        return response

    def _authorized_http(self) -> AuthorizedHttp:
        return AuthorizedHttp(self._credentials, http=httplib2.Http(timeout=self._timeout_seconds))

    def _insert_event_sync(self, body: dict[str, Any]) -> dict[str, Any]:
        return (
            self._service.events()
            .insert(calendarId=self._calendar_id, body=body)
            .execute(http=self._authorized_http())
        )

    def _update_event_sync(self, event_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return (
            self._service.events()
            .update(calendarId=self._calendar_id, eventId=event_id, body=body)
            .execute(http=self._authorized_http())
        )

    def _delete_event_sync(self, event_id: str) -> None:
        self._service.events().delete(
            calendarId=self._calendar_id,
            eventId=event_id,
        ).execute(http=self._authorized_http())

    def _log_error(self, *, action: str, result: str, exc: HttpError | None = None) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": result,
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        if result in ("timeout", "missing_event_id"):
            logger.error("google_calendar_call_failed", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)


def create_google_calendar_client(
    *,
    calendar_id: str,
    credentials_json: str | None,
    timeout_seconds: float,
) -> GoogleCalendarClient | None:
    """Cria client ou retorna None quando a credencial esta ausente/invalida.

    Sem calendario o servico segue operando: operacoes de agenda viram skip.
    """
    if not credentials_json:
        logger.warning(
            "google_calendar_not_configured",
            extra={"component": _COMPONENT, "reason": "missing_credentials"},
        )
        return None
    try:
        return GoogleCalendarClient(
            calendar_id=calendar_id,
            credentials_json=credentials_json,
            timeout_seconds=timeout_seconds,
        )
    except (ValueError, KeyError, TypeError) as exc:
        logger.error(
            "google_calendar_credentials_invalid",
            extra={"component": _COMPONENT, "error_type": type(exc).__name__},
        )
        return None
