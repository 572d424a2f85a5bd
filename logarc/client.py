"""
LogClient: sends leveled log events to the LogArc service.
"""

import logging
from typing import Any, Awaitable, Dict, Mapping, Optional, Union

import httpx

from logarc.config import LogClientConfig
from logarc.event import LogEvent, LogLevel, caller_info, format_timestamp
from logarc.exceptions import InvalidCredentialError
from logarc.logger import get_logger

REQUEST_HEADERS = {
    'Accept': 'application/json',
    'Content-Type': 'application/json',
}


class LogClient:
    """
    Client for the LogArc logging endpoint.

    Each level method captures caller metadata and the timestamp when it is
    called, and returns an awaitable that performs exactly one POST to
    `<endpoint>/log`. Delivery failures are reported on the diagnostic logger
    and then raised to the awaiting caller.

    Example:
        client = LogClient({'project_key': 'abc123'}, user={'id': 7})
        await client.info("User logged in", {'ip': '10.0.0.1'})
    """

    def __init__(
        self,
        config: Union[LogClientConfig, Mapping[str, Any]],
        user: Optional[Dict[str, Any]] = None,
        *,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        if not isinstance(config, LogClientConfig):
            config = LogClientConfig.from_mapping(config or {})

        self.config = config
        self.user = user
        self.logger = logger if logger is not None else get_logger()
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.config.endpoint}/log"

    def debug(self, message: Optional[str] = None, data: Any = None) -> Awaitable[Any]:
        return self.log(LogLevel.DEBUG, message, data)

    def info(self, message: Optional[str] = None, data: Any = None) -> Awaitable[Any]:
        return self.log(LogLevel.INFO, message, data)

    def notice(self, message: Optional[str] = None, data: Any = None) -> Awaitable[Any]:
        return self.log(LogLevel.NOTICE, message, data)

    def warning(self, message: Optional[str] = None, data: Any = None) -> Awaitable[Any]:
        return self.log(LogLevel.WARNING, message, data)

    def error(self, message: Optional[str] = None, data: Any = None) -> Awaitable[Any]:
        return self.log(LogLevel.ERROR, message, data)

    def critical(self, message: Optional[str] = None, data: Any = None) -> Awaitable[Any]:
        return self.log(LogLevel.CRITICAL, message, data)

    def alert(self, message: Optional[str] = None, data: Any = None) -> Awaitable[Any]:
        return self.log(LogLevel.ALERT, message, data)

    def emergency(self, message: Optional[str] = None, data: Any = None) -> Awaitable[Any]:
        return self.log(LogLevel.EMERGENCY, message, data)

    def log(
        self,
        level: Union[LogLevel, str],
        message: Optional[str] = None,
        data: Any = None
    ) -> Awaitable[Any]:
        """Build the event now, return the coroutine that sends it"""
        event = self.build_event(LogLevel(level), message, data)
        return self.send(event)

    def build_event(self, level: LogLevel, message: Optional[str] = None, data: Any = None) -> LogEvent:
        """Assemble the full event from config, user context and call arguments"""
        class_name, method_name, line_number = caller_info()

        return LogEvent(
            level=level,
            message=message,
            data=data,
            timestamp=format_timestamp(self.config.zone),
            class_name=class_name,
            method_name=method_name,
            line_number=line_number,
            environment=self.config.environment.value,
            project_key=self.config.project_key,
            user=self.user,
        )

    async def send(self, event: LogEvent) -> Any:
        """
        POST one event to the service.

        Returns:
            Decoded response body on 2xx

        Raises:
            InvalidCredentialError: server answered 422
            httpx.HTTPStatusError: any other error status
            httpx.RequestError: no response (timeout, DNS, connection refused)
            httpx.InvalidURL: endpoint does not form a valid URL
        """
        body = event.to_json()

        try:
            async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as client:
                response = await client.post(self.url, content=body, headers=REQUEST_HEADERS)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 422:
                raise InvalidCredentialError() from e

            self.logger.error(
                "LogArc request failed",
                extra={'context': {
                    'status': e.response.status_code,
                    'body': _decode_body(e.response),
                }}
            )
            raise
        except (httpx.RequestError, httpx.InvalidURL) as e:
            self.logger.error(
                "LogArc request failed",
                exc_info=True,
                extra={'context': {'message': str(e)}}
            )
            raise

        return _decode_body(response)


def _decode_body(response: httpx.Response) -> Any:
    """JSON body if there is one, raw text otherwise"""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
