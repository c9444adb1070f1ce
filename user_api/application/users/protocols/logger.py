from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerProtocol(Protocol):
    """Structured logger the user service writes outcome events to.

    Matches the structlog bound-logger call style: an event name plus
    key/value context.
    """

    def info(self, event: str, **kw: Any) -> Any: ...

    def error(self, event: str, **kw: Any) -> Any: ...
