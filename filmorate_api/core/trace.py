from contextvars import ContextVar, Token

_trace_id: ContextVar[str] = ContextVar("trace_id", default="-")


def get_trace_id() -> str:
    return _trace_id.get()


def bind_trace_id(value: str) -> Token:
    return _trace_id.set(value)


def unbind_trace_id(token: Token) -> None:
    _trace_id.reset(token)
