# genere/shared/logging_config.py
import logging
import sys
from typing import Optional

import structlog
from opentelemetry import trace

from genere.shared.config import LogFormat, settings

def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict

def get_logger(name: str):
    """
    structlog logger on top of the standard `logging` logger `name`.

    Until `configure_logging` runs, records go through plain `logging`
    (warnings and above reach stderr, the rest is dropped), so using the
    library as a dependency prints nothing on stdout.
    """
    return structlog.wrap_logger(logging.getLogger(name))

def configure_logging(level: Optional[str] = None):
    """
    Configures structlog and the standard logging library to emit
    JSON logs or colored console logs on stderr.

    stdout is left to generated text.
    """
    level_name = (level or settings.LOG_LEVEL).upper()

    # 1. Processor chain
    processors = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Output format
    if settings.LOG_FORMAT == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # 3. Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        cache_logger_on_first_use=True,
    )

    # 4. Standard library logging: receives the rendered lines
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level_name,
    )
    logging.getLogger("genere").setLevel(level_name)
