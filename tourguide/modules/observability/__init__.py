"""modules/observability — structured event logging."""

from tourguide.modules.observability.logger import EventType, StructuredLogger, event_log

__all__ = ["EventType", "StructuredLogger", "event_log"]
