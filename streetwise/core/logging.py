import logging
import json
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

# Id of the analysis currently being processed (one per ValuationService.analyze call)
_analysis_id: ContextVar[Optional[str]] = ContextVar("analysis_id", default=None)

# Simple JSON formatter for line-oriented logs
class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        # Include analysis id if available
        aid = getattr(record, "analysis_id", None)
        if aid:
            payload["analysis_id"] = aid
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)

class AnalysisIdFilter(logging.Filter):
    """
    Stamps every record with the analysis id of the current task,
    so interleaved logs from concurrent analyses can be separated.
    """
    def filter(self, record):
        if getattr(record, "analysis_id", None) is None:
            record.analysis_id = _analysis_id.get()
        return True

def configure_logging(level: str = "INFO"):
    """
    Install a single JSON handler on the root logger.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    handler.addFilter(AnalysisIdFilter())
    root.handlers = [handler]

def current_analysis_id() -> Optional[str]:
    return _analysis_id.get()

@contextmanager
def analysis_context(analysis_id: Optional[str] = None) -> Iterator[str]:
    """
    Bind an analysis id for the duration of the block. Reuses the caller's
    id when one is passed in, otherwise generates a fresh one.
    """
    aid = analysis_id or str(uuid.uuid4())
    token = _analysis_id.set(aid)
    try:
        yield aid
    finally:
        _analysis_id.reset(token)
