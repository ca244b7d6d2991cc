from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Sequence

log = logging.getLogger("logomark.telemetry")


@contextmanager
def timed(stage: str, ctx: Optional[Dict[str, Any]] = None) -> Iterator[Dict[str, Any]]:
    """Log elapsed ms for ``stage``; the yielded dict is merged into the record.

    The record's ``ok`` flag is False when the block raised.
    """
    start = time.perf_counter()
    extra: Dict[str, Any] = {}
    ok = True
    try:
        yield extra
    except BaseException:
        ok = False
        raise
    finally:
        payload: Dict[str, Any] = {"stage": stage, "ms": int((time.perf_counter() - start) * 1000), "ok": ok}
        if ctx:
            payload.update(ctx)
        payload.update(extra)
        log.info("timing", extra=payload)


def summarize_scores(scores: Sequence[int]) -> Dict[str, float]:
    """Min/mean/max of a batch of quality scores for log lines."""
    if not scores:
        return {"n": 0, "min": 0.0, "mean": 0.0, "max": 0.0}
    return {
        "n": len(scores),
        "min": float(min(scores)),
        "mean": round(sum(scores) / len(scores), 2),
        "max": float(max(scores)),
    }
