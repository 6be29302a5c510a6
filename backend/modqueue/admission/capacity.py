from typing import Protocol


class _Closable(Protocol):
    open: bool
    max_pending: int


def should_close(pending_count: int, max_pending: int) -> bool:
    return pending_count >= max_pending


def close_if_full(settings: _Closable, pending_count: int) -> bool:
    """Close the queue once ``pending_count`` reaches capacity.

    Returns True when this call flipped the queue from open to closed. A
    queue is never reopened here; that is its owner's decision.
    """
    if not should_close(pending_count, settings.max_pending):
        return False
    was_open = settings.open
    settings.open = False
    return was_open
