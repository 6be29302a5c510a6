from .capacity import close_if_full, should_close
from .cooldown import cooldown_reason, remaining_cooldown_days
from .engine import AdmissionDecision, AdmissionEngine, QueueConfig
from .normalizer import (
    InvalidBeatmapId,
    SubmissionCandidate,
    Variant,
    cover_image_url,
    format_length,
    normalize_beatmapset,
    round2,
)

__all__ = [
    "AdmissionDecision",
    "AdmissionEngine",
    "InvalidBeatmapId",
    "QueueConfig",
    "SubmissionCandidate",
    "Variant",
    "close_if_full",
    "cooldown_reason",
    "cover_image_url",
    "format_length",
    "normalize_beatmapset",
    "remaining_cooldown_days",
    "round2",
    "should_close",
]
