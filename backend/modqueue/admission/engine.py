from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Sequence

from ..enums import ModderType
from .cooldown import cooldown_reason
from .normalizer import SubmissionCandidate

MAX_COMMENT_LENGTH = 500


@dataclass(frozen=True)
class QueueConfig:
    """Snapshot of one owner's queue settings, taken for a single evaluation."""

    owner: str
    modder_type: ModderType
    modes: tuple[str, ...]
    open: bool
    cooldown: float
    max_pending: int

    @classmethod
    def from_settings(cls, settings: Any) -> "QueueConfig":
        return cls(
            owner=settings.owner,
            modder_type=ModderType(settings.modder_type),
            modes=tuple(settings.modes or ()),
            open=bool(settings.open),
            cooldown=float(settings.cooldown),
            max_pending=int(settings.max_pending),
        )


@dataclass
class AdmissionDecision:
    candidate: SubmissionCandidate | None
    reasons: list[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.candidate is not None and not self.reasons


def mode_reason(modes: Sequence[str]) -> str:
    if len(modes) == 1:
        return f"Only {modes[0]} maps are accepted"
    return f"Must be one of the following gamemodes: {', '.join(modes)}"


class AdmissionEngine:
    def __init__(self, max_comment_length: int = MAX_COMMENT_LENGTH) -> None:
        self.max_comment_length = max_comment_length

    def evaluate(
        self,
        candidate: SubmissionCandidate,
        *,
        requester: str,
        target: str,
        config: QueueConfig,
        last_request_at: datetime | None,
        now: datetime,
    ) -> AdmissionDecision:
        # owners may put anything in their own queue
        if requester == target:
            return AdmissionDecision(candidate=candidate)

        reasons: list[str] = []

        if not any(diff.mode in config.modes for diff in candidate.diffs):
            reasons.append(mode_reason(config.modes))

        if config.modder_type.is_bn and candidate.status != "Pending":
            reasons.append(f"Expected a Pending map (this is {candidate.status})")

        if candidate.creator != requester:
            reasons.append("This map isn't yours")

        if len(candidate.comment) > self.max_comment_length:
            reasons.append("Comment is excessively long")

        if not config.open:
            reasons.append("Requests are closed")

        wait = cooldown_reason(last_request_at, config.cooldown, now)
        if wait:
            reasons.append(wait)

        return AdmissionDecision(candidate=candidate, reasons=reasons)
