import math
from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Sequence

COVER_URL_TEMPLATE = "https://assets.ppy.sh/beatmaps/{set_id}/covers/cover.jpg"

# osu! v1 API codes
MODE_LABELS = {"0": "Standard", "1": "Taiko", "2": "Catch the Beat", "3": "Mania"}
APPROVAL_LABELS = {
    "-2": "Graveyard",
    "-1": "WIP",
    "0": "Pending",
    "1": "Ranked",
    "2": "Approved",
    "3": "Qualified",
    "4": "Loved",
}


class InvalidBeatmapId(Exception):
    """The lookup failed or produced nothing usable for the submitted id."""

    reason = "Invalid beatmap ID"


@dataclass
class Variant:
    name: str
    mode: str
    sr: float


@dataclass
class SubmissionCandidate:
    map_id: int
    title: str
    artist: str
    creator: str
    bpm: float
    length: str
    status: str
    image: str
    comment: str = ""
    m4m: bool = False
    diffs: list[Variant] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_record(self) -> dict[str, Any]:
        """Columns shared with a persisted request; the review status is not one of them."""
        record = self.to_dict()
        record.pop("status")
        return record


def round2(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    scaled = math.floor(abs(value) * 100 + 0.5) / 100
    return math.copysign(scaled, value) if scaled else 0.0


def format_length(total_seconds: int) -> str:
    minutes, seconds = divmod(int(total_seconds), 60)
    return f"{minutes}:{seconds:02d}"


def cover_image_url(set_id: int | str) -> str:
    return COVER_URL_TEMPLATE.format(set_id=set_id)


def _label(table: Mapping[str, str], code: Any) -> str:
    key = str(code).strip()
    return table.get(key, key)


def normalize_beatmapset(
    rows: Sequence[Mapping[str, Any]],
    *,
    comment: str | None = None,
    m4m: bool | None = False,
) -> SubmissionCandidate:
    if not rows:
        raise InvalidBeatmapId("lookup returned no difficulties")

    first = rows[0]
    try:
        diffs = [
            Variant(
                name=row["version"],
                mode=_label(MODE_LABELS, row["mode"]),
                sr=round2(float(row["difficultyrating"])),
            )
            for row in rows
        ]
        diffs.sort(key=lambda diff: diff.sr)
        return SubmissionCandidate(
            map_id=int(first["beatmap_id"]),
            title=first["title"],
            artist=first["artist"],
            creator=first["creator"],
            bpm=float(first["bpm"]),
            length=format_length(int(first["total_length"])),
            status=_label(APPROVAL_LABELS, first["approved"]),
            image=cover_image_url(first["beatmapset_id"]),
            comment=comment or "",
            m4m=bool(m4m),
            diffs=diffs,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidBeatmapId(f"malformed beatmap metadata: {exc}") from exc
