"""Tests for turning osu! API rows into a submission candidate."""

import pytest

from modqueue.admission import (
    InvalidBeatmapId,
    cover_image_url,
    format_length,
    normalize_beatmapset,
    round2,
)

from conftest import make_row


class TestRound2:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (4.5678, 4.57),
            (5.125, 5.13),
            (-5.125, -5.13),
            (3.0, 3.0),
            (0.004, 0.0),
            (6.994999, 6.99),
        ],
    )
    def test_rounds_to_two_decimals_half_away_from_zero(self, value, expected):
        assert round2(value) == expected

    @pytest.mark.parametrize("value", [0.1, 1.005, 2.675, 5.125, 7.777777, -3.14159, 123.456])
    def test_is_idempotent(self, value):
        assert round2(round2(value)) == round2(value)


class TestFormatLength:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "0:00"), (9, "0:09"), (59, "0:59"), (65, "1:05"), (600, "10:00"), (3725, "62:05")],
    )
    def test_minutes_and_padded_seconds(self, seconds, expected):
        assert format_length(seconds) == expected


def test_cover_image_url():
    assert cover_image_url(555) == "https://assets.ppy.sh/beatmaps/555/covers/cover.jpg"


class TestNormalizeBeatmapset:
    def test_shared_fields_come_from_first_difficulty(self):
        rows = [
            make_row(version="Extra", difficultyrating="5.91", beatmap_id="1"),
            make_row(version="Normal", difficultyrating="2.1", beatmap_id="2", title="ignored"),
        ]

        candidate = normalize_beatmapset(rows, comment="please", m4m=True)

        assert candidate.map_id == 1
        assert candidate.title == "Blue Zenith"
        assert candidate.artist == "xi"
        assert candidate.creator == "mapper"
        assert candidate.bpm == 200.0
        assert candidate.length == "2:05"
        assert candidate.status == "Pending"
        assert candidate.image == "https://assets.ppy.sh/beatmaps/555/covers/cover.jpg"
        assert candidate.comment == "please"
        assert candidate.m4m is True

    def test_diffs_sorted_by_star_rating(self):
        rows = [
            make_row(version="Insane", difficultyrating="4.4449"),
            make_row(version="Easy", difficultyrating="1.23"),
            make_row(version="Taiko Oni", mode="1", difficultyrating="3.5"),
        ]

        candidate = normalize_beatmapset(rows)

        assert [diff.name for diff in candidate.diffs] == ["Easy", "Taiko Oni", "Insane"]
        assert [diff.sr for diff in candidate.diffs] == [1.23, 3.5, 4.44]
        assert [diff.mode for diff in candidate.diffs] == ["Standard", "Taiko", "Standard"]
        srs = [diff.sr for diff in candidate.diffs]
        assert srs == sorted(srs)

    @pytest.mark.parametrize(
        "code, label",
        [("0", "Standard"), ("1", "Taiko"), ("2", "Catch the Beat"), ("3", "Mania")],
    )
    def test_mode_codes_become_labels(self, code, label):
        candidate = normalize_beatmapset([make_row(mode=code)])
        assert candidate.diffs[0].mode == label

    @pytest.mark.parametrize(
        "code, label",
        [("-2", "Graveyard"), ("-1", "WIP"), ("0", "Pending"), ("1", "Ranked"), ("4", "Loved")],
    )
    def test_approval_codes_become_labels(self, code, label):
        candidate = normalize_beatmapset([make_row(approved=code)])
        assert candidate.status == label

    def test_missing_comment_and_m4m_default(self):
        candidate = normalize_beatmapset([make_row()], comment=None, m4m=None)

        assert candidate.comment == ""
        assert candidate.m4m is False

    def test_record_drops_review_status(self):
        record = normalize_beatmapset([make_row()]).to_record()

        assert "status" not in record
        assert record["diffs"] == [{"name": "Insane", "mode": "Standard", "sr": 4.57}]

    def test_empty_lookup_is_invalid(self):
        with pytest.raises(InvalidBeatmapId):
            normalize_beatmapset([])

    def test_malformed_row_is_invalid(self):
        row = make_row()
        del row["difficultyrating"]

        with pytest.raises(InvalidBeatmapId):
            normalize_beatmapset([row])

    def test_invalid_id_reason_text(self):
        assert InvalidBeatmapId.reason == "Invalid beatmap ID"
