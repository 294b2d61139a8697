"""Tests for formation lookup and lineup validation."""

import pytest

from fantasy_engine.analysis.formations import (
    FORMATIONS,
    Formation,
    FormationCounts,
    get_formation,
    validate_team_formation,
)
from fantasy_engine.models import FantasySelection, Player, Position


def make_lineup(gk: int, defenders: int, mid: int, fwd: int) -> list[FantasySelection]:
    """Helper to build a lineup with the given position counts."""
    positions = (
        [Position.GOALKEEPER] * gk
        + [Position.DEFENDER] * defenders
        + [Position.MIDFIELDER] * mid
        + [Position.FORWARD] * fwd
    )
    return [
        FantasySelection(
            player=Player(
                id=f"p{i}",
                name=f"Player {i}",
                position=position,
                club_id=f"c{i}",
                price=50,
            )
        )
        for i, position in enumerate(positions)
    ]


class TestFormationCatalog:
    """Tests for the FORMATIONS catalog."""

    def test_contains_standard_formations(self) -> None:
        assert len(FORMATIONS) == 4
        assert {f.id for f in FORMATIONS} == {"4-4-2", "4-3-3", "3-5-2", "5-3-2"}

    def test_eleven_players_one_goalkeeper(self) -> None:
        for formation in FORMATIONS:
            assert formation.positions.total == 11
            assert formation.positions.goalkeepers == 1

    def test_layout_matches_counts(self) -> None:
        for formation in FORMATIONS:
            rows = formation.layout
            assert len(rows) == 4
            flat = [p for row in rows for p in row]
            for position in Position:
                assert flat.count(position) == formation.positions.for_position(position)

    def test_layout_rows(self) -> None:
        formation = get_formation("3-5-2")
        assert formation.layout[0] == [Position.GOALKEEPER]
        assert formation.layout[2] == [Position.MIDFIELDER] * 5

    def test_counts_must_total_eleven(self) -> None:
        with pytest.raises(ValueError, match="11 players"):
            FormationCounts(goalkeepers=1, defenders=4, midfielders=4, forwards=3)

    def test_counts_need_one_goalkeeper(self) -> None:
        with pytest.raises(ValueError, match="goalkeeper"):
            FormationCounts(goalkeepers=2, defenders=4, midfielders=3, forwards=2)


class TestGetFormation:
    """Tests for get_formation function."""

    def test_valid_id(self) -> None:
        formation = get_formation("4-4-2")

        assert isinstance(formation, Formation)
        assert formation.id == "4-4-2"
        assert formation.name == "4-4-2"
        assert formation.positions.as_dict() == {"gk": 1, "def": 4, "mid": 4, "fwd": 2}

    def test_each_formation(self) -> None:
        assert get_formation("4-3-3").positions.as_dict() == {"gk": 1, "def": 4, "mid": 3, "fwd": 3}
        assert get_formation("3-5-2").positions.as_dict() == {"gk": 1, "def": 3, "mid": 5, "fwd": 2}
        assert get_formation("5-3-2").positions.as_dict() == {"gk": 1, "def": 5, "mid": 3, "fwd": 2}

    def test_unknown_id_returns_none(self) -> None:
        assert get_formation("not-a-formation") is None

    def test_lookup_is_exact(self) -> None:
        assert get_formation(" 4-4-2") is None
        assert get_formation("") is None


class TestValidateTeamFormation:
    """Tests for validate_team_formation function."""

    @pytest.fixture
    def formation(self) -> Formation:
        return get_formation("4-4-2")

    def test_valid_lineup(self, formation: Formation) -> None:
        result = validate_team_formation(formation, make_lineup(1, 4, 4, 2))

        assert result.valid is True
        assert result.errors == []

    def test_empty_lineup_reports_every_position(self, formation: Formation) -> None:
        result = validate_team_formation(formation, [])

        assert result.valid is False
        assert result.errors == [
            "Need exactly 1 goalkeeper(s), have 0",
            "Need exactly 4 defender(s), have 0",
            "Need exactly 4 midfielder(s), have 0",
            "Need exactly 2 forward(s), have 0",
        ]

    def test_wrong_formation(self, formation: Formation) -> None:
        result = validate_team_formation(formation, make_lineup(1, 4, 3, 3))

        assert result.valid is False
        assert result.errors == [
            "Need exactly 4 midfielder(s), have 3",
            "Need exactly 2 forward(s), have 3",
        ]

    def test_two_goalkeepers(self, formation: Formation) -> None:
        result = validate_team_formation(formation, make_lineup(2, 4, 4, 1))

        assert len(result.errors) == 2
        assert "Need exactly 1 goalkeeper(s), have 2" in result.errors

    def test_accepts_players(self) -> None:
        """Anything with a position can be validated."""
        players = [s.player for s in make_lineup(1, 5, 3, 2)]
        result = validate_team_formation(get_formation("5-3-2"), players)

        assert result.valid is True
