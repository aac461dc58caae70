import pytest
from datetime import datetime
from httpx import AsyncClient
from sqlalchemy import text

from app.models import MatchStatus


SCOPE = {"season_id": 1, "sport_id": 1, "sport_category_id": 1}


@pytest.mark.asyncio
class TestStandingsAPI:
    """Tests for /api/v1/standings."""

    async def test_missing_filters(self, client: AsyncClient):
        response = await client.get("/api/v1/standings", params={"season_id": 1})
        assert response.status_code == 400
        assert response.json()["detail"] == "Season, sport, and category are required for standings."

    async def test_missing_filters_localized(self, client: AsyncClient):
        response = await client.get("/api/v1/standings", params={"sport_id": 1, "lang": "fil"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Kailangan ang season, sport, at category para sa standings."

    async def test_non_positive_ids_rejected(self, client: AsyncClient):
        response = await client.get("/api/v1/standings", params={**SCOPE, "season_id": 0})
        assert response.status_code == 422

    async def test_no_stages_for_category(self, client: AsyncClient, sample_stages):
        response = await client.get(
            "/api/v1/standings", params={**SCOPE, "sport_category_id": 2}
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "No stages found for the specified filters."

    async def test_category_of_other_sport(self, client: AsyncClient, sample_stages):
        response = await client.get("/api/v1/standings", params={**SCOPE, "sport_id": 2})
        assert response.status_code == 404

    async def test_defaults_to_first_stage(self, client: AsyncClient, round_robin):
        response = await client.get("/api/v1/standings", params=SCOPE)
        assert response.status_code == 200
        data = response.json()

        assert [s["id"] for s in data["navigation"]["stages"]] == [11, 12, 10]
        standings = data["standings"]
        assert standings["stage_id"] == 11
        assert standings["competition_stage"] == "group_stage"
        assert len(standings["groups"]) == 1
        assert standings["groups"][0]["group_name"] is None

    async def test_group_table_ignores_unfinished_matches(
        self, client: AsyncClient, sample_teams, round_robin
    ):
        response = await client.get("/api/v1/standings", params=SCOPE)
        teams = response.json()["standings"]["groups"][0]["teams"]

        assert [t["school_abbreviation"] for t in teams] == ["USC", "UC", "CIT"]
        assert [t["position"] for t in teams] == [1, 2, 3]

        usc, uc, cit = teams
        assert usc["team_id"] == str(sample_teams["USC"].id)
        assert usc["team_name"] == "USC Warriors"
        assert usc["school_name"] == "University of San Carlos"
        assert usc["school_logo_url"] == "https://cdn.test/usc.png"
        assert (usc["points"], usc["wins"], usc["draws"], usc["losses"]) == (4, 1, 1, 0)
        assert (usc["goals_for"], usc["goals_against"], usc["goal_difference"]) == (3, 2, 1)
        assert usc["matches_played"] == 2

        assert (uc["points"], uc["wins"], uc["losses"]) == (3, 1, 1)
        assert (uc["goals_for"], uc["goals_against"], uc["goal_difference"]) == (2, 2, 0)
        assert uc["school_logo_url"] is None

        assert (cit["points"], cit["draws"], cit["losses"]) == (1, 1, 1)
        assert (cit["goals_for"], cit["goals_against"], cit["goal_difference"]) == (1, 2, -1)

    async def test_explicit_bracket_stage(
        self, client: AsyncClient, sample_teams, sample_stages, add_match
    ):
        playoffs = sample_stages["playoffs"]
        await add_match(
            playoffs, [(sample_teams["USC"], 80), (sample_teams["UC"], 72)],
            scheduled_at=datetime(2024, 10, 1, 13), name="Semifinal 1",
        )
        await add_match(
            playoffs, [(sample_teams["CIT"], None), (sample_teams["SWU"], None)],
            status=MatchStatus.upcoming, scheduled_at=datetime(2024, 10, 2, 13), name="Semifinal 2",
        )
        await add_match(playoffs, [], status=MatchStatus.upcoming, name="Championship")

        response = await client.get("/api/v1/standings", params={**SCOPE, "stage_id": 12})
        assert response.status_code == 200
        standings = response.json()["standings"]

        assert standings["stage_id"] == 12
        assert standings["competition_stage"] == "playoffs"
        bracket = standings["bracket"]
        assert [m["match_name"] for m in bracket] == ["Semifinal 1", "Semifinal 2", "Championship"]
        assert [m["round"] for m in bracket] == [1, 1, 2]
        assert [m["position"] for m in bracket] == [0, 1, 2]

        first, second, final = bracket
        assert first["team1"]["school_abbreviation"] == "USC"
        assert first["team1"]["score"] == 80
        assert first["team2"]["score"] == 72
        assert first["winner"]["team_id"] == str(sample_teams["USC"].id)
        assert first["match_status"] == "finished"
        assert first["venue"] == "Cebu Coliseum"

        assert second["team1"]["score"] is None
        assert second["winner"] is None
        assert second["match_status"] == "upcoming"

        assert final["team1"] is None
        assert final["team2"] is None
        assert final["winner"] is None
        assert final["scheduled_at"] is None

    async def test_finished_level_bracket_match_has_no_winner(
        self, client: AsyncClient, sample_teams, sample_stages, add_match
    ):
        await add_match(sample_stages["finals"], [(sample_teams["USC"], 2), (sample_teams["UC"], 2)])

        response = await client.get("/api/v1/standings", params={**SCOPE, "stage_id": 10})
        [match] = response.json()["standings"]["bracket"]
        assert match["match_status"] == "finished"
        assert match["winner"] is None

    async def test_stage_without_matches(self, client: AsyncClient, sample_stages):
        response = await client.get("/api/v1/standings", params={**SCOPE, "stage_id": 10})
        assert response.status_code == 200
        assert response.json()["standings"]["bracket"] == []

        response = await client.get("/api/v1/standings", params=SCOPE)
        assert response.json()["standings"]["groups"][0]["teams"] == []

    async def test_stage_outside_scope(self, client: AsyncClient, sample_stages):
        response = await client.get("/api/v1/standings", params={**SCOPE, "stage_id": 999})
        assert response.status_code == 404
        assert response.json()["detail"] == "Invalid stage ID provided."

    async def test_repeated_requests_are_identical(self, client: AsyncClient, round_robin):
        first = await client.get("/api/v1/standings", params=SCOPE)
        second = await client.get("/api/v1/standings", params=SCOPE)
        assert first.json() == second.json()


@pytest.mark.asyncio
class TestStandingsNavigationAPI:
    """Tests for /api/v1/standings/navigation."""

    async def test_navigation(self, client: AsyncClient, sample_stages):
        response = await client.get("/api/v1/standings/navigation", params=SCOPE)
        assert response.status_code == 200
        data = response.json()

        assert data["season"]["id"] == 1
        assert data["season"]["name"] == "2024-2025"
        assert data["sport"] == {"id": 1, "name": "Basketball"}
        assert data["category"]["division"] == "men"
        assert data["category"]["levels"] == "college"
        assert data["category"]["display_name"] == "Men's College"
        assert data["stages"] == [
            {"id": 11, "name": "Elimination Round", "competition_stage": "group_stage", "order": 1},
            {"id": 12, "name": "Playoffs", "competition_stage": "playoffs", "order": 2},
            {"id": 10, "name": "Finals", "competition_stage": "finals", "order": 3},
        ]

    async def test_navigation_missing_filters(self, client: AsyncClient):
        response = await client.get("/api/v1/standings/navigation", params={"season_id": 1})
        assert response.status_code == 400

    async def test_navigation_no_stages(self, client: AsyncClient, sample_season, sample_sport):
        response = await client.get("/api/v1/standings/navigation", params=SCOPE)
        assert response.status_code == 404


@pytest.mark.asyncio
class TestStageStandingsAPI:
    """Tests for /api/v1/standings/stages/{stage_id}/..."""

    async def test_group_stage(self, client: AsyncClient, round_robin):
        response = await client.get("/api/v1/standings/stages/11/group")
        assert response.status_code == 200
        data = response.json()
        assert data["stage_name"] == "Elimination Round"
        teams = data["groups"][0]["teams"]
        assert [t["school_abbreviation"] for t in teams] == ["USC", "UC", "CIT"]

    async def test_group_stage_unknown(self, client: AsyncClient):
        response = await client.get("/api/v1/standings/stages/999/group")
        assert response.status_code == 404
        assert response.json()["detail"] == "Invalid stage ID provided."

    async def test_bracket_includes_all_statuses(self, client: AsyncClient, round_robin):
        response = await client.get("/api/v1/standings/stages/11/bracket")
        assert response.status_code == 200
        bracket = response.json()["bracket"]
        assert len(bracket) == 4
        assert bracket[-1]["match_status"] == "upcoming"
        assert [m["round"] for m in bracket] == [1, 1, 2, 2]

    async def test_bracket_unknown(self, client: AsyncClient):
        response = await client.get("/api/v1/standings/stages/999/bracket")
        assert response.status_code == 404


@pytest.mark.asyncio
class TestStandingsOptionsAPI:
    """Tests for the season/sport/category selector endpoints."""

    async def test_seasons_empty(self, client: AsyncClient):
        response = await client.get("/api/v1/standings/seasons")
        assert response.status_code == 200
        assert response.json() == {"items": [], "total": 0}

    async def test_seasons(self, client: AsyncClient, sample_season):
        response = await client.get("/api/v1/standings/seasons")
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["id"] == 1
        assert data["items"][0]["name"] == "2024-2025"

    async def test_sports(self, client: AsyncClient, sample_stages):
        response = await client.get("/api/v1/standings/seasons/1/sports")
        assert response.status_code == 200
        assert response.json() == {"items": [{"id": 1, "name": "Basketball"}], "total": 1}

    async def test_sports_without_stages(self, client: AsyncClient, sample_season):
        response = await client.get("/api/v1/standings/seasons/1/sports")
        assert response.json() == {"items": [], "total": 0}

    async def test_sports_unknown_season(self, client: AsyncClient):
        response = await client.get("/api/v1/standings/seasons/99/sports")
        assert response.status_code == 404
        assert response.json()["detail"] == "Season not found"

    async def test_categories(self, client: AsyncClient, sample_stages):
        response = await client.get("/api/v1/standings/seasons/1/sports/1/categories")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["id"] == 1
        assert data["items"][0]["display_name"] == "Men's College"

    async def test_categories_unknown_season(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/standings/seasons/99/sports/1/categories", params={"lang": "fil"}
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Hindi nahanap ang season"


async def _store_stage_tag(session, stage_id: int, tag: str):
    """Write a raw competition_stage value and drop cached ORM state."""
    await session.execute(
        text("UPDATE sports_seasons_stages SET competition_stage = :tag WHERE id = :id"),
        {"tag": tag, "id": stage_id},
    )
    await session.commit()
    session.expunge_all()


async def _drop_tables(session, *tables: str):
    for table in tables:
        await session.execute(text(f"DROP TABLE {table}"))
    await session.commit()
    session.expunge_all()


@pytest.mark.asyncio
class TestStandingsFailuresAPI:
    """Stored-data and database failures come back as error responses."""

    async def test_unrecognized_stage_tag(self, client: AsyncClient, test_session, round_robin):
        await _store_stage_tag(test_session, 11, "exhibition")

        response = await client.get("/api/v1/standings", params=SCOPE)
        assert response.status_code == 500
        assert response.json()["detail"] == "Unrecognized competition stage."

    async def test_unrecognized_stage_tag_on_navigation(
        self, client: AsyncClient, test_session, sample_stages
    ):
        await _store_stage_tag(test_session, 10, "exhibition")

        response = await client.get("/api/v1/standings/navigation", params=SCOPE)
        assert response.status_code == 500
        assert response.json()["detail"] == "Unrecognized competition stage."

    @pytest.mark.parametrize("view", ["group", "bracket"])
    async def test_unrecognized_stage_tag_on_stage_views(
        self, client: AsyncClient, test_session, round_robin, view
    ):
        await _store_stage_tag(test_session, 11, "exhibition")

        response = await client.get(f"/api/v1/standings/stages/11/{view}")
        assert response.status_code == 500
        assert response.json()["detail"] == "Unrecognized competition stage."

    async def test_selector_options_ignore_stage_tags(
        self, client: AsyncClient, test_session, sample_stages
    ):
        await _store_stage_tag(test_session, 11, "exhibition")

        response = await client.get("/api/v1/standings/seasons/1/sports/1/categories")
        assert response.status_code == 200
        assert response.json()["total"] == 1

    async def test_database_error_on_standings(
        self, client: AsyncClient, test_session, round_robin
    ):
        await _drop_tables(test_session, "game_scores", "match_participants")

        response = await client.get("/api/v1/standings", params=SCOPE)
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to retrieve standings data."

    async def test_database_error_on_group_stage(
        self, client: AsyncClient, test_session, round_robin
    ):
        await _drop_tables(test_session, "game_scores", "match_participants")

        response = await client.get("/api/v1/standings/stages/11/group", params={"lang": "fil"})
        assert response.status_code == 500
        assert response.json()["detail"] == "Hindi makuha ang datos ng standings."

    async def test_database_error_on_navigation(
        self, client: AsyncClient, test_session, sample_stages
    ):
        await _drop_tables(test_session, "sports_seasons_stages")

        response = await client.get("/api/v1/standings/navigation", params=SCOPE)
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to retrieve standings data."

    async def test_database_error_on_selector_options(
        self, client: AsyncClient, test_session, sample_stages
    ):
        await _drop_tables(test_session, "sports_seasons_stages")

        response = await client.get("/api/v1/standings/seasons/1/sports")
        assert response.status_code == 500


@pytest.mark.asyncio
class TestPathValidationAPI:
    """Non-positive path ids are rejected before reaching the services."""

    @pytest.mark.parametrize("path", [
        "/api/v1/standings/stages/0/group",
        "/api/v1/standings/stages/-1/bracket",
        "/api/v1/standings/seasons/0/sports",
        "/api/v1/standings/seasons/1/sports/0/categories",
    ])
    async def test_non_positive_path_ids(self, client: AsyncClient, path):
        response = await client.get(path)
        assert response.status_code == 422
