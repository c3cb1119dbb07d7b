"""
Tests for leaderboard ranking.
"""

from ranking_backend.models import User
from ranking_backend.services.ranking import compute_rankings, rank_users, ranked_user_to_dict


def _users(*points):
    return [
        User(id=index + 1, username=f"user{index}", points=value)
        for index, value in enumerate(points)
    ]


class TestRankUsers:
    """Tests for the pure rank_users function."""

    def test_empty(self):
        assert rank_users([]) == []

    def test_distinct_scores_use_positions(self):
        ranked = rank_users(_users(90, 70, 40, 10))
        assert [user.rank for user in ranked] == [1, 2, 3, 4]

    def test_tie_at_top_skips_next_rank(self):
        ranked = rank_users(_users(50, 50, 40))
        assert [user.rank for user in ranked] == [1, 1, 3]

    def test_tie_in_middle(self):
        ranked = rank_users(_users(80, 60, 60, 60, 20))
        assert [user.rank for user in ranked] == [1, 2, 2, 2, 5]

    def test_all_zero(self):
        ranked = rank_users(_users(0, 0, 0))
        assert [user.rank for user in ranked] == [1, 1, 1]

    def test_keeps_user_fields(self):
        (ranked,) = rank_users(_users(12))
        assert (ranked.id, ranked.username, ranked.points) == (1, "user0", 12)


class TestComputeRankings:
    """Tests for compute_rankings against the database."""

    def test_sorted_by_points_descending(self, make_user, session):
        make_user("low", 5)
        make_user("high", 30)
        make_user("mid", 10)

        ranked = compute_rankings(session)

        assert [user.username for user in ranked] == ["high", "mid", "low"]
        assert [user.rank for user in ranked] == [1, 2, 3]

    def test_ties_share_rank(self, make_user, session):
        make_user("a", 50)
        make_user("b", 50)
        make_user("c", 40)

        ranked = compute_rankings(session)

        assert {user.username for user in ranked[:2]} == {"a", "b"}
        assert [user.rank for user in ranked] == [1, 1, 3]

    def test_no_users(self, session):
        assert compute_rankings(session) == []

    def test_serialised_shape(self, make_user, session):
        make_user("solo", 3)
        payload = ranked_user_to_dict(compute_rankings(session)[0])
        assert payload["username"] == "solo"
        assert payload["rank"] == 1
        assert payload["createdAt"].endswith("Z")
