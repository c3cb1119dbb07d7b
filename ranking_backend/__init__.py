"""Dynamic ranking leaderboard backend."""
