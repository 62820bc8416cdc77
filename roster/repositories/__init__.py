from roster.repositories.player_repository import PlayerRepository
from roster.repositories.player_statistic_repository import PlayerStatisticRepository
from roster.repositories.team_player_repository import TeamPlayerRepository

__all__ = [
    "PlayerRepository",
    "TeamPlayerRepository",
    "PlayerStatisticRepository",
]
