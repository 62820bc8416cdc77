from roster.models.player import Player
from roster.models.player_statistic import PlayerStatistic
from roster.models.team_player import TeamPlayer

__all__ = [
    "Player",
    "TeamPlayer",
    "PlayerStatistic",
]
