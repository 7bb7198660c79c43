"""Game setup and presentation views."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from static_decay.core.rng import RNG
from static_decay.core.types import GameOutcome
from static_decay.data.repositories import ZonesRepository
from static_decay.domain.entities import STAT_MAX
from static_decay.domain.state import GameState
from static_decay.services.factories import create_player, create_zone, first_zone_id

LEGIBLE_SANITY = 30
DEFAULT_LOG_LINES = 5
PLAYER_SYMBOL = "@"
UNSEEN_SYMBOL = " "


@dataclass(slots=True)
class PlayerStatsView:
    hp: int
    hunger: int
    sanity: int
    maximum: int
    equipped_weapon: str | None


@dataclass(slots=True)
class GameView:
    """Everything the presentation layer needs to draw one screen."""

    zone_name: str
    stats: PlayerStatsView
    map_rows: List[str]
    messages: List[str]
    legible: bool
    turn: int
    outcome: GameOutcome | None


class GameService:
    """Creates new games and builds the view data the CLI renders."""

    def __init__(self, zones_repo: ZonesRepository) -> None:
        self._zones_repo = zones_repo

    def start_new_game(self, seed: int) -> GameState:
        """Create a fresh game state with the player at the first zone's spawn."""
        zone_def = self._zones_repo.get(first_zone_id(self._zones_repo))
        player = create_player(zone_def)
        state = GameState(seed=seed, rng=RNG(seed), player=player, zone=create_zone(zone_def))
        state.zone.reveal_around(player.x, player.y)
        state.log(zone_def.entry_text)
        return state

    def build_view(self, state: GameState, log_lines: int = DEFAULT_LOG_LINES) -> GameView:
        player = state.player
        return GameView(
            zone_name=state.zone.name,
            stats=PlayerStatsView(
                hp=player.hp,
                hunger=player.hunger,
                sanity=player.sanity,
                maximum=STAT_MAX,
                equipped_weapon=player.equipped_weapon,
            ),
            map_rows=self.build_map_rows(state),
            messages=state.recent_messages(log_lines),
            legible=is_legible(state),
            turn=state.turn,
            outcome=state.outcome,
        )

    @staticmethod
    def build_map_rows(state: GameState) -> List[str]:
        """Render visited tiles, visible creatures and the player; unseen cells stay blank."""
        zone = state.zone
        player = state.player
        rows: List[str] = []
        for y in range(zone.height):
            cells: List[str] = []
            for x in range(zone.width):
                if (x, y) == player.position:
                    cells.append(PLAYER_SYMBOL)
                    continue
                if not zone.is_visited(x, y):
                    cells.append(UNSEEN_SYMBOL)
                    continue
                creature = zone.creature_at(x, y)
                cells.append(creature.map_symbol if creature is not None else zone.get_tile(x, y))
            rows.append("".join(cells))
        return rows


def is_legible(state: GameState) -> bool:
    """Low sanity makes the map unreliable; the CLI distorts it when this is False."""
    return state.player.sanity >= LEGIBLE_SANITY
