"""Player and Role models."""

from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field

from werewolf_party.models.base import WireModel


class RoleName(str, Enum):
    """Player roles in the game."""

    WEREWOLF = "Werewolf"
    SEER = "Seer"
    WITCH = "Witch"
    HUNTER = "Hunter"
    VILLAGER = "Villager"


class Alignment(str, Enum):
    """Teams for victory conditions."""

    GOOD = "Good"
    WEREWOLF = "Werewolf"


class RoleCapabilities(WireModel):
    """What a role is able to do, independent of its name.

    Resolvers look roles up by capability so that adding a role never means
    hunting for string comparisons.
    """

    model_config = ConfigDict(frozen=True)

    has_night_action: bool = False
    has_vision: bool = False  # learns alignments at night
    has_heal: bool = False
    has_poison: bool = False
    has_revenge_shot: bool = False


class RoleDefinition(WireModel):
    """Immutable catalogue entry for a role, shared by every player holding it."""

    model_config = ConfigDict(frozen=True)

    name: RoleName
    alignment: Alignment
    description: str = ""
    capabilities: RoleCapabilities = Field(default_factory=RoleCapabilities)


ROLE_LIBRARY: dict[RoleName, RoleDefinition] = {
    RoleName.WEREWOLF: RoleDefinition(
        name=RoleName.WEREWOLF,
        alignment=Alignment.WEREWOLF,
        description="Chooses a victim each night. Wins once the wolves match the village.",
        capabilities=RoleCapabilities(has_night_action=True),
    ),
    RoleName.SEER: RoleDefinition(
        name=RoleName.SEER,
        alignment=Alignment.GOOD,
        description="Learns the alignment of one player each night.",
        capabilities=RoleCapabilities(has_night_action=True, has_vision=True),
    ),
    RoleName.WITCH: RoleDefinition(
        name=RoleName.WITCH,
        alignment=Alignment.GOOD,
        description="Holds one healing potion and one poison, each usable once.",
        capabilities=RoleCapabilities(has_night_action=True, has_heal=True, has_poison=True),
    ),
    RoleName.HUNTER: RoleDefinition(
        name=RoleName.HUNTER,
        alignment=Alignment.GOOD,
        description="When eliminated, may take one other player down with a final shot.",
        capabilities=RoleCapabilities(has_revenge_shot=True),
    ),
    RoleName.VILLAGER: RoleDefinition(
        name=RoleName.VILLAGER,
        alignment=Alignment.GOOD,
        description="No special ability; finds the wolves through discussion and votes.",
    ),
}


# Role bags per player count, in catalogue order (shuffled at game start)
ROLE_BAGS: dict[int, list[RoleName]] = {
    6: [
        RoleName.WEREWOLF, RoleName.WEREWOLF,
        RoleName.SEER, RoleName.WITCH,
        RoleName.VILLAGER, RoleName.VILLAGER,
    ],
    7: [
        RoleName.WEREWOLF, RoleName.WEREWOLF,
        RoleName.SEER, RoleName.WITCH, RoleName.HUNTER,
        RoleName.VILLAGER, RoleName.VILLAGER,
    ],
    8: [
        RoleName.WEREWOLF, RoleName.WEREWOLF, RoleName.WEREWOLF,
        RoleName.SEER, RoleName.WITCH, RoleName.HUNTER,
        RoleName.VILLAGER, RoleName.VILLAGER,
    ],
}

DEFAULT_BAG_SIZE = 6


def role_bag(total_players: int, allow_hunter: bool = True) -> list[RoleName]:
    """Get the role bag for a player count.

    Args:
        total_players: Configured number of players.
        allow_hunter: When False, every Hunter is replaced by a Villager.

    Returns:
        A fresh list of role names. Unknown player counts get the
        6-player bag.
    """
    bag = list(ROLE_BAGS.get(total_players, ROLE_BAGS[DEFAULT_BAG_SIZE]))
    if not allow_hunter:
        bag = [RoleName.VILLAGER if role == RoleName.HUNTER else role for role in bag]
    return bag


class PlayerNotes(WireModel):
    """Role-specific working memory carried by a player.

    Potions only ever go from available to spent, never back.
    """

    heal_available: bool = False
    poison_available: bool = False
    seer_results: dict[str, Alignment] = Field(default_factory=dict)  # target id -> alignment


class PlayerState(WireModel):
    """Represents a player in the game.

    Uses the seat id ("1".."N") as the stable identifier. Only ``is_alive``
    and ``notes`` change after the roster is built.
    """

    id: str
    display_name: str
    role: RoleDefinition
    is_alive: bool = True
    is_human: bool = False
    notes: PlayerNotes = Field(default_factory=PlayerNotes)

    @property
    def alignment(self) -> Alignment:
        return self.role.alignment

    @property
    def capabilities(self) -> RoleCapabilities:
        return self.role.capabilities

    def kill(self) -> bool:
        """Mark the player dead.

        Returns:
            True if the player was alive before the call.
        """
        if not self.is_alive:
            return False
        self.is_alive = False
        return True

    def use_heal(self) -> None:
        self.notes.heal_available = False

    def use_poison(self) -> None:
        self.notes.poison_available = False

    def record_seer_result(self, target_id: str, alignment: Alignment) -> None:
        self.notes.seer_results[target_id] = alignment

    def seer_result(self, target_id: str) -> Optional[Alignment]:
        return self.notes.seer_results.get(target_id)
