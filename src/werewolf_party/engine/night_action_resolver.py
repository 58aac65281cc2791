"""Night action resolution - computes the night's casualties."""

from werewolf_party.engine.contexts import NightContext

WEREWOLF_ATTACK = "werewolf attack"
WITCH_POISON = "witch's poison"


class NightActionResolver:
    """Computes who dies from tonight's accumulated actions.

    Resolution order:
    1. Werewolf kill (saved if healed)
    2. Poison (kills regardless of the heal)

    A player saved from the wolves can still be poisoned the same night,
    including by the Witch who healed them.
    """

    def resolve(self, night: NightContext) -> list[tuple[str, str]]:
        """Compute deaths from the night context.

        Args:
            night: Tonight's context with werewolf, heal and poison targets.

        Returns:
            (player_id, cause) pairs in the order they should be applied.
        """
        deaths: list[tuple[str, str]] = []

        if night.werewolf_target is not None and night.werewolf_target != night.healed_target:
            deaths.append((night.werewolf_target, WEREWOLF_ATTACK))

        if night.poisoned_target is not None:
            deaths.append((night.poisoned_target, WITCH_POISON))

        return deaths
