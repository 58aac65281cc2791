"""Human action requests and the broker that tracks the pending one.

When a resolver needs a human decision it asks the broker to issue a
request. The engine then refuses to advance until a submission carrying the
same ``request_id`` arrives. Anything else is ignored, so duplicate or stale
submissions are harmless.
"""

from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field

from werewolf_party.models.base import WireModel
from werewolf_party.models.player import PlayerState, RoleName
from werewolf_party.rng import IdFactory

SKIP_OPTION_ID = "skip"


class HumanActionType(str, Enum):
    """Kinds of decisions a human can be asked for."""

    WEREWOLF_TARGET = "werewolf-target"
    SEER_CHECK = "seer-check"
    WITCH_HEAL = "witch-heal"
    WITCH_POISON = "witch-poison"
    DAY_SPEECH = "day-speech"
    DAY_VOTE = "day-vote"
    HUNTER_SHOOT = "hunter-shoot"


class HumanActionOption(WireModel):
    """One selectable option."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    disabled: bool = False


class TextInputSpec(WireModel):
    """Free-text input requested alongside (or instead of) options."""

    model_config = ConfigDict(frozen=True)

    placeholder: str
    multiline: bool = False


class HumanActionRequest(WireModel):
    """A decision the engine is blocked on."""

    model_config = ConfigDict(frozen=True)

    request_id: str
    player_id: str
    role: RoleName  # for labeling only
    type: HumanActionType
    title: str
    description: str
    options: list[HumanActionOption] = Field(default_factory=list)
    extra_input: Optional[TextInputSpec] = None

    def get_option(self, option_id: str) -> Optional[HumanActionOption]:
        for option in self.options:
            if option.id == option_id:
                return option
        return None


class HumanActionSubmission(WireModel):
    """A human's answer to a request."""

    request_id: str
    chosen_option_id: Optional[str] = None
    text: Optional[str] = None


def seat_options(players: list[PlayerState]) -> list[HumanActionOption]:
    """Build one option per player, labeled with the display name."""
    return [HumanActionOption(id=player.id, label=player.display_name) for player in players]


def skip_option(label: str) -> HumanActionOption:
    return HumanActionOption(id=SKIP_OPTION_ID, label=label)


class HumanActionBroker:
    """Holds at most one pending request and matches submissions to it."""

    def __init__(self) -> None:
        self._pending: Optional[HumanActionRequest] = None
        self._next_id = IdFactory("req")

    @property
    def pending(self) -> Optional[HumanActionRequest]:
        return self._pending

    def issue(
        self,
        action_type: HumanActionType,
        player: PlayerState,
        title: str,
        description: str,
        options: Optional[list[HumanActionOption]] = None,
        extra_input: Optional[TextInputSpec] = None,
    ) -> HumanActionRequest:
        """Create a request for a player and make it the pending one.

        Raises:
            RuntimeError: If another request is still pending. Resolvers never
                run while one is, so this only fires on an engine bug.
        """
        if self._pending is not None:
            raise RuntimeError(
                f"Request {self._pending.request_id} is still pending; cannot issue {action_type.value}"
            )
        request = HumanActionRequest(
            request_id=self._next_id(),
            player_id=player.id,
            role=player.role.name,
            type=action_type,
            title=title,
            description=description,
            options=options or [],
            extra_input=extra_input,
        )
        self._pending = request
        return request

    def accept(self, submission: HumanActionSubmission) -> Optional[HumanActionRequest]:
        """Match a submission against the pending request.

        Returns:
            The request that was answered (and is no longer pending), or None
            if nothing is pending or the request id does not match.
        """
        if self._pending is None or self._pending.request_id != submission.request_id:
            return None
        request = self._pending
        self._pending = None
        return request

    def clear(self) -> None:
        self._pending = None

    @staticmethod
    def resolve_choice(request: HumanActionRequest, chosen_option_id: Optional[str]) -> Optional[str]:
        """The chosen option id if it names an enabled option, else None."""
        if chosen_option_id is None:
            return None
        option = request.get_option(chosen_option_id)
        if option is None or option.disabled:
            return None
        return option.id
