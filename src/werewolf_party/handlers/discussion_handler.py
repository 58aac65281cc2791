"""Discussion handler - one speaker per step, in seat order.

The speaker order is captured when the discussion opens and is not
re-checked afterwards, so a player who dies mid-discussion keeps their turn.
"""

from typing import Optional

from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import HumanActionRequest, HumanActionType, TextInputSpec

from .base import SpeakingHandler


class DiscussionHandler(SpeakingHandler):
    """Handler for the day discussion."""

    handles = (HumanActionType.DAY_SPEECH,)

    async def __call__(self, state: GameState) -> None:
        discussion = state.discussion
        if discussion is None:
            state.enter_discussion()
            discussion = state.discussion

        speaker_id = discussion.next_speaker()
        if speaker_id is None:
            state.enter_vote()
            return

        speaker = state.get_player(speaker_id)
        if speaker is None:
            return

        if speaker.is_human:
            self._request(
                HumanActionType.DAY_SPEECH,
                speaker,
                title="Your turn to speak",
                description="Share your thoughts with the village.",
                extra_input=TextInputSpec(placeholder="Say something to the village...", multiline=True),
            )
            return

        text = await self._speak(self._speech_context(state, speaker, "discussion"))
        state.append_log(f"🎭 {speaker.display_name}: {text}")

    def apply(
        self,
        state: GameState,
        request: HumanActionRequest,
        choice: Optional[str],
        text: Optional[str],
    ) -> None:
        speaker = state.get_player(request.player_id)
        if speaker is None:
            return
        if text and text.strip():
            state.append_log(f"🎤 {speaker.display_name}: {text.strip()}")
        else:
            state.append_log(f"🎤 {speaker.display_name} stays silent.")
