"""Voting handler for the day vote.

Rules:
- Every living player in the captured voter order votes once; voters who
  died since the order was captured are skipped
- A voter may vote for any other living player
- Strictly most votes is banished; any tie for the top count, or no votes
  at all, banishes no one
- A banished Hunter's shot is resolved before night falls
"""

import logging
from collections import defaultdict
from typing import Optional

from werewolf_party.ai.vote_policy import choose_vote_target
from werewolf_party.engine.contexts import VoteContext
from werewolf_party.engine.game_state import GameState
from werewolf_party.engine.requests import HumanActionRequest, HumanActionType, seat_options
from werewolf_party.models.player import PlayerState

from .base import SpeakingHandler

logger = logging.getLogger(__name__)

BANISH_CAUSE = "banished by the village vote"


class VotingHandler(SpeakingHandler):
    """Handler for the day vote: one ballot per step, then the tally."""

    handles = (HumanActionType.DAY_VOTE,)

    async def __call__(self, state: GameState) -> None:
        vote = state.vote
        if vote is None:
            state.enter_vote()
            vote = state.vote

        # Votes already counted; only a Hunter's shot was owed
        if vote.tallied:
            state.enter_night()
            return

        voter = self._next_voter(state, vote)
        if voter is None:
            self._tally(state, vote)
            return

        candidates = state.living_except(voter.id)
        if not candidates:
            return

        if voter.is_human:
            self._request(
                HumanActionType.DAY_VOTE,
                voter,
                title="Cast your vote",
                description="Choose who the village should banish today.",
                options=seat_options(candidates),
            )
            return

        target_id = choose_vote_target(voter, [c.id for c in candidates], state.get_player, self._rng)
        vote.votes[voter.id] = target_id
        state.append_log(f"🗳️ {voter.display_name} votes for {state.resolve_name(target_id)}.")

        reasoning = await self._speak(self._speech_context(state, voter, "vote", suggested_target_id=target_id))
        state.append_log(f"🗣️ {voter.display_name}: {reasoning}")

    def apply(
        self,
        state: GameState,
        request: HumanActionRequest,
        choice: Optional[str],
        text: Optional[str],
    ) -> None:
        vote = state.vote
        voter = state.get_player(request.player_id)
        if vote is None or voter is None:
            return
        if choice is None:
            state.append_log(f"🗳️ {voter.display_name} abstains.")
            return

        vote.votes[voter.id] = choice
        state.append_log(f"🗳️ {voter.display_name} votes for {state.resolve_name(choice)}.")
        if text and text.strip():
            state.append_log(f"🎤 {voter.display_name}: {text.strip()}")

    def _next_voter(self, state: GameState, vote: VoteContext) -> Optional[PlayerState]:
        while not vote.exhausted:
            player = state.get_player(vote.voters[vote.index])
            vote.index += 1
            if player is not None and player.is_alive:
                return player
        return None

    # ------------------------------------------------------------------
    # Tally
    # ------------------------------------------------------------------

    def _tally(self, state: GameState, vote: VoteContext) -> None:
        tally = self._count_votes(vote.votes)
        banished = self._determine_banished(tally)
        logger.debug("Day %d tally: %s -> %s", state.day, dict(tally), banished)

        if banished is None:
            tied = self._get_tied_players(tally)
            if tied:
                names = ", ".join(state.resolve_name(player_id) for player_id in tied)
                state.append_log(f"The vote is tied between {names}. No one is banished today.")
            else:
                state.append_log("No votes were cast. No one is banished today.")
        else:
            count = tally[banished]
            state.append_log(
                f"⚖️ {state.resolve_name(banished)} is banished with {count} vote{'s' if count != 1 else ''}."
            )
            state.eliminate(banished, BANISH_CAUSE)

        if state.check_victory() is not None:
            return

        if state.pending_hunters:
            vote.tallied = True
            return

        state.enter_night()

    @staticmethod
    def _count_votes(votes: dict[str, str]) -> dict[str, int]:
        tally: dict[str, int] = defaultdict(int)
        for target in votes.values():
            tally[target] += 1
        return tally

    def _determine_banished(self, tally: dict[str, int]) -> Optional[str]:
        """Determine the player to be banished from vote counts.

        Args:
            tally: Dictionary of target -> vote count

        Returns:
            Banished player id, or None on a tie or no votes
        """
        if not tally:
            return None

        max_votes = max(tally.values())
        tied = [target for target, count in tally.items() if count == max_votes]

        # Tie = no banishment
        if len(tied) > 1:
            return None

        return tied[0]

    def _get_tied_players(self, tally: dict[str, int]) -> list[str]:
        if not tally:
            return []
        max_votes = max(tally.values())
        tied = [target for target, count in tally.items() if count == max_votes]
        return tied if len(tied) > 1 else []
