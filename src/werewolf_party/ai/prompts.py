"""Prompt text for in-character speech."""

from werewolf_party.events import Phase
from werewolf_party.models.player import RoleName

from .context import SpeechContext

SYSTEM_PROMPTS = {
    "en": (
        "You are a dramatic AI actor performing in a live Werewolf social deduction game. "
        "Keep responses short, grounded in the provided context, and fully in character."
    ),
    "zh-Hant": "你是一位投入狼人殺桌遊的 AI 演員。請根據提供的資訊給出簡潔、符合角色設定的回應。",
}

ROLE_OBJECTIVES = {
    "en": {
        RoleName.WEREWOLF: "You are a werewolf. Protect your pack and mislead the villagers without revealing yourself.",
        RoleName.SEER: "You are the Seer. Guide the village with subtle hints drawn from your nightly visions.",
        RoleName.WITCH: "You are the Witch. Balance empathy and caution while hinting at the use of your potions.",
        RoleName.HUNTER: "You are the Hunter. Calmly warn others that rash votes may trigger your final shot.",
        RoleName.VILLAGER: "You are a Villager. Share grounded suspicions and encourage teamwork.",
    },
    "zh-Hant": {
        RoleName.WEREWOLF: "你是狼人，請保護同伴並在不暴露自己的情況下誤導好人。",
        RoleName.SEER: "你是預言家，請巧妙利用夜晚得知的資訊引導大家。",
        RoleName.WITCH: "你是女巫，請在不暴露自己能力的情況下提到解藥與毒藥的抉擇。",
        RoleName.HUNTER: "你是獵人，提醒眾人不要魯莽投票，以免觸發你的反擊。",
        RoleName.VILLAGER: "你是村民，請提出合理懷疑並鼓勵合作。",
    },
}

LOCALE_NAMES = {"en": "English", "zh-Hant": "Traditional Chinese"}

RECENT_EVENT_LIMIT = 6


def get_system_prompt(language: str) -> str:
    return SYSTEM_PROMPTS.get(language, SYSTEM_PROMPTS["en"])


def _vote_clause(context: SpeechContext) -> str:
    english = context.language != "zh-Hant"
    if context.topic != "vote":
        if english:
            return "Keep your tone conversational and immersive as if role-playing at the table."
        return "維持帶入情境的語氣，就像在桌遊現場扮演角色。"

    target_name = context.name_of(context.suggested_target_id)
    if target_name:
        if english:
            return f"You plan to vote for {target_name}. Clearly state this choice and briefly explain why."
        return f"你計畫投給 {target_name}，請明確表態並簡短說明理由。"
    if english:
        return "End your response with a clear statement about who you intend to vote for."
    return "結尾請清楚表態你想投給誰。"


def build_speech_prompt(context: SpeechContext) -> str:
    """Build the user prompt for one speech.

    Only public log entries ever reach the context, so nothing here can leak
    a private night action.

    Args:
        context: The speaker's view of the table.

    Returns:
        Prompt text asking for one or two in-character sentences.
    """
    english = context.language != "zh-Hant"
    locale = LOCALE_NAMES.get(context.language, "English")

    human_tag = "human" if english else "真人"
    separator = ", " if english else "、"
    alive_summary = separator.join(
        f"{p.name} ({human_tag if p.is_human else 'AI'})" for p in context.alive_players
    )

    if context.phase == Phase.DAY_DISCUSSION:
        phase_label = "daytime discussion" if english else "白天討論階段"
    else:
        phase_label = "daytime voting" if english else "白天投票階段"

    events = [entry.message for entry in context.recent_logs][-RECENT_EVENT_LIMIT:]
    if events:
        events_text = "\n".join(events)
    else:
        events_text = "No significant events yet." if english else "目前沒有特別事件。"

    objectives = ROLE_OBJECTIVES.get(context.language, ROLE_OBJECTIVES["en"])

    lines = [
        f"You are role-playing {context.speaker_name} in a social deduction game (Werewolf). "
        f"Respond in {locale}.",
        f"Current phase: Day {context.day} - {phase_label}.",
        f"Your role card: {context.speaker_role.value} ({context.speaker_alignment.value}).",
        objectives.get(context.speaker_role, ""),
        f"Alive players: {alive_summary}.",
        "Recent public events:",
        events_text,
        _vote_clause(context),
        "Speak in 1-2 concise sentences.",
    ]
    return "\n".join(lines)
