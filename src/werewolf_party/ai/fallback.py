"""Canned lines used when the speech provider cannot answer."""

import random

from werewolf_party.models.config import Language
from werewolf_party.models.player import RoleName
from werewolf_party.rng import pick

FALLBACK_LINES: dict[str, dict[RoleName, list[str]]] = {
    "en": {
        RoleName.WEREWOLF: [
            "Let's not rush to conclusions. The real wolf is hiding at the edge of this conversation.",
            "Last night was too strange. Everyone keep a close eye on each other.",
        ],
        RoleName.SEER: [
            "I have noticed a few small tells. Watch the people who keep dodging questions.",
            "My instincts from last night make me uneasy about some of you. I'll keep watching.",
        ],
        RoleName.WITCH: [
            "Someone is deliberately steering our attention. Don't trust the surface.",
            "I'm still weighing my options. Let's not turn on each other too quickly.",
        ],
        RoleName.HUNTER: [
            "Don't vote recklessly. If anyone comes after me, I won't go down alone.",
            "Stay calm. The wolves fear nothing more than a united village.",
        ],
        RoleName.VILLAGER: [
            "Listen to the details when people talk. Someone sounds nervous.",
            "I'll keep observing. I hope we find the real werewolf together.",
        ],
    },
    "zh-Hant": {
        RoleName.WEREWOLF: [
            "先別急著下結論，我覺得真正的狼人正躲在話題邊緣。",
            "今晚太詭異了，大家互相盯緊一點，別讓狼人得逞。",
        ],
        RoleName.SEER: [
            "我觀察到一些蛛絲馬跡，建議大家留意那些回答閃避的人。",
            "昨晚的直覺讓我不太放心某些玩家，稍後我會再觀察。",
        ],
        RoleName.WITCH: [
            "女巫的直覺告訴我，有人刻意轉移視線，別太快相信表面。",
            "我還在衡量該不該使用藥水，大家別急著互相猜忌。",
        ],
        RoleName.HUNTER: [
            "先別亂投，我會冷靜判斷，若有人攻擊我，我的子彈不會放過他。",
            "保持冷靜，真正的狼人最怕我們團結。",
        ],
        RoleName.VILLAGER: [
            "大家說話時多注意細節，我總覺得有人心虛。",
            "我會繼續觀察，希望我們能找出真正的狼人。",
        ],
    },
}


def fallback_speech(role: RoleName, language: Language, rng: random.Random) -> str:
    """Pick a canned line for a role, falling back to the Villager lines."""
    lines_by_role = FALLBACK_LINES.get(language, FALLBACK_LINES["en"])
    lines = lines_by_role.get(role) or lines_by_role[RoleName.VILLAGER]
    return pick(lines, rng)
