"""
Referral reward table.

Level 1 recruits pay by position (oldest first), with a milestone bonus on
every 50th recruit. Level 2 recruits pay a flat amount each.
"""

from dataclasses import dataclass
from typing import List

MILESTONE_EVERY = 50


@dataclass(frozen=True)
class Reward:
    syp: int
    usd: int

    def __add__(self, other: "Reward") -> "Reward":
        return Reward(self.syp + other.syp, self.usd + other.usd)


NO_REWARD = Reward(0, 0)

# Index 1..6; every index past the table pays the last entry
LEVEL_ONE_REWARDS: List[Reward] = [
    Reward(500_000, 50),
    Reward(600_000, 60),
    Reward(700_000, 70),
    Reward(800_000, 80),
    Reward(900_000, 90),
    Reward(1_000_000, 100),
]
MILESTONE_BONUS = Reward(2_500_000, 2_500)
LEVEL_TWO_REWARD = Reward(100_000, 10)


def level_one_reward(index: int) -> Reward:
    """Reward for the index-th direct recruit (1-based, oldest first)."""
    if index < 1:
        return NO_REWARD
    position = min(index, len(LEVEL_ONE_REWARDS))
    return LEVEL_ONE_REWARDS[position - 1]


def level_one_total(count: int) -> Reward:
    total = NO_REWARD
    for index in range(1, count + 1):
        total = total + level_one_reward(index)
        if index % MILESTONE_EVERY == 0:
            total = total + MILESTONE_BONUS
    return total


def level_two_total(count: int) -> Reward:
    return Reward(LEVEL_TWO_REWARD.syp * count, LEVEL_TWO_REWARD.usd * count)
