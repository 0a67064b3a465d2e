"""
Channel simulators for erasure testing.

Both simulators return the set of erased positions for a codeword of the
given length, ready to hand to ``decode``. Includes a simple burst eraser and
a Gilbert-Elliott two-state channel model.
"""

import random
from typing import Optional, Set


def burst_erasures(
    length: int,
    loss_rate: float = 0.2,
    burst_len: int = 5,
    rng: Optional[random.Random] = None,
) -> Set[int]:
    """Simulate random bursts of erasures over ``length`` positions.

    loss_rate controls how often a burst begins; burst_len controls the
    maximum length of each burst.
    """
    rng = rng or random
    erased = set()
    i = 0
    while i < length:
        if rng.random() < loss_rate:
            drop = rng.randint(1, burst_len)
            erased.update(range(i, min(i + drop, length)))
            i += drop
        else:
            i += 1
    return erased


def gilbert_elliott_erasures(
    length: int,
    p: float = 0.05,
    r: float = 0.25,
    good_loss: float = 0.0,
    bad_loss: float = 0.8,
    start_state: str = "good",
    rng: Optional[random.Random] = None,
) -> Set[int]:
    """Gilbert-Elliott channel eraser.

    - p: Probability to transition Good -> Bad each step
    - r: Probability to transition Bad -> Good each step
    - good_loss: Erasure probability in Good state
    - bad_loss: Erasure probability in Bad state
    - start_state: "good" or "bad"
    """
    rng = rng or random
    state = 0 if start_state.lower().startswith("g") else 1  # 0=good, 1=bad
    erased = set()
    for pos in range(length):
        if state == 0:
            if rng.random() < good_loss:
                erased.add(pos)
            if rng.random() < p:
                state = 1
        else:
            if rng.random() < bad_loss:
                erased.add(pos)
            if rng.random() < r:
                state = 0
    return erased
