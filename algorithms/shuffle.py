"""
Seeded Shuffle - Deterministic ordering for donor search results
Same seed always produces the same order, a different seed gives a
different order. The seed travels with each request so "refresh" needs no
server-side state.
"""

# LCG parameters (Numerical Recipes constants). Changing them changes every
# reproducible ordering.
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32


def lcg_sequence(seed):
    """
    Yield successive states of the linear congruential generator

    Args:
        seed: Any integer; reduced into [0, 2^32) before the first step

    Yields:
        int: s_{i+1} = (a * s_i + c) mod m
    """
    state = seed % LCG_MODULUS
    while True:
        state = (LCG_MULTIPLIER * state + LCG_INCREMENT) % LCG_MODULUS
        yield state


def seeded_shuffle(items, seed):
    """
    Fisher-Yates shuffle driven by the seeded LCG

    Args:
        items: Any iterable (not modified)
        seed: Integer seed

    Returns:
        New list with the items in shuffled order
    """
    shuffled = list(items)
    states = lcg_sequence(seed)

    for i in range(len(shuffled) - 1, 0, -1):
        # floor((s / m) * (i + 1)) in exact integer arithmetic
        j = (next(states) * (i + 1)) // LCG_MODULUS
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return shuffled


def rank_candidates(candidates, seed, limit):
    """
    Shuffle an oversized candidate batch and keep the first `limit` entries

    Fewer candidates than `limit` are all returned, shuffled, without padding.
    """
    return seeded_shuffle(candidates, seed)[:limit]
