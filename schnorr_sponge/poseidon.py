"""The Poseidon permutation of width 5 over the BN254 scalar field.

The permutation follows the Hades design: half of the full rounds, then
the partial rounds, then the other half of the full rounds. Every round
adds its round constants, applies the S-box (to every word in a full
round, to the first word only in a partial round) and mixes the state
with the MDS matrix.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from schnorr_sponge.params import (
    FULL_ROUNDS,
    MODULUS,
    PARTIAL_ROUNDS,
    WIDTH,
    mds,
    round_constants,
    sbox,
)

State = tuple[int, ...]


def _as_state(values: Iterable[int], what: str) -> State:
    state = tuple(int(v) % MODULUS for v in values)
    if len(state) != WIDTH:
        raise ValueError(f"{what} must hold exactly {WIDTH} elements, got {len(state)}")
    return state


def apply_round_constants(state: Sequence[int], constants: Sequence[int]) -> State:
    """Add one round's constants to the state, word by word."""
    words = _as_state(state, "state")
    added = _as_state(constants, "round constants")
    return tuple((s + c) % MODULUS for s, c in zip(words, added))


def apply_mds(state: Sequence[int]) -> State:
    """Multiply the state by the MDS matrix."""
    words = _as_state(state, "state")
    return tuple(sum(m * s for m, s in zip(row, words)) % MODULUS for row in mds())


def _round_constant_blocks() -> list[Sequence[int]]:
    constants = round_constants()
    return [constants[start:start + WIDTH] for start in range(0, len(constants), WIDTH)]


def _is_full_round(index: int) -> bool:
    half = FULL_ROUNDS // 2
    return index < half or index >= half + PARTIAL_ROUNDS


def permute(inputs: Sequence[int]) -> State:
    """Run the full permutation on five field elements and return the new state."""
    state = _as_state(inputs, "permutation input")
    for index, block in enumerate(_round_constant_blocks()):
        state = apply_round_constants(state, block)
        if _is_full_round(index):
            state = tuple(sbox(word) for word in state)
        else:
            state = (sbox(state[0]), *state[1:])
        state = apply_mds(state)
    return state