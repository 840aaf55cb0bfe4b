"""A Poseidon sponge that absorbs field elements and squeezes one out."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from schnorr_sponge.params import MODULUS, WIDTH
from schnorr_sponge.poseidon import permute


def _chunks(values: Sequence[int], size: int) -> Iterator[Sequence[int]]:
    for start in range(0, len(values), size):
        yield values[start:start + size]


class PoseidonSponge:
    """Collects inputs and folds them into a width-5 Poseidon state on squeeze."""

    __slots__ = ("_inputs", "_state")

    def __init__(self) -> None:
        self._inputs: list[int] = []
        self._state: tuple[int, ...] = (0,) * WIDTH

    def __repr__(self) -> str:
        return f"PoseidonSponge(pending={len(self._inputs)}, state={self._state!r})"

    def update(self, inputs: Iterable[int]) -> None:
        """Queue field elements to be absorbed at the next squeeze."""
        self._inputs.extend(int(value) % MODULUS for value in inputs)

    def squeeze(self) -> int:
        """Absorb the queued inputs in chunks of five and return the first state word.

        With nothing queued a single zero is absorbed. The queue is emptied
        afterwards, while the state carries over to later squeezes.
        """
        if not self._inputs:
            self._inputs.append(0)
        for chunk in _chunks(self._inputs, WIDTH):
            padded = (*chunk, *(0,) * (WIDTH - len(chunk)))
            self._state = permute(
                tuple((x + s) % MODULUS for x, s in zip(padded, self._state))
            )
        self._inputs.clear()
        return self._state[0]