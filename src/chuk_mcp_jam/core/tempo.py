"""
Tempo primitives - TempoMarking and TempoTable.

Callers pick a BPM; notation wants a named marking. The table maps exact BPM
values to markings and deliberately leaves gaps (105, 140, 225, ...).
A BPM in a gap resolves to None so the caller keeps whatever it had.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum


class TempoMarking(str, Enum):
    """Named tempo markings understood by the notation engine."""

    GRAVE = "Grave"
    LARGO = "Largo"
    LARGHETTO = "Larghetto"
    LENTO = "Lento"
    ADAGIO = "Adagio"
    ADAGIETTO = "Adagietto"
    ANDANTE = "Andante"
    ANDANTINO = "Andantino"
    MODERATO = "Moderato"
    ALLEGRETTO = "Allegretto"
    ALLEGRO = "Allegro"
    VIVACE = "Vivace"
    PRESTO = "Presto"
    PRETISSIMO = "Pretissimo"

    @property
    def token(self) -> str:
        """Notation token, e.g. 'T[Andantino]'."""
        return f"T[{self.value}]"

    @property
    def bpm(self) -> int:
        """Nominal BPM: the slowest value of the marking's bucket."""
        return min(TEMPO_BUCKETS[self])

    @classmethod
    def parse(cls, name: str) -> TempoMarking:
        """Parse a marking by value or member name, case-insensitive."""
        wanted = name.strip().lower()
        for member in cls:
            if member.value.lower() == wanted or member.name.lower() == wanted:
                return member
        raise ValueError(f"Unknown tempo marking: {name}")


TEMPO_BUCKETS: dict[TempoMarking, frozenset[int]] = {
    TempoMarking.GRAVE: frozenset({40}),
    TempoMarking.LARGO: frozenset({45}),
    TempoMarking.LARGHETTO: frozenset({50}),
    TempoMarking.LENTO: frozenset({55}),
    TempoMarking.ADAGIO: frozenset({60}),
    TempoMarking.ADAGIETTO: frozenset({65}),
    TempoMarking.ANDANTE: frozenset({70, 75}),
    TempoMarking.ANDANTINO: frozenset({80, 85, 90}),
    TempoMarking.MODERATO: frozenset({95, 100}),
    TempoMarking.ALLEGRETTO: frozenset({110, 115}),
    TempoMarking.ALLEGRO: frozenset(range(120, 136, 5)),
    TempoMarking.VIVACE: frozenset(range(145, 176, 5)),
    TempoMarking.PRESTO: frozenset(range(180, 216, 5)),
    TempoMarking.PRETISSIMO: frozenset({220}),
}


class TempoTable:
    """
    Exact BPM -> TempoMarking lookup.

    Buckets must not overlap. There is no default and no interpolation.
    """

    def __init__(self, buckets: Mapping[TempoMarking, Iterable[int]] = TEMPO_BUCKETS):
        self._by_bpm: dict[int, TempoMarking] = {}
        for marking, values in buckets.items():
            for bpm in values:
                if bpm in self._by_bpm:
                    raise ValueError(
                        f"BPM {bpm} is in both {self._by_bpm[bpm].value} and {marking.value}"
                    )
                self._by_bpm[bpm] = marking

    def resolve(self, bpm: int) -> TempoMarking | None:
        """Marking for bpm, or None when bpm falls in a gap."""
        return self._by_bpm.get(bpm)

    def defined_bpms(self) -> list[int]:
        """All BPM values that resolve to a marking, ascending."""
        return sorted(self._by_bpm)

    def __contains__(self, bpm: object) -> bool:
        return bpm in self._by_bpm


DEFAULT_TEMPO_TABLE = TempoTable()
