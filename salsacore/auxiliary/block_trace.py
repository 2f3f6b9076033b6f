from salsacore.core.base_object import BaseObject
from salsacore.utilities.runtime import RUNTIME
import itertools


class BlockTrace(BaseObject):
    """
    Every intermediate state of a single keystream block: the initial state, the state after each
    single (column or diagonal) round, the state after the final addition, and the serialized block.

    Read-only; consumers keep their own cursor over `states`.
    """

    def __init__(self, initial_state: list, round_states: list, after_addition: list, keystream_bytes: bytes):
        self.initial_state   = tuple(initial_state)
        self.round_states    = tuple(tuple(state) for state in round_states)
        self.after_addition  = tuple(after_addition)
        self.keystream_bytes = bytes(keystream_bytes)


    def __reprdir__(self):
        return ['rounds', 'keystream_bytes']


    @property
    def rounds(self) -> int:
        return len(self.round_states)


    @property
    def mixed_state(self) -> tuple:
        return self.round_states[-1] if self.round_states else self.initial_state


    @property
    def states(self) -> tuple:
        return (self.initial_state,) + self.round_states


    def round_label(self, idx: int) -> tuple:
        """
        Names the state at position `idx` of `states`.

        Parameters:
            idx (int): Index into `states` (0 is the initial state).

        Returns:
            tuple: ('initial', 0), ('column', n) or ('diagonal', n) where `n` counts double rounds from 1.
        """
        if not 0 <= idx <= self.rounds:
            raise IndexError(f"State index {idx} out of range for {self.rounds} rounds")

        if idx == 0:
            return ('initial', 0)

        elif idx % 2:
            return ('column', (idx + 1) // 2)

        else:
            return ('diagonal', idx // 2)


    def changed_indices(self, idx: int) -> list:
        """
        Word positions that differ between state `idx` and the one before it.
        """
        self.round_label(idx)
        if idx == 0:
            return []

        previous, current = self.states[idx-1], self.states[idx]
        return [i for i, (a, b) in enumerate(zip(previous, current)) if a != b]


    @staticmethod
    def as_matrix(words: list) -> list:
        return [list(words[i:i+4]) for i in range(0, 16, 4)]


    def to_dict(self) -> dict:
        return {
            'initial_state': list(self.initial_state),
            'round_states': [list(state) for state in self.round_states],
            'after_addition': list(self.after_addition),
            'keystream_bytes': self.keystream_bytes
        }


    def build_table(self) -> 'Table':
        from rich.table import Table

        table   = Table(title="Salsa Block Trace", show_lines=True)
        styles  = itertools.cycle(RUNTIME.trace_styles)
        columns = ['Step'] + [f'Row {r}' for r in range(4)]

        for name, style in zip(columns, styles):
            table.add_column(name, style="bold " + style, no_wrap=True)

        labelled = [(' '.join(str(part) for part in self.round_label(idx)), state) for idx, state in enumerate(self.states)]
        labelled.append(('added', self.after_addition))

        for label, state in labelled:
            rows = [' '.join(RUNTIME.word_printer(word) for word in row) for row in self.as_matrix(state)]
            table.add_row(label, *rows)

        return table


    def pretty(self):
        from rich import print

        print()
        print(self.build_table())
        print(f"Keystream: {self.keystream_bytes.hex()}")
