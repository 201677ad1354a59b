"""Recording and storage of key macros."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable

Key = tuple[Hashable, Hashable]


@dataclass
class MacroRecorder:
    """Records key sequences into named registers for later replay."""

    recording_register: str | None = None
    buffer: list[Key] = field(default_factory=list)
    macros: dict[str, list[Key]] = field(default_factory=dict)
    last_played: str | None = None

    def start_recording(self, reg: str) -> None:
        """Begin recording into register ``reg``, discarding any partial buffer."""
        self.recording_register = reg
        self.buffer.clear()

    def stop_recording(self) -> None:
        """Stop recording and store the buffer under the active register."""
        if self.recording_register is None:
            return
        self.macros[self.recording_register] = list(self.buffer)
        self.recording_register = None
        self.buffer.clear()

    def record_key(self, code: Hashable, modifiers: Hashable) -> None:
        """Append a key to the buffer while recording."""
        if self.recording_register is not None:
            self.buffer.append((code, modifiers))

    def is_recording(self) -> bool:
        """Return True while a macro is being recorded."""
        return self.recording_register is not None

    def get_macro(self, reg: str) -> list[Key] | None:
        """Return the keys stored in ``reg``, or None if it is empty."""
        return self.macros.get(reg)

    def list_macros(self) -> list[tuple[str, int]]:
        """Return (register, key count) pairs sorted by register."""
        return sorted((reg, len(keys)) for reg, keys in self.macros.items())