"""Register storage owned by the editor state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping

UNNAMED = '"'


@dataclass(frozen=True, slots=True)
class RegisterValue:
    text: str
    linewise: bool = False


class RegisterBank:
    """Single-character register slots; writes also land in the unnamed one."""

    def __init__(self) -> None:
        self._registers: Dict[str, RegisterValue] = {UNNAMED: RegisterValue("")}

    @staticmethod
    def _check(name: str) -> str:
        if len(name) != 1:
            raise ValueError(f"Register names are single characters, got {name!r}")
        return name

    def get(self, name: str) -> RegisterValue:
        return self._registers.get(self._check(name), RegisterValue(""))

    def set(self, name: str, value: RegisterValue) -> None:
        # Uppercase names append to their lowercase register.
        name = self._check(name)
        if name.isupper():
            existing = self.get(name.lower())
            value = RegisterValue(existing.text + value.text, existing.linewise)
            name = name.lower()
        self._registers[name] = value
        if name != UNNAMED:
            self._registers[UNNAMED] = value

    def yank_to(self, name: str, text: str, *, linewise: bool = False) -> None:
        self.set(name, RegisterValue(text=text, linewise=linewise))

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._registers))

    def serialize(self) -> Mapping[str, RegisterValue]:
        return dict(self._registers)


__all__ = ["RegisterBank", "RegisterValue", "UNNAMED"]
