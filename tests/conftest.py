from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass(slots=True)
class RecordingTerminator:
    """
    Terminator that only remembers the exit codes it was asked for.
    """

    exit_codes: list[int] = field(default_factory=list)

    @property
    def called(self) -> bool:
        return bool(self.exit_codes)

    def terminate(self, exit_code: int) -> None:
        self.exit_codes.append(exit_code)


@pytest.fixture()
def terminator() -> RecordingTerminator:
    return RecordingTerminator()
