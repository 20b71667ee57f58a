"""Record of what each character has said out loud."""

from __future__ import annotations

from dataclasses import dataclass, field

from redherring.domain.sentence import Sentence


@dataclass(frozen=True)
class HeardEntry:
    person_id: int
    sentence: Sentence


@dataclass
class PlayerJournal:
    entries: list[HeardEntry] = field(default_factory=list)

    def record_heard(self, person_id: int, sentence: Sentence) -> None:
        self.entries.append(HeardEntry(person_id, sentence))

    def heard_from(self, person_id: int) -> list[Sentence]:
        return [entry.sentence for entry in self.entries if entry.person_id == person_id]

    def __len__(self) -> int:
        return len(self.entries)
