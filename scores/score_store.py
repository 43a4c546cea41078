"""
Score tally for TicTacToe.
Counts human wins, CPU wins and draws, and keeps them on disk.
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

from logic.game_state import GameStatus, Mark, Outcome

from .config import ScoreConfig


@dataclass
class Score:
    """Running tally of finished rounds."""
    human: int = 0
    cpu: int = 0
    draw: int = 0

    def record(self, outcome: Outcome, human_mark: Mark):
        """
        Count a finished round.

        Args:
            outcome: How the round ended. Ongoing outcomes are ignored.
            human_mark: Mark the human played in that round.
        """
        if outcome.status == GameStatus.WON:
            if outcome.mark == human_mark:
                self.human += 1
            else:
                self.cpu += 1
        elif outcome.status == GameStatus.DRAW:
            self.draw += 1

    def reset(self):
        self.human = 0
        self.cpu = 0
        self.draw = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Score":
        """
        Build a Score from stored data.

        Raises:
            ValueError: If the data is not a valid score record.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Score record must be an object, got {type(data).__name__}")

        values = {}
        for name in ("human", "cpu", "draw"):
            value = data.get(name, 0)
            # bool is an int subclass, reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Invalid score value for {name!r}: {value!r}")
            values[name] = value

        return cls(**values)


class KeyValueStore:
    """
    JSON-backed key-value store of string blobs.

    A missing or unreadable file reads as an empty store.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_payload(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as stream:
                payload = json.load(stream)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            print(f"Warning: could not read {self.path}: {e}")
            return {}
        if not isinstance(payload, dict):
            return {}
        return payload

    def _write_payload(self, payload: Dict[str, str]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as stream:
            json.dump(payload, stream, indent=2)

    def get(self, key: str) -> Optional[str]:
        value = self._read_payload().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str):
        payload = self._read_payload()
        payload[key] = value
        self._write_payload(payload)

    def delete(self, key: str) -> bool:
        payload = self._read_payload()
        if key not in payload:
            return False
        del payload[key]
        self._write_payload(payload)
        return True


class ScoreStore:
    """
    Loads and saves the Score under a fixed key.

    Loading never fails: a missing or malformed record gives a zero score.
    """

    def __init__(self, store: KeyValueStore, key: str = ScoreConfig.STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> Score:
        """Read the stored score, or a zero score if there is none."""
        blob = self.store.get(self.key)
        if blob is None:
            return Score()

        try:
            return Score.from_dict(json.loads(blob))
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            print(f"Ignoring malformed score record: {e}")
            return Score()

    def save(self, score: Score) -> bool:
        """
        Write the score.

        Returns:
            True if saved, False if the storage file could not be written.
        """
        try:
            self.store.set(self.key, json.dumps(score.to_dict()))
        except OSError as e:
            print(f"Warning: could not save score: {e}")
            return False
        return True

    def reset(self) -> Score:
        """Store and return a zero score."""
        score = Score()
        self.save(score)
        return score
