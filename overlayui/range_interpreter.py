"""Map integer values, optionally on a cyclic scale, to connector indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Set


@dataclass(frozen=True)
class _Interval:
    start: int
    end: int
    index: int


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    return value


class RangeInterpreter:
    """Finds which registered intervals contain a value.

    With a cyclic range such as (0, 360) values and interval ends wrap, so
    (355, 370) becomes (355, 10) and covers both ends of the scale.
    """

    def __init__(self) -> None:
        self._intervals: List[_Interval] = []
        self._connectors: Dict[int, Any] = {}
        self._cyclic = False
        self._cyclic_min = 0
        self._cyclic_max = 0
        self._range = 0

    def _normalize(self, value: int) -> int:
        if not self._cyclic:
            return value
        return self._cyclic_min + (value - self._cyclic_min) % self._range

    def _contains(self, interval: _Interval, query: int) -> bool:
        if not self._cyclic or interval.start <= interval.end:
            return interval.start <= query <= interval.end
        return query >= interval.start or query <= interval.end

    def set_cyclic_range(self, cyclic_min: int, cyclic_max: int) -> None:
        if cyclic_max <= cyclic_min:
            raise ValueError("cyclic_max must be greater than cyclic_min")
        self._cyclic = True
        self._cyclic_min = cyclic_min
        self._cyclic_max = cyclic_max
        self._range = cyclic_max - cyclic_min

    def add(self, start: int, end: int, index: int, variant: Any) -> None:
        """Register interval [start, end] for connector ``index``."""
        if self._cyclic:
            start = self._normalize(start)
            end = self._normalize(end)
        self._intervals.append(_Interval(start, end, index))
        self._connectors[index] = variant

    def get_range_connector(self, query: int) -> Set[int]:
        """Return the indices of all intervals containing ``query``."""
        value = self._normalize(query)
        return {i.index for i in self._intervals if self._contains(i, value)}

    def get_interpret_connector(self, index: int) -> Any:
        try:
            return self._connectors[index]
        except KeyError:
            raise KeyError(f"no connector registered for index {index}") from None

    def serialize(self) -> Dict[str, Any]:
        return {
            "cyclic": self._cyclic,
            "cyclic_min": self._cyclic_min,
            "cyclic_max": self._cyclic_max,
            "intervals": [
                {"start": i.start, "end": i.end, "index": i.index}
                for i in self._intervals
            ],
            "eii": [
                {"index": index, "variant": variant}
                for index, variant in self._connectors.items()
            ],
        }

    def deserialize(self, data: Dict[str, Any]) -> None:
        """Replace the state with ``data``; raises ValueError if it is malformed."""
        try:
            connectors = {
                _as_int(entry["index"], "index"): entry["variant"]
                for entry in data["eii"]
            }
            cyclic = data["cyclic"]
            if not isinstance(cyclic, bool):
                raise ValueError("cyclic must be a boolean")
            cyclic_min = _as_int(data["cyclic_min"], "cyclic_min")
            cyclic_max = _as_int(data["cyclic_max"], "cyclic_max")
            intervals = [
                _Interval(
                    _as_int(entry["start"], "start"),
                    _as_int(entry["end"], "end"),
                    _as_int(entry["index"], "index"),
                )
                for entry in data["intervals"]
            ]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed range interpreter data: {exc}") from exc
        self._connectors = connectors
        self._cyclic = cyclic
        self._cyclic_min = cyclic_min
        self._cyclic_max = cyclic_max
        self._range = cyclic_max - cyclic_min if cyclic else 0
        self._intervals = intervals