from __future__ import annotations

from dataclasses import dataclass, field

from dissectopt.timestamp import TimeFormat, TimePrecision, TimestampSpec

DEFAULT_TIME_FORMAT = TimeFormat.RELATIVE
DEFAULT_TIME_PRECISION = TimePrecision.AUTO


@dataclass
class DissectOptions:
    """Dissection settings accumulated while scanning the command line.

    Only the option dispatcher appends to the name lists and only the apply
    phase reads them; after apply the object is treated as read-only.
    """

    time_format: TimeFormat = TimeFormat.NOT_SET
    time_precision: TimePrecision = TimePrecision.NOT_SET
    disable_protocol_names: list[str] = field(default_factory=list)
    enable_protocol_names: list[str] = field(default_factory=list)
    enable_heuristic_names: list[str] = field(default_factory=list)
    disable_heuristic_names: list[str] = field(default_factory=list)

    def reset(self) -> None:
        self.time_format = TimeFormat.NOT_SET
        self.time_precision = TimePrecision.NOT_SET
        self.disable_protocol_names = []
        self.enable_protocol_names = []
        self.enable_heuristic_names = []
        self.disable_heuristic_names = []

    def apply_timestamp(self, spec: TimestampSpec) -> None:
        if spec.time_format is not None:
            self.time_format = spec.time_format
        if spec.time_precision is not None:
            self.time_precision = spec.time_precision

    def effective_time_format(self) -> TimeFormat:
        if self.time_format is TimeFormat.NOT_SET:
            return DEFAULT_TIME_FORMAT
        return self.time_format

    def effective_time_precision(self) -> TimePrecision:
        if self.time_precision is TimePrecision.NOT_SET:
            return DEFAULT_TIME_PRECISION
        return self.time_precision

    def to_payload(self) -> dict[str, object]:
        return {
            "time_format": self.effective_time_format().value,
            "time_precision": self.effective_time_precision().value,
            "disable_protocols": list(self.disable_protocol_names),
            "enable_protocols": list(self.enable_protocol_names),
            "enable_heuristics": list(self.enable_heuristic_names),
            "disable_heuristics": list(self.disable_heuristic_names),
        }
