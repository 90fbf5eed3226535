from dataclasses import dataclass

# FRED reports missing observations as a single dot.
MISSING_VALUE = "."


@dataclass(frozen=True)
class Observation:
    realtime_start: str
    realtime_end: str
    date: str
    value: str

    @property
    def numeric_value(self) -> float | None:
        """The value as a float, or None where FRED has no data for the date."""
        if self.value == MISSING_VALUE:
            return None
        return float(self.value)

    def __str__(self) -> str:
        return f"({self.date}: {self.value})"

    @staticmethod
    def from_dict(d: dict) -> "Observation":
        return Observation(
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            date=d["date"],
            value=d["value"],
        )


@dataclass(frozen=True)
class ObservationsResponse:
    realtime_start: str
    realtime_end: str
    observation_start: str
    observation_end: str
    units: str
    output_type: int
    file_type: str
    order_by: str
    sort_order: str
    count: int
    offset: int
    limit: int
    observations: tuple[Observation, ...]

    def __str__(self) -> str:
        return "".join(f"{o}\n" for o in self.observations)

    @staticmethod
    def from_dict(d: dict) -> "ObservationsResponse":
        return ObservationsResponse(
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            observation_start=d["observation_start"],
            observation_end=d["observation_end"],
            units=d["units"],
            output_type=int(d["output_type"]),
            file_type=d["file_type"],
            order_by=d["order_by"],
            sort_order=d["sort_order"],
            count=int(d["count"]),
            offset=int(d["offset"]),
            limit=int(d["limit"]),
            observations=tuple(Observation.from_dict(o) for o in d["observations"]),
        )
