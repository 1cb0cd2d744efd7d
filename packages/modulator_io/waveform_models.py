"""
Waveform export models with Pydantic validation.

These models carry the JSON wire format consumed by the waveform visualizer.
Field names on the wire are PascalCase (Name, SampleRate, Samples[].Time);
Python code uses snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict, Field


class WaveformSample(BaseModel):
    """
    A single (time, value) point.

    Example:
        >>> WaveformSample(time=0.25, value=1.0).model_dump(by_alias=True)
        {'Time': 0.25, 'Value': 1.0}
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    time: float = Field(..., alias="Time", description="Sample time in seconds")
    value: float = Field(..., alias="Value", description="Source value at time")


class WaveformData(BaseModel):
    """
    A named, ordered series of samples plus the metadata used to take them.

    Example:
        >>> data = WaveformData(
        ...     name="Basic Sine Wave",
        ...     description="A simple 440Hz sine wave",
        ...     duration=1.0,
        ...     sample_rate=1000.0,
        ... )
        >>> data.to_json()  # doctest: +SKIP
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", alias="Name")
    description: str = Field(default="", alias="Description")
    duration: float = Field(
        ..., ge=0.0, allow_inf_nan=False, alias="Duration", description="Seconds sampled"
    )
    sample_rate: float = Field(
        ..., gt=0.0, allow_inf_nan=False, alias="SampleRate", description="Samples per second"
    )
    samples: list[WaveformSample] = Field(default_factory=list, alias="Samples")

    @property
    def sample_count(self) -> int:
        return len(self.samples)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize using the wire-format field names."""
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, payload: str | bytes) -> "WaveformData":
        """Deserialize from wire-format JSON."""
        return cls.model_validate_json(payload)
