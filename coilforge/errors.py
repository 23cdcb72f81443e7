"""Exceptions raised by the coil calculation engine."""


class CoilForgeError(ValueError):
    """Base class for all engine errors."""


class UnknownMaterial(CoilForgeError):
    """Material id is not present in the catalog."""

    def __init__(self, material_id: str, known=()):
        self.material_id = material_id
        msg = f"Unknown material '{material_id}'"
        if known:
            msg += f". Must be one of: {list(known)}"
        super().__init__(msg)


class InvalidDimension(CoilForgeError):
    """A physical dimension that must be positive is zero or negative."""

    def __init__(self, name: str, value: float):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be positive, got {value}")


class UnknownGauge(CoilForgeError):
    """AWG value is not in the gauge table."""

    def __init__(self, awg: int, known=()):
        self.awg = awg
        super().__init__(f"Unknown AWG {awg}. Must be one of: {list(known)}")


class InvalidMaterial(CoilForgeError):
    """A custom catalog entry is malformed."""
