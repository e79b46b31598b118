class UnsupportedPolicy(ValueError):
    """Raised when a replacement policy name is not recognized."""

    def __init__(self, name):
        super().__init__(f"Unknown algorithm: {name}")
        self.name = name


class InvalidConfiguration(ValueError):
    """Raised for out-of-range references or frame counts."""


class SimulationNotRun(RuntimeError):
    """Raised when results are queried before a run has completed."""
