"""Configuration classes for fwgraph algorithms."""

from dataclasses import dataclass

from fwgraph.types import Cost


@dataclass
class FloydWarshallConfig:
    """Tunables for the all-pairs shortest path engine."""

    # Edge attribute read by the default weight function
    weight_attr: str = "cost"

    # Weight used when an edge lacks `weight_attr`
    default_weight: Cost = 1

    # Scan the diagonal for cycle defects after relaxation
    check_negative_cycles: bool = True

    # Fail path reconstruction when a pair re-enters its own decomposition
    detect_revisits: bool = True

    # Log relaxation progress every N intermediate vertices (0 disables)
    progress_log_interval: int = 0

    def validate(self) -> None:
        """Raise ValueError if any field holds an unusable value."""
        if not self.weight_attr:
            raise ValueError("weight_attr must be a non-empty string.")
        if self.progress_log_interval < 0:
            raise ValueError(
                f"progress_log_interval must be >= 0, got {self.progress_log_interval}."
            )


# Global configuration instance
FW_CONFIG = FloydWarshallConfig()
