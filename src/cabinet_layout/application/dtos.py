"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinet_layout.domain import CabinetLayout, PartitionConfig


@dataclass
class LayoutOutput:
    """Output DTO containing the results of one layout run.

    Attributes:
        config: The normalized partition tree, None when input validation
            failed before normalization.
        layout: The planned cabinet layout, None on errors.
        warnings: Normalizer warnings followed by planner warnings.
        errors: Blocking problems with the cabinet dimensions.
    """

    config: PartitionConfig | None = None
    layout: CabinetLayout | None = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was generated successfully."""
        return len(self.errors) == 0
