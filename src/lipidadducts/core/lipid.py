"""Lipid identity used by annotations."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Lipid:
    """
    A candidate lipid identity.

    Attributes:
        compound_id: Database identifier.
        name: Lipid name, e.g. "PC 34:1".
        formula: Molecular formula.
        lipid_type: Lipid class, e.g. "PC", "TG".
        carbon_count: Total number of carbons in the fatty acyl chains.
        double_bonds_count: Total number of double bonds in the chains.
    """
    compound_id: int
    name: str
    formula: Optional[str] = None
    lipid_type: Optional[str] = None
    carbon_count: int = 0
    double_bonds_count: int = 0

    def __post_init__(self) -> None:
        """Validate chain composition."""
        if self.carbon_count < 0:
            raise ValueError(f"carbon_count must be >= 0, got {self.carbon_count}")
        if self.double_bonds_count < 0:
            raise ValueError(
                f"double_bonds_count must be >= 0, got {self.double_bonds_count}"
            )
