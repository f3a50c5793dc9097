# matching_core/models.py
from __future__ import annotations
from typing import List, NamedTuple, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class CellPosition(NamedTuple):
    row: int
    col: int


class SolverConfig(BaseModel):
    # star count +1 per augmentation, valid final matching
    check_invariants: bool = True


class AppConfig(BaseModel):
    rows: int = 10
    cols: int = 15
    max_value: int = 64
    random_seed: Optional[int] = None
    color: bool = True
    check_invariants: bool = True

    @field_validator("rows", "cols", "max_value")
    @classmethod
    def _positive(cls, v):
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @model_validator(mode="after")
    def _rows_fit_columns(self):
        if self.rows > self.cols:
            raise ValueError(f"rows ({self.rows}) must not exceed cols ({self.cols})")
        return self

    def solver_config(self) -> SolverConfig:
        return SolverConfig(check_invariants=self.check_invariants)


class MatchResult(BaseModel):
    assignment: List[CellPosition] = Field(default_factory=list)
    total_cost: int = 0
    phases: int = 0
    rebalances: int = 0

    def columns(self) -> List[int]:
        """assign[row] = col, the shape `hungarian()` returns."""
        return [pos.col for pos in self.assignment]
