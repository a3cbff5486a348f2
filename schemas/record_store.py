from pydantic import BaseModel, ConfigDict, Field
from typing import FrozenSet, List, Tuple

import pandas as pd

from schemas.order_record import OrderRecord


class RecordStore(BaseModel):
    """
    Immutable result of one ingestion run: every surviving order row plus the
    distinct years observed in their dates.
    """

    model_config = ConfigDict(frozen=True)

    records: Tuple[OrderRecord, ...] = Field(
        default_factory=tuple,
        description="Normalized orders in input order"
    )

    years: FrozenSet[int] = Field(
        default_factory=frozenset,
        description="Distinct calendar years found in order dates"
    )

    def sorted_years(self) -> List[int]:
        """Years newest first, the order the year selector shows them in."""
        return sorted(self.years, reverse=True)

    def __len__(self) -> int:
        return len(self.records)


def records_to_frame(records) -> pd.DataFrame:
    """
    Columnar view of the records used by the rollups.
    `year` is a nullable Int64 column so undated orders stay as <NA>.
    """
    records = list(records)
    return pd.DataFrame({
        "state": pd.Series([r.state for r in records], dtype="object"),
        "sales": pd.Series([r.sales for r in records], dtype="float64"),
        "year": pd.array([r.year for r in records], dtype="Int64"),
    })
