from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional


class OrderRecord(BaseModel):
    """
    One normalized order row from the orders CSV.

    IMPORTANT:
    - Records are created once during ingestion and never modified.
    - `sales` is always a finite float; unparsable values were coerced to 0.0.
    - `year` is None when `order_date` was absent or could not be parsed.
      Such records only show up under the "all years" view.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        "",
        description="Customer name"
    )

    segment: str = Field(
        "",
        description="Customer segment (e.g., Consumer, Corporate, Home Office)"
    )

    state: str = Field(
        "",
        description="US state the order shipped to; grouping key, exact and case-sensitive"
    )

    city: str = Field(
        "",
        description="City the order shipped to"
    )

    order_date: str = Field(
        "",
        description="Order date exactly as it appeared in the CSV"
    )

    ship_mode: str = Field(
        "",
        description="Shipping mode (e.g., Standard, Express)"
    )

    sales: float = Field(
        0.0,
        description="Order amount in USD"
    )

    year: Optional[int] = Field(
        None,
        description="Calendar year parsed from order_date, if any"
    )

    extra: Dict[str, str] = Field(
        default_factory=dict,
        description="Raw values of any columns beyond the recognised ones"
    )
