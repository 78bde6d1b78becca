from typing import List

from pydantic import BaseModel, Field


class RunReport(BaseModel):
    """Outcome of a single hook run."""

    processed: List[str] = Field(default_factory=list)
    staged: List[str] = Field(default_factory=list)
