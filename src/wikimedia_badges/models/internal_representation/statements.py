from pydantic import BaseModel, ConfigDict

from .ranks import Rank
from .values import Value


class Statement(BaseModel):
    property: str
    value: Value
    rank: Rank = Rank.NORMAL
    statement_id: str = ""

    model_config = ConfigDict(frozen=True)


def best_statements(statements: list[Statement]) -> list[Statement]:
    """Return the statements of the highest non-deprecated rank present.

    Order of declaration is kept, so the head of the result is the first
    preferred statement, or the first normal one when none is preferred.
    """
    preferred = [s for s in statements if s.rank == Rank.PREFERRED]
    if preferred:
        return preferred
    return [s for s in statements if s.rank == Rank.NORMAL]
