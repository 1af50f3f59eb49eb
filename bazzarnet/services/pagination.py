"""
Page/limit arithmetic for catalog listings
"""

import math

from pydantic import BaseModel


class Pagination(BaseModel):
    """
    1-indexed page window. Non-positive values are not rejected here; they
    describe an empty slice. Request validation at the API layer keeps them out.
    """
    page: int = 1
    limit: int = 10

    @property
    def is_empty(self) -> bool:
        return self.page < 1 or self.limit < 1

    @property
    def skip(self) -> int:
        return self.limit * (self.page - 1)

    def total_pages(self, count: int) -> int:
        if self.limit < 1:
            return 0
        return math.ceil(count / self.limit)
