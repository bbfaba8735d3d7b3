"""Result log repository.

``result_log`` has no primary key, so key-based operations
(find_by_id, delete_by_id, delete) raise ValueError here.
"""

from typing import List

from sqlalchemy.orm import Session

from tablerepo.models.result_log import ResultLogModel
from tablerepo.repositories.base import BaseRepository


class ResultLogRepository(BaseRepository[ResultLogModel, tuple]):
    def __init__(self, db: Session):
        super().__init__(db, ResultLogModel)

    def best_results(self, event: str, *, limit: int = 3) -> List[ResultLogModel]:
        """Highest values recorded for an event."""
        return self.find_all(
            self.model.event == event,
            [self.model.value.desc(), self.model.recorded_at.asc()],
            limit=limit,
        )
