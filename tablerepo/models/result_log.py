"""Result log ORM model.

The table has no primary key constraint; the mapper is given its own key
so rows can still be loaded as objects.
"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Table

from tablerepo.database import Base


class ResultLogModel(Base):
    __table__ = Table(
        "result_log",
        Base.metadata,
        Column("athlete_id", Integer, ForeignKey("athlete.id"), nullable=False),
        Column("event", String, nullable=False),
        Column("recorded_at", DateTime, nullable=False),
        Column("value", Float, nullable=False),
    )
    __mapper_args__ = {
        "primary_key": [
            __table__.c.athlete_id,
            __table__.c.event,
            __table__.c.recorded_at,
        ],
    }

    def __repr__(self) -> str:
        return f"<ResultLog athlete={self.athlete_id} {self.event}={self.value}>"
