from sqlalchemy import Column, DateTime, Index, Integer, String, Text

from .base import Base, now_utc
from proofstore.db.types import JSONEncodedList


class Proof(Base):
    __tablename__ = 'proofs'
    id = Column(Integer, primary_key=True, autoincrement=True)
    entry_type = Column('entryType', String, nullable=False, default='proof')
    user_submitted = Column('userSubmitted', String, nullable=False, default='')
    proof_name = Column('proofName', String, nullable=False, default='')
    proof_type = Column('proofType', String, nullable=False, default='')
    # Ordered string sequences, stored as JSON text
    premise = Column('premise', JSONEncodedList(), nullable=False, default=list)
    logic = Column('logic', JSONEncodedList(), nullable=False, default=list)
    rules = Column('rules', JSONEncodedList(), nullable=False, default=list)  # deprecated, always empty
    proof_completed = Column('proofCompleted', String, nullable=False, default='false')
    time_submitted = Column('timeSubmitted', DateTime(timezone=True), nullable=False, default=now_utc)
    conclusion = Column('conclusion', Text, nullable=False, default='')
    repo_problem = Column('repoProblem', String, nullable=False, default='false')

    __table_args__ = (
        Index('idx_user_proof', 'userSubmitted', 'proofName', unique=True),
    )

    def __repr__(self):
        return f"<Proof id={self.id} user={self.user_submitted!r} name={self.proof_name!r}>"
