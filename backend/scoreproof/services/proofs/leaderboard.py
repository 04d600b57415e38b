from typing import List

from sqlalchemy.exc import IntegrityError

from scoreproof import db
from scoreproof.models import INITIAL_SCORES, ProofRecord, ScoreCount
from .errors import DuplicateProofError


def seed_scores() -> int:
    """Insert the score ladder with zero counts if the table is empty."""
    if ScoreCount.query.count() > 0:
        return 0
    db.session.add_all([ScoreCount(score=s, count=0) for s in INITIAL_SCORES])
    db.session.commit()
    return len(INITIAL_SCORES)


def init_db() -> None:
    db.create_all()
    seed_scores()


def reset_db() -> None:
    db.drop_all()
    init_db()


def list_scores() -> List[ScoreCount]:
    return ScoreCount.query.order_by(ScoreCount.score.desc()).all()


def list_proofs() -> List[ProofRecord]:
    return ProofRecord.query.order_by(ProofRecord.created_at.desc()).all()


def scores_snapshot() -> List[dict]:
    return [row.to_dict() for row in list_scores()]


def proof_exists(proof_id: str) -> bool:
    return db.session.get(ProofRecord, proof_id) is not None


def record_proof(proof_id: str, content: str, score: int) -> ScoreCount:
    """Store an accepted proof and bump the tally for its score.

    Both writes share one commit. Raises DuplicateProofError if the proof id
    is already stored, including when a concurrent request wins the insert.
    """
    if proof_exists(proof_id):
        raise DuplicateProofError(proof_id)
    try:
        db.session.add(ProofRecord(proof_id=proof_id, proof=content, score=score))
        row = db.session.get(ScoreCount, score)
        if row:
            row.count = ScoreCount.count + 1
        else:
            row = ScoreCount(score=score, count=1)
        db.session.add(row)
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        if proof_exists(proof_id):
            raise DuplicateProofError(proof_id) from exc
        raise
    return row
