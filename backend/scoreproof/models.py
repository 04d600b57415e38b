from datetime import datetime, timezone

from scoreproof import db

# Seeded milestones, highest first
INITIAL_SCORES = [
    131072, 65536, 32768, 16384, 8192, 4096, 2048, 1024,
    512, 256, 128, 64, 32, 16, 8, 4, 2,
]


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ScoreCount(db.Model):
    __tablename__ = 'scores'
    score = db.Column(db.Integer, primary_key=True, autoincrement=False)
    count = db.Column(db.Integer, nullable=False, default=0)

    def to_dict(self):
        return {
            'score': self.score,
            'count': self.count,
        }


class ProofRecord(db.Model):
    __tablename__ = 'proofs'
    proof_id = db.Column(db.String(255), primary_key=True)
    proof = db.Column(db.Text, nullable=True)  # trimmed upload, stored as received
    score = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow, index=True)

    def to_dict(self):
        return {
            'proofId': self.proof_id,
            'proof': self.proof,
            'score': self.score,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
