from datetime import datetime, timezone

from shapegrid import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class HighScore(db.Model):
    __tablename__ = 'high_score'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(15), nullable=False)
    score = db.Column(db.Integer, nullable=False, index=True)
    date = db.Column(db.DateTime, nullable=False, default=utcnow)  # naive UTC

    def to_dict(self):
        return {
            'name': self.name,
            'score': self.score,
            'date': self.date.replace(tzinfo=timezone.utc).isoformat() if self.date else None,
        }
