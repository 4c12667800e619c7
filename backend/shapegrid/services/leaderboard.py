from flask import current_app

from shapegrid import db
from shapegrid.models import HighScore, utcnow


def _ranked():
    # Equal scores keep their original order; a newcomer never overtakes an older tie.
    return HighScore.query.order_by(HighScore.score.desc(), HighScore.date.asc(), HighScore.id.asc())


def top_scores(limit=None):
    """Return the best scores as dicts, highest first."""
    if limit is None:
        limit = int(current_app.config.get('LEADERBOARD_SIZE', 10))
    return [entry.to_dict() for entry in _ranked().limit(limit).all()]


def record_score(name: str, score: int) -> None:
    """Store a score and prune the table to the configured leaderboard size.

    Scores of zero or less are ignored.
    """
    if score <= 0:
        return
    cfg = current_app.config
    max_len = int(cfg.get('MAX_NAME_LENGTH', 15))
    size = int(cfg.get('LEADERBOARD_SIZE', 10))
    clean_name = (name or '').strip()[:max_len]
    entry = HighScore(name=clean_name, score=int(score), date=utcnow())
    try:
        db.session.add(entry)
        db.session.flush()
        keep_ids = [row.id for row in _ranked().limit(size).all()]
        HighScore.query.filter(HighScore.id.notin_(keep_ids)).delete(synchronize_session=False)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info(f"[score] name={clean_name!r} score={score}")
