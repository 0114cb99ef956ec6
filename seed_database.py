"""
Load the built-in fixture quizzes into the database so the "sql" catalog
has something to serve. Quizzes whose title already exists are skipped.

Usage:
  python seed_database.py
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from app import create_app
from mappers.hardcoded import HardCodedQuizMapper
from mappers.sql import quiz_to_record
from models import db, QuizRecord

def seed_quizzes(app=None, quizzes=None):
    """Insert every quiz not yet stored (matched by title). Returns the number inserted."""
    app = app or create_app()
    if quizzes is None:
        quizzes = HardCodedQuizMapper().find_all()
    inserted = 0
    with app.app_context():
        existing = {title for (title,) in db.session.query(QuizRecord.title).all()}
        try:
            for quiz in quizzes:
                if quiz.title in existing:
                    app.logger.info("seed: skipping existing quiz %r", quiz.title)
                    continue
                db.session.add(quiz_to_record(quiz))
                existing.add(quiz.title)
                inserted += 1
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
    return inserted

if __name__ == "__main__":
    count = seed_quizzes()
    print(f"🎉 Seeded {count} quiz(zes).")
