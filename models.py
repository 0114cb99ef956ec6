from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class QuizRecord(db.Model):
    __tablename__ = "quiz"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), unique=True, nullable=False)
    # Use timezone-aware UTC timestamps to avoid deprecation warnings and ambiguity
    created_at = db.Column(
        db.DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    questions = db.relationship(
        "QuestionRecord",
        backref="quiz",
        lazy=True,
        order_by="QuestionRecord.position",
        cascade="all, delete-orphan",
    )


class QuestionRecord(db.Model):
    __tablename__ = "question"
    __table_args__ = (
        # Presentation order within a quiz
        db.Index("idx_question_quiz_position", "quiz_id", "position"),
    )

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quiz.id"), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)
    prompt = db.Column(db.String(500), nullable=False)
    # ordered list of candidate answer strings
    candidates = db.Column(db.JSON, nullable=False)
    correct_index = db.Column(db.Integer, nullable=False)
