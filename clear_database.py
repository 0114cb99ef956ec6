"""
Clear all quizzes from the database (delete all questions and quizzes).
Use this to reset the catalog to a clean state.
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from app import create_app
from models import db, QuizRecord, QuestionRecord

def clear_all_data(app=None):
    """Delete all questions and quizzes from the database."""
    app = app or create_app()
    with app.app_context():
        try:
            # Delete all questions first (because of foreign key constraint)
            num_questions = QuestionRecord.query.delete()

            num_quizzes = QuizRecord.query.delete()

            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    print(f"✅ Successfully cleared database:")
    print(f"   - Deleted {num_questions} question(s)")
    print(f"   - Deleted {num_quizzes} quiz(zes)")
    return num_quizzes, num_questions

if __name__ == "__main__":
    response = input("⚠️  This will delete ALL quizzes and questions. Are you sure? (yes/no): ")
    if response.lower() == 'yes':
        clear_all_data()
    else:
        print("❌ Operation cancelled.")
