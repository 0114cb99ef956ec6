# services/session_helper.py - key names and reset/clear helpers for the attempt state
class SessionHelper:
    CURRENT_QUIZ = "quiz_service_current_quiz"
    CURRENT_QUESTION = "quiz_service_current_question"
    CORRECT = "quiz_service_correct"
    INCORRECT = "quiz_service_incorrect"

    @staticmethod
    def init_attempt(session, quiz_id):
        session[SessionHelper.CURRENT_QUIZ] = quiz_id
        session[SessionHelper.CURRENT_QUESTION] = 0
        session[SessionHelper.CORRECT] = 0
        session[SessionHelper.INCORRECT] = 0

    @staticmethod
    def clear_position(session):
        # counters survive so the result stays readable after the attempt ends
        session.pop(SessionHelper.CURRENT_QUIZ, None)
        session.pop(SessionHelper.CURRENT_QUESTION, None)

    @staticmethod
    def increment(session, key):
        session[key] = session.get(key, 0) + 1
