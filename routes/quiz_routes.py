# routes/quiz_routes.py - starts attempts and walks through the questions
from flask import Blueprint, abort, current_app, redirect, render_template, request, session, url_for

from services.catalog import get_quiz_service

quiz_bp = Blueprint("quiz", __name__)

# one-shot feedback flag shown on the next question page
WAS_ANSWER_CORRECT = "was_answer_correct"


@quiz_bp.route("/choose-quiz/<quiz_id>", methods=["GET"])
def choose_quiz(quiz_id):
    """Start (or restart) an attempt and go to its first question."""
    quiz = get_quiz_service().start_attempt(quiz_id)
    session.pop(WAS_ANSWER_CORRECT, None)
    current_app.logger.info("visitor started quiz %s (%s)", quiz.id, quiz.title)
    return redirect(url_for("quiz.solve_question"))


@quiz_bp.route("/solve-question", methods=["GET"])
def solve_question():
    """Display the current question, with feedback on the previous answer if any."""
    was_answer_correct = session.pop(WAS_ANSWER_CORRECT, None)
    question = get_quiz_service().current_question()
    return render_template(
        "solve_question.html",
        question=question,
        was_answer_correct=was_answer_correct,
    )


@quiz_bp.route("/check-answer", methods=["POST"])
def check_answer():
    candidate = request.form.get("id", type=int)
    if candidate is None:
        abort(400)

    service = get_quiz_service()
    session[WAS_ANSWER_CORRECT] = service.submit_answer(candidate)
    if not service.is_complete():
        return redirect(url_for("quiz.solve_question"))

    # Quiz finished: PRG to the result page
    session.pop(WAS_ANSWER_CORRECT, None)
    return redirect(url_for("result.end"))
