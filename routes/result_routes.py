# routes/result_routes.py - result display
from flask import Blueprint, render_template

from services.catalog import get_quiz_service

result_bp = Blueprint("result", __name__)


@result_bp.route("/end", methods=["GET"])
def end():
    """Show the score of the latest attempt (partial if it is still running)."""
    return render_template("end.html", result=get_quiz_service().result())
