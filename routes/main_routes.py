# routes/main_routes.py - homepage / quiz selection
from flask import Blueprint, render_template

from services.catalog import get_quiz_service

main_bp = Blueprint("main", __name__)


@main_bp.route("/", methods=["GET"])
def index():
    """Home page: list every quiz in the catalog"""
    return render_template("choose_quiz.html", quizzes=get_quiz_service().list_available_quizzes())
