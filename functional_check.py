"""Functional page-by-page verification script.
Run inside the virtual environment:
  python functional_check.py
Outputs tuple of (status_code, heuristic_content_ok) per route.
"""

from app import create_app


def run_checks():
    app = create_app(
        {
            "TESTING": True,
            "WTF_CSRF_ENABLED": False,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "QUIZ_CATALOG": "hardcoded",
        }
    )
    results = {}
    with app.test_client() as c:
        # Home
        r = c.get("/")
        results["home"] = (r.status_code, "Quiz 0" in r.get_data(as_text=True))

        # Quiz start
        start = c.get("/choose-quiz/0", follow_redirects=True)
        results["start_quiz"] = (
            start.status_code,
            start.request.path == "/solve-question",
        )

        # Question GET initial
        q1 = c.get("/solve-question")
        results["question_get"] = (
            q1.status_code,
            "George Washington" in q1.get_data(as_text=True),
        )

        # Every fixture question has the first candidate as the answer
        first = c.post("/check-answer", data={"id": 0}, follow_redirects=True)
        results["answer_feedback"] = (first.status_code, "Correct!" in first.get_data(as_text=True))

        last = c.post("/check-answer", data={"id": 0}, follow_redirects=True)
        results["quiz_finish"] = (
            last.status_code,
            last.request.path == "/end" and "passed" in last.get_data(as_text=True),
        )

        # Answering once the attempt is over goes back to the quiz list
        again = c.post("/check-answer", data={"id": 0})
        results["after_finish"] = (again.status_code, again.status_code == 302)

        # 404
        notf = c.get("/choose-quiz/999")
        results["404"] = (notf.status_code, notf.status_code == 404)

        # Security headers
        home2 = c.get("/")
        results["security_headers"] = (
            200,
            bool(home2.headers.get("Content-Security-Policy"))
            and home2.headers.get("X-Frame-Options") == "DENY",
        )

    return results


if __name__ == "__main__":
    for k, v in run_checks().items():
        print(f"{k}: {v}")
