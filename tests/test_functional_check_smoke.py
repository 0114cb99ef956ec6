from functional_check import run_checks

def test_functional_check_runs_and_all_pass():
    results = run_checks()
    assert isinstance(results, dict)
    for key in ["home", "start_quiz", "question_get", "answer_feedback", "quiz_finish", "after_finish", "404"]:
        assert key in results
        status, ok = results[key]
        assert isinstance(status, int)
        assert ok, key
