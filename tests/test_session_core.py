# tests/test_session_core.py
from fitplanner.models.workout import DayWorkout, Exercise
from fitplanner.session_core import SessionState, WorkoutSession


def _session(day, ticker, weight=70):
    return WorkoutSession(day, weight, ticker=ticker, clock=lambda: "2024-05-06T10:00:00+00:00").start()


def test_start_begins_ticking_at_first_exercise(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)

    assert session.state == SessionState.IN_PROGRESS
    assert session.current_index == 0
    assert ticker.started == 1

    ticker.advance(3)
    assert session.elapsed_seconds == 3


def test_complete_current_exercise_advances_pointer(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)

    session.mark_exercise_complete("ex-1")
    assert session.current_index == 1

    # last exercise: nowhere to advance
    session.mark_exercise_complete("ex-2")
    assert session.current_index == 1
    assert session.all_completed


def test_completing_other_exercise_keeps_pointer(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)

    session.mark_exercise_complete("ex-2")
    assert session.current_index == 0
    assert session.completed_ids == {"ex-2"}


def test_mark_complete_is_idempotent(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)

    session.mark_exercise_complete("ex-2")
    once = (set(session.completed_ids), session.displayed_total_calories())
    session.mark_exercise_complete("ex-2")
    twice = (set(session.completed_ids), session.displayed_total_calories())

    assert once == twice == ({"ex-2"}, 4)


def test_unknown_exercise_id_is_ignored(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)
    assert session.mark_exercise_complete("nope") is False
    assert session.completed_ids == set()


def test_navigate_to_exercise(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)

    assert session.navigate_to_exercise(1) is True
    assert session.current_index == 1
    assert session.navigate_to_exercise(0) is True
    assert session.current_index == 0


def test_navigate_out_of_range_leaves_pointer(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)
    session.navigate_to_exercise(1)

    assert session.navigate_to_exercise(5) is False
    assert session.navigate_to_exercise(-1) is False
    assert session.current_index == 1


def test_displayed_total_counts_only_completed(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)
    assert session.displayed_total_calories() == 0

    session.mark_exercise_complete("ex-1")
    assert session.displayed_total_calories() == 2

    session.mark_exercise_complete("ex-2")
    assert session.displayed_total_calories() == 6


def test_finish_builds_record_and_stops_clock(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)
    session.mark_exercise_complete("ex-1")
    session.mark_exercise_complete("ex-2")
    ticker.advance(125)

    record = session.finish(True)

    assert session.state == SessionState.FINISHED
    assert record.date == "2024-05-06T10:00:00+00:00"
    assert record.duration == 2
    assert record.calories_burned == 6
    assert [p.id for p in record.exercises_performed] == ["ex-1", "ex-2"]
    assert record.exercises_performed[0].duration == 0.5
    assert record.exercises_performed[0].calories_burned == 2
    assert record.exercises_performed[0].mets == 3.8
    assert record.exercises_performed[1].calories_burned == 4

    assert ticker.cancelled == 1
    ticker.advance(30)
    assert session.elapsed_seconds == 125


def test_finish_twice_returns_same_record(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)
    first = session.finish(True)
    assert session.finish(False) is first
    assert ticker.cancelled == 1


def test_full_completion_credits_every_exercise(two_exercise_day, ticker):
    tracked = _session(two_exercise_day, ticker)
    tracked.mark_exercise_complete("ex-1")
    tracked.mark_exercise_complete("ex-2")
    untracked = _session(two_exercise_day, ticker)

    a = tracked.finish(True)
    b = untracked.finish(True)

    assert a.calories_burned == b.calories_burned == 6
    assert a.exercises_performed == b.exercises_performed


def test_early_exit_without_completions_is_empty(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)
    record = session.finish(False)

    assert session.state == SessionState.ABANDONED
    assert record.exercises_performed == []
    assert record.calories_burned == 0


def test_early_exit_credits_only_completed(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)
    session.mark_exercise_complete("ex-2")

    record = session.finish(False)
    assert [p.id for p in record.exercises_performed] == ["ex-2"]
    assert record.calories_burned == 4


def test_missing_mets_counts_zero_calories(ticker):
    day = DayWorkout(day="Friday", exercises=[Exercise(id="a", name="Leg Press", reps=10)])
    session = _session(day, ticker)
    session.mark_exercise_complete("a")

    record = session.finish(True)
    assert record.calories_burned == 0
    assert record.exercises_performed[0].duration == 0.5


def test_actions_after_finish_are_ignored(two_exercise_day, ticker):
    session = _session(two_exercise_day, ticker)
    session.finish(False)

    assert session.mark_exercise_complete("ex-1") is False
    assert session.completed_ids == set()


def test_progress_percent_rounds_half_up(ticker):
    day = DayWorkout(
        day="Friday",
        exercises=[Exercise(id=f"ex-{i}", name="Plank", mets=3.0) for i in range(8)],
    )
    session = _session(day, ticker)
    for i in range(5):
        session.mark_exercise_complete(f"ex-{i}")

    # 5 of 8 is 62.5
    assert session.progress_percent == 63
