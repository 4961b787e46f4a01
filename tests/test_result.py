from hookrunner.result import (
    Result,
    Status,
    failed,
    group_result,
    skipped,
    succeeded,
)


def test_succeeded_is_success_only():
    res = succeeded("lint")
    assert res.success()
    assert not res.failure()
    assert res.name == "lint"
    assert res.status is Status.SUCCESS


def test_failed_keeps_text():
    res = failed("test", "try 'success'")
    assert res.failure()
    assert not res.success()
    assert res.text == "try 'success'"


def test_skipped_is_neither_success_nor_failure():
    res = skipped("fmt")
    assert not res.success()
    assert not res.failure()
    assert res.status is Status.SKIP


def test_group_of_successes_succeeds():
    subs = [succeeded("a"), succeeded("b")]
    res = group_result("grp", subs)
    assert res.success()
    assert res.sub == subs
    assert res.name == "grp"


def test_empty_group_succeeds():
    assert group_result("grp", []).success()


def test_group_with_skip_is_skipped():
    res = group_result("grp", [succeeded("a"), skipped("b")])
    assert res.status is Status.SKIP


def test_failure_overrides_skip():
    res = group_result("grp", [skipped("a"), failed("b", ""), skipped("c")])
    assert res.failure()
    assert len(res.sub) == 3


def test_results_compare_by_value():
    assert failed("x", "t") == Result(name="x", status=Status.FAILURE, text="t")
    assert succeeded("x") != failed("x", "")