import pytest
from hypothesis import given, strategies as st

from k1arith.bench import BenchResult, format_number, run_benchmark


def test_format_number_large_value_has_no_decimals():
    assert format_number(123.456) == "123"


def test_format_number_small_value_gets_decimals():
    assert format_number(1.5) == "1.50"


def test_format_number_negative_uses_absolute_value_for_precision():
    assert format_number(-1.5) == "-1.50"


@given(st.floats(min_value=1e-9, max_value=1e9))
def test_format_number_keeps_three_significant_digits(x):
    text = format_number(x)
    assert abs(float(text) - x) <= x * 0.006


@given(st.floats(min_value=1e-9, max_value=1e9))
def test_format_number_symmetric_for_negatives(x):
    assert format_number(-x) == "-" + format_number(x)


def test_run_benchmark_calls_hooks_each_round():
    calls = {"setup": 0, "bench": 0, "teardown": 0}

    def setup(d):
        d["setup"] += 1

    def bench(d):
        d["bench"] += 1

    def teardown(d):
        d["teardown"] += 1

    run_benchmark("hooks", bench, setup, teardown, calls, 5, 10)
    assert calls == {"setup": 5, "bench": 5, "teardown": 5}


def test_run_benchmark_hooks_order():
    log = []
    run_benchmark(
        "order",
        lambda d: d.append("bench"),
        lambda d: d.append("setup"),
        lambda d: d.append("teardown"),
        log,
        2,
        1,
    )
    assert log == ["setup", "bench", "teardown"] * 2


def test_run_benchmark_without_hooks_returns_ordered_stats():
    counter = []
    result = run_benchmark(
        "plain", lambda d: d.append(sum(range(1000))), None, None, counter, 4, 100
    )
    assert len(counter) == 4
    assert result.name == "plain"
    assert 0.0 <= result.min_us <= result.avg_us <= result.max_us


def test_run_benchmark_prints_summary_line(capsys):
    result = run_benchmark("demo", lambda d: None, None, None, None, 3, 7)
    out = capsys.readouterr().out
    assert out == str(result) + "\n"
    assert out.startswith("demo: min ")
    assert " us / avg ".replace(" us", "us") in out
    assert out.endswith("us\n")


def test_bench_result_str_layout():
    result = BenchResult("x", 1.5, 1.5, 1.5)
    assert str(result) == (
        f"x: min {format_number(1.5)}us / avg {format_number(1.5)}"
        f"us / max {format_number(1.5)}us"
    )


@pytest.mark.parametrize("count,iterations", [(0, 1), (1, 0), (-1, 5)])
def test_run_benchmark_rejects_bad_counts(count, iterations):
    with pytest.raises(ValueError):
        run_benchmark("bad", lambda d: None, None, None, None, count, iterations)