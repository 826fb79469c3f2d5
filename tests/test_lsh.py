import math
import random

import pytest

from dsalgo.lsh import (
    LSHFamily,
    LSHTable,
    SearchResult,
    benchmark,
    cosine_distance,
    main,
    naive_retrieve,
    sample_amplified_lsh_function,
    sample_dataset,
    sample_lsh_function,
    sample_unit_vector,
)


def test_unit_vector_has_unit_norm_and_dimension():
    rng = random.Random(1)
    vec = sample_unit_vector(rng, 5)
    assert len(vec) == 5
    assert math.isclose(sum(x * x for x in vec), 1.0, rel_tol=1e-12)


def test_sampling_is_reproducible_with_seed():
    first = sample_dataset(4, random.Random(7))
    second = sample_dataset(4, random.Random(7))
    other = sample_dataset(4, random.Random(8))
    assert len(first) == 4
    assert first == second
    assert first != other


def test_dataset_size_and_norms():
    data = sample_dataset(20, random.Random(3))
    assert len(data) == 20
    assert all(math.isclose(sum(x * x for x in v), 1.0) for v in data)


def test_cosine_distance_identical_and_opposite():
    v = (1.0, 2.0, 3.0)
    assert cosine_distance(v, v) == pytest.approx(0.0, abs=1e-12)
    assert cosine_distance(v, tuple(-x for x in v)) == pytest.approx(2.0)
    assert cosine_distance((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == pytest.approx(1.0)


def test_cosine_distance_is_symmetric():
    rng = random.Random(5)
    a, b = sample_unit_vector(rng), sample_unit_vector(rng)
    assert cosine_distance(a, b) == pytest.approx(cosine_distance(b, a))


def test_cosine_distance_zero_vector_raises():
    with pytest.raises(ValueError):
        cosine_distance((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))


def test_binary_lsh_function_splits_opposite_vectors():
    rng = random.Random(11)
    f = sample_lsh_function(rng)
    for v in sample_dataset(30, rng):
        neg = tuple(-x for x in v)
        assert {f(v), f(neg)} == {0, 1}


def test_amplified_code_fits_in_r_bits():
    rng = random.Random(2)
    f = sample_amplified_lsh_function(6, rng)
    codes = [f(v) for v in sample_dataset(50, rng)]
    assert all(0 <= c < 2**6 for c in codes)


@pytest.mark.parametrize("r", [0, 33])
def test_amplification_out_of_range(r):
    with pytest.raises(ValueError):
        sample_amplified_lsh_function(r, random.Random(0))


def test_family_samples_functions_of_given_width():
    rng = random.Random(4)
    family = LSHFamily(3, rng)
    f = family()
    assert all(0 <= f(v) < 8 for v in sample_dataset(20, rng))


def test_empty_table_finds_nothing():
    rng = random.Random(0)
    table = LSHTable(4, 2, LSHFamily(2, rng))
    result = table.get(sample_unit_vector(rng), 10, 0)
    assert result == SearchResult(math.inf, None, 0)


def test_table_finds_stored_key_exactly():
    rng = random.Random(8)
    data = sample_dataset(40, rng)
    table = LSHTable(16, 2, LSHFamily(4, rng))
    for key in data:
        table.insert(key)
    query = data[17]
    result = table.get(query, 10_000, 1e-9)
    assert result.key == query
    assert result.distance == pytest.approx(0.0, abs=1e-9)


def test_table_respects_comparison_budget_and_beats_no_scan():
    rng = random.Random(9)
    data = sample_dataset(100, rng)
    table = LSHTable(2, 3, LSHFamily(1, rng))
    for key in data:
        table.insert(key)
    for query in sample_dataset(10, rng):
        result = table.get(query, 5, 0)
        assert 1 <= result.num_comparisons <= 5
        best = naive_retrieve(data, query)
        assert result.distance >= best.distance - 1e-12


def test_naive_retrieve_finds_minimum():
    rng = random.Random(12)
    data = sample_dataset(25, rng)
    query = sample_unit_vector(rng)
    result = naive_retrieve(data, query)
    assert result.num_comparisons == len(data) + 1
    assert result.key == min(data, key=lambda k: cosine_distance(k, query))
    assert result.distance == cosine_distance(result.key, query)


def test_naive_retrieve_empty_dataset():
    result = naive_retrieve([], (1.0, 0.0, 0.0))
    assert result == SearchResult(math.inf, None, 1)


def test_benchmark_statistics():
    values = {"a": 1.0, "b": 3.0}
    mean, variance, rate = benchmark(["a", "b"], values.__getitem__)
    assert mean == pytest.approx(2.0)
    assert variance == pytest.approx(1.0)
    assert rate == 1.0


def test_benchmark_ignores_infinite_distances():
    values = {"a": 1.0, "b": math.inf}
    mean, variance, rate = benchmark(["a", "b"], values.__getitem__)
    assert mean == pytest.approx(1.0)
    assert variance == pytest.approx(0.0)
    assert rate == 0.5


def test_benchmark_all_infinite():
    mean, variance, rate = benchmark(["x"], lambda q: math.inf)
    assert math.isnan(mean) and math.isnan(variance)
    assert rate == 0.0


def test_main_prints_table(capsys):
    assert main(["--dataset-size", "30", "--queries", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3 + 60
    assert lines[0].startswith("| #tables | #comp.  | amplif. | distance")
    assert lines[2].startswith("| -       | 30      | -       |")
    assert all(line.startswith("| ") and line.endswith("|") for line in lines)