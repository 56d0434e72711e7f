import numpy as np
import pytest

from algolab.pca import (
    choose_components,
    covariance,
    jacobi_eigen,
    load_samples,
    main,
    reduce,
    sort_eigen,
    write_results,
)


def _symmetric(n, seed=0):
    rng = np.random.default_rng(seed)
    m = rng.normal(size=(n, n))
    return m + m.T


def _write_grid(path, rows, columns):
    lines = [" ".join(str(r * 100 + c) for c in range(columns)) for r in range(rows)]
    path.write_text("\n".join(lines) + "\n")


def test_load_samples_keeps_seven_of_ten(tmp_path):
    path = tmp_path / "data.txt"
    _write_grid(path, 20, 3)
    samples = load_samples(path, 20, 3)
    assert samples.shape == (14, 3)
    expected_rows = [0, 1, 2, 3, 4, 5, 6, 10, 11, 12, 13, 14, 15, 16]
    assert list(samples[:, 0]) == [r * 100 for r in expected_rows]
    assert list(samples[0]) == [0.0, 1.0, 2.0]


def test_load_samples_too_few_values(tmp_path):
    path = tmp_path / "data.txt"
    _write_grid(path, 2, 3)
    with pytest.raises(ValueError):
        load_samples(path, 5, 3)


def test_load_samples_rejects_text(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2 x 4")
    with pytest.raises(ValueError):
        load_samples(path, 2, 2)


def test_covariance_matches_numpy():
    rng = np.random.default_rng(1)
    samples = rng.normal(size=(12, 4))
    result = covariance(samples)
    assert result.shape == (4, 4)
    assert np.allclose(result, result.T)
    assert np.allclose(result, np.cov(samples, rowvar=False))
    assert np.allclose(np.diag(result), samples.var(axis=0, ddof=1))


def test_covariance_needs_two_samples():
    with pytest.raises(ValueError):
        covariance(np.ones((1, 3)))


def test_jacobi_finds_eigenvalues():
    matrix = _symmetric(5)
    diagonal, vectors = jacobi_eigen(matrix, 1e-12, 1000)
    off = diagonal - np.diag(np.diag(diagonal))
    assert np.max(np.abs(off)) < 1e-9
    assert np.allclose(np.sort(np.diag(diagonal)), np.linalg.eigvalsh(matrix))
    assert np.allclose(vectors.T @ vectors, np.eye(5))
    assert np.allclose(vectors @ np.diag(np.diag(diagonal)) @ vectors.T, matrix)


def test_jacobi_leaves_diagonal_matrix_alone():
    matrix = np.diag([3.0, 1.0, 2.0])
    diagonal, vectors = jacobi_eigen(matrix)
    assert np.array_equal(diagonal, matrix)
    assert np.array_equal(vectors, np.eye(3))


def test_jacobi_rejects_non_square():
    with pytest.raises(ValueError):
        jacobi_eigen(np.ones((2, 3)))


def test_jacobi_zero_iterations_returns_input():
    matrix = _symmetric(3, seed=2)
    diagonal, vectors = jacobi_eigen(matrix, 1e-12, 0)
    assert np.array_equal(diagonal, matrix)
    assert np.array_equal(vectors, np.eye(3))


def test_sort_eigen_orders_descending():
    values, vectors = sort_eigen(np.array([1.0, 3.0, 2.0]), np.eye(3))
    assert list(values) == [3.0, 2.0, 1.0]
    assert np.array_equal(vectors, np.eye(3)[:, [1, 2, 0]])


def test_sort_eigen_accepts_matrix_diagonal():
    values, vectors = sort_eigen(np.diag([2.0, 5.0]), np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert list(values) == [5.0, 2.0]
    assert np.array_equal(vectors, np.array([[2.0, 1.0], [4.0, 3.0]]))


def test_sort_eigen_shape_mismatch():
    with pytest.raises(ValueError):
        sort_eigen(np.array([1.0, 2.0, 3.0]), np.eye(2))


@pytest.mark.parametrize(
    "percent, expected",
    [(0.5, 0), (0.8, 1), (1.0, 2), (1.5, 3)],
)
def test_choose_components(percent, expected):
    assert choose_components(np.array([5.0, 3.0, 2.0]), percent) == expected


def test_choose_components_zero_total():
    with pytest.raises(ValueError):
        choose_components(np.zeros(3), 0.5)


def test_reduce_with_identity_takes_leading_columns():
    samples = np.arange(12.0).reshape(3, 4)
    result = reduce(samples, np.eye(4), 2)
    assert np.array_equal(result, samples[:, :2])


def test_reduce_rejects_bad_count():
    with pytest.raises(ValueError):
        reduce(np.ones((2, 2)), np.eye(2), 3)


def test_write_results_files(tmp_path):
    rng = np.random.default_rng(3)
    samples = rng.normal(size=(10, 4))
    diagonal, vectors = jacobi_eigen(covariance(samples), 1e-12, 500)
    count = write_results(tmp_path, diagonal, vectors, samples, 0.9)
    assert 0 <= count <= 4
    written = np.loadtxt(tmp_path / "tzz.txt")
    assert np.allclose(written, diagonal)
    assert np.allclose(np.loadtxt(tmp_path / "tzxl.txt"), vectors)
    low_lines = (tmp_path / "low.txt").read_text().splitlines()
    assert len(low_lines) == 10
    assert all(len(line.split()) == count for line in low_lines)
    chosen_lines = (tmp_path / "c_tzxl.txt").read_text().splitlines()
    assert len(chosen_lines) == 4


def test_main_runs_pipeline(tmp_path):
    rng = np.random.default_rng(4)
    data = rng.normal(size=(10, 3))
    path = tmp_path / "samples.txt"
    path.write_text("\n".join(" ".join(str(v) for v in row) for row in data))
    out = tmp_path / "out"
    code = main([str(path), "--rows", "10", "--columns", "3", "--output", str(out),
                 "--tolerance", "1e-12", "--max-iterations", "200"])
    assert code == 0
    assert np.loadtxt(out / "tzz.txt").shape == (3, 3)


def test_main_reports_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt"), "--rows", "2", "--columns", "2"]) == 1