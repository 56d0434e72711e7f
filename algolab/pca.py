"""Principal component analysis with the cyclic-free Jacobi eigenvalue method.

Samples are rows of a matrix. Their covariance matrix is diagonalised by
Jacobi rotations, which always annihilate the largest off-diagonal entry.
The eigenvectors are then ranked by eigenvalue, and only as many are kept as
are needed to explain a chosen share of the total variance. The samples are
projected onto those vectors.
"""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from pathlib import Path

import numpy as np

__all__ = [
    "load_samples",
    "covariance",
    "jacobi_eigen",
    "sort_eigen",
    "choose_components",
    "reduce",
    "write_results",
    "main",
]

DEFAULT_TOLERANCE = 1e-16
DEFAULT_PERCENT = 0.99
# Components kept when the requested share of variance is never reached.
FALLBACK_COMPONENTS = 300

EIGENVALUES_FILE = "tzz.txt"
EIGENVECTORS_FILE = "tzxl.txt"
CHOSEN_VECTORS_FILE = "c_tzxl.txt"
REDUCED_FILE = "low.txt"


def load_samples(path: str | Path, rows: int, columns: int) -> np.ndarray:
    """Read ``rows`` x ``columns`` numbers and keep 7 rows out of every 10.

    Within each block of ten rows the first seven are kept as training
    samples and the last three are skipped.
    """
    if rows < 0 or columns < 0:
        raise ValueError("rows and columns must not be negative")
    tokens = Path(path).read_text().split()
    needed = rows * columns
    if len(tokens) < needed:
        raise ValueError(f"expected {needed} numbers, found {len(tokens)}")
    try:
        data = np.array(tokens[:needed], dtype=float)
    except ValueError as error:
        raise ValueError(f"not a number: {error}") from None
    data = data.reshape(rows, columns)
    keep = np.arange(rows) % 10 < 7
    return data[keep]


def covariance(samples: np.ndarray) -> np.ndarray:
    """Covariance matrix of the columns of ``samples``, divided by n - 1."""
    data = np.asarray(samples, dtype=float)
    if data.ndim != 2:
        raise ValueError("samples must be a two-dimensional matrix")
    count = data.shape[0]
    if count < 2:
        raise ValueError("covariance needs at least two samples")
    centred = data - data.mean(axis=0)
    return centred.T @ centred / (count - 1)


def jacobi_eigen(
    matrix: np.ndarray,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Diagonalise a symmetric matrix by Jacobi rotations.

    Each step rotates away the largest off-diagonal entry. Stops when that
    entry falls below ``tolerance`` or after ``max_iterations`` steps, which
    defaults to n(n-1)/2. Returns the rotated matrix, whose diagonal holds
    the eigenvalues, and the matrix whose columns are the eigenvectors.
    """
    a = np.array(matrix, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError("matrix must be square")
    n = a.shape[0]
    if max_iterations is None:
        max_iterations = n * (n - 1) // 2
    if max_iterations < 0:
        raise ValueError("max_iterations must not be negative")
    vectors = np.eye(n)
    if n < 2:
        return a, vectors
    lower_rows, lower_cols = np.tril_indices(n, k=-1)
    for _ in range(max_iterations):
        off = np.abs(a[lower_rows, lower_cols])
        index = int(np.argmax(off))
        if off[index] < tolerance:
            break
        p, q = int(lower_rows[index]), int(lower_cols[index])
        angle = 0.5 * math.atan2(-2 * a[p, q], a[q, q] - a[p, p])
        c, s = math.cos(angle), math.sin(angle)
        row_p, row_q = a[p].copy(), a[q].copy()
        a[p] = c * row_p + s * row_q
        a[q] = -s * row_p + c * row_q
        col_p, col_q = a[:, p].copy(), a[:, q].copy()
        a[:, p] = c * col_p + s * col_q
        a[:, q] = -s * col_p + c * col_q
        vec_p, vec_q = vectors[:, p].copy(), vectors[:, q].copy()
        vectors[:, p] = c * vec_p + s * vec_q
        vectors[:, q] = -s * vec_p + c * vec_q
    return a, vectors


def sort_eigen(values: np.ndarray, vectors: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Order eigenvalues from largest to smallest, moving their vector columns along.

    ``values`` is either a vector of eigenvalues or a matrix whose diagonal
    holds them. Equal eigenvalues keep their order.
    """
    array = np.asarray(values, dtype=float)
    eigenvalues = np.diag(array).copy() if array.ndim == 2 else array.copy()
    columns = np.asarray(vectors, dtype=float)
    if columns.ndim != 2 or columns.shape[1] != eigenvalues.shape[0]:
        raise ValueError("vectors must have one column per eigenvalue")
    order = np.argsort(-eigenvalues, kind="stable")
    return eigenvalues[order], columns[:, order]


def choose_components(values: np.ndarray, percent: float = DEFAULT_PERCENT) -> int:
    """Number of leading components to keep.

    This is the index at which the running share of the total first reaches
    ``percent``. If it is never reached, ``FALLBACK_COMPONENTS`` is used,
    capped at the number of values.
    """
    array = np.asarray(values, dtype=float)
    eigenvalues = np.diag(array) if array.ndim == 2 else array
    total = float(eigenvalues.sum())
    if total == 0:
        raise ValueError("eigenvalues sum to zero")
    running = 0.0
    for index, value in enumerate(eigenvalues):
        running += float(value)
        if running / total >= percent:
            return index
    return min(FALLBACK_COMPONENTS, len(eigenvalues))


def reduce(samples: np.ndarray, vectors: np.ndarray, count: int) -> np.ndarray:
    """Project the samples onto the first ``count`` eigenvector columns."""
    data = np.asarray(samples, dtype=float)
    basis = np.asarray(vectors, dtype=float)
    if not 0 <= count <= basis.shape[1]:
        raise ValueError(f"count must be within 0..{basis.shape[1]}")
    return data @ basis[:, :count]


def _write_matrix(path: Path, matrix: np.ndarray) -> None:
    with path.open("w") as handle:
        for row in np.atleast_2d(matrix):
            handle.write("".join(f"{value:.20f} " for value in row))
            handle.write("\n")


def write_results(
    directory: str | Path,
    eigen_matrix: np.ndarray,
    vectors: np.ndarray,
    samples: np.ndarray,
    percent: float = DEFAULT_PERCENT,
) -> int:
    """Write the eigen matrix, the eigenvectors, the chosen vectors and the
    reduced samples as text files; return the number of components kept."""
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    eigen_matrix = np.asarray(eigen_matrix, dtype=float)
    vectors = np.asarray(vectors, dtype=float)
    _write_matrix(target / EIGENVALUES_FILE, eigen_matrix)
    _write_matrix(target / EIGENVECTORS_FILE, vectors)
    eigenvalues, ranked = sort_eigen(eigen_matrix, vectors)
    count = choose_components(eigenvalues, percent)
    _write_matrix(target / CHOSEN_VECTORS_FILE, ranked[:, :count])
    _write_matrix(target / REDUCED_FILE, reduce(samples, ranked, count))
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Load samples, find their principal components and write the results."""
    parser = argparse.ArgumentParser(prog="pca", description="Principal component analysis of samples.")
    parser.add_argument("input", nargs="?", default="ORL.txt", help="file of sample values")
    parser.add_argument("--rows", type=int, default=400, help="rows in the file")
    parser.add_argument("--columns", type=int, default=1024, help="values per row")
    parser.add_argument("--percent", type=float, default=DEFAULT_PERCENT, help="share of variance to keep")
    parser.add_argument("--output", default=".", help="directory for the result files")
    parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE, help="convergence threshold")
    parser.add_argument("--max-iterations", type=int, default=None, help="limit on Jacobi rotations")
    args = parser.parse_args(argv)
    try:
        samples = load_samples(args.input, args.rows, args.columns)
        print("samples loaded")
        matrix = covariance(samples)
        print("covariance computed")
        eigen_matrix, vectors = jacobi_eigen(matrix, args.tolerance, args.max_iterations)
        print("eigenvectors computed")
        count = write_results(args.output, eigen_matrix, vectors, samples, args.percent)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"ok: {count} components kept")
    return 0


if __name__ == "__main__":
    sys.exit(main())