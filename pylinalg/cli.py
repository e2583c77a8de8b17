"""
PyLinalg Command Line Interface

Usage:
    pylinalg <command> DIRECTORY PROBLEM

Commands:
    make_lu     LU-decompose Amat<n>.m into Lmat<n>.m and Umat<n>.m
    lu_gauss    Solve with Lmat/Umat (or Amat) and bvec<n>.m into xvec<n>.m
    make_qr     QR-decompose Amat<n>.m into Qmat<n>.m and Rmat<n>.m
    qr_gauss    Solve with Qmat/Rmat (or Amat) and bvec<n>.m into xvec<n>.m
    find_poly   Characteristic polynomial of Amat<n>.m into cvec<n>.m

Examples:
    pylinalg make_lu ./matrices 3
    pylinalg make_qr ./matrices 7
    pylinalg find_poly ./matrices 10
"""

import argparse
import sys
from pathlib import Path

from pylinalg import eigen, lu, qr
from pylinalg.core.exceptions import PyLinalgError
from pylinalg.io.matfile import (
    L_STEM,
    MATRIX_STEM,
    POLYNOMIAL_STEM,
    Q_STEM,
    R_STEM,
    RHS_STEM,
    SOLUTION_STEM,
    U_STEM,
    problem_file,
    read_matrix,
    write_matrix,
    write_polynomial,
)
from pylinalg.qr.solvers import DEFAULT_SOLVE_METHOD


def _micros(timing: dict[str, float] | None, section: str) -> int:
    if not timing:
        return 0
    return round(timing.get(section, timing.get('total_seconds', 0.0)) * 1e6)


def _stored_factors(directory: Path, problem: int, stems: tuple[str, str]):
    """Both stored factor files, or None if either is missing."""
    first = problem_file(directory, stems[0], problem)
    second = problem_file(directory, stems[1], problem)
    if not (first.is_file() and second.is_file()):
        return None
    return read_matrix(first)[0], read_matrix(second)[0]


# ============================================================
# COMMANDS
# ============================================================

def cmd_make_lu(args: argparse.Namespace) -> None:
    """LU-decompose the problem matrix and store the factors."""
    directory, problem = Path(args.directory), args.problem
    print(f"Problem {problem}")

    A, _ = read_matrix(problem_file(directory, MATRIX_STEM, problem))
    result = lu.decompose(A)

    write_matrix(result.L, problem_file(directory, L_STEM, problem))
    write_matrix(result.U, problem_file(directory, U_STEM, problem))

    print(
        f"\tTook {_micros(result.timing, 'factorization')}μs, "
        f"∥LU - A∥ = {result.residual_norm}"
    )


def cmd_lu_gauss(args: argparse.Namespace) -> None:
    """Solve A·x = b from stored L, U (or by factoring A)."""
    directory, problem = Path(args.directory), args.problem

    b, _ = read_matrix(problem_file(directory, RHS_STEM, problem))
    factors = _stored_factors(directory, problem, (L_STEM, U_STEM))
    if factors is None:
        A, _ = read_matrix(problem_file(directory, MATRIX_STEM, problem))
        decomposition = lu.decompose(A)
        factors = decomposition.L, decomposition.U

    print(f"Problem {problem}")
    solution = lu.solve_from_factors(*factors, b)
    write_matrix(solution.x, problem_file(directory, SOLUTION_STEM, problem))

    print(
        f"\tTook {_micros(solution.timing, 'substitution')}μs, "
        f"∥LUx - b∥ = {solution.residual_norm}"
    )


def cmd_make_qr(args: argparse.Namespace) -> None:
    """QR-decompose the problem matrix with the method its file names."""
    directory, problem = Path(args.directory), args.problem

    A, method = read_matrix(problem_file(directory, MATRIX_STEM, problem))
    print(f"Problem {problem}")
    if method is None:
        print("No method given! Assuming Gram-Schmidt")

    result = qr.decompose(A, method)

    write_matrix(result.Q, problem_file(directory, Q_STEM, problem))
    write_matrix(result.R, problem_file(directory, R_STEM, problem))

    print(
        f"\tTook {_micros(result.timing, 'factorization')}μs, "
        f"∥QR - A∥ = {result.residual_norm}"
    )


def cmd_qr_gauss(args: argparse.Namespace) -> None:
    """Solve A·x = b from stored Q, R (or by factoring A)."""
    directory, problem = Path(args.directory), args.problem

    b, _ = read_matrix(problem_file(directory, RHS_STEM, problem))
    print(f"Problem {problem}")

    factors = _stored_factors(directory, problem, (Q_STEM, R_STEM))
    if factors is None:
        A, method = read_matrix(problem_file(directory, MATRIX_STEM, problem))
        decomposition = qr.decompose(A, method or DEFAULT_SOLVE_METHOD)
        factors = decomposition.Q, decomposition.R

    solution = qr.solve_from_factors(*factors, b)
    write_matrix(solution.x, problem_file(directory, SOLUTION_STEM, problem))

    print(
        f"\tTook {_micros(solution.timing, 'substitution')}μs, "
        f"∥QRx - b∥ = {solution.residual_norm}"
    )


def cmd_find_poly(args: argparse.Namespace) -> None:
    """Exact characteristic polynomial of the problem matrix."""
    directory, problem = Path(args.directory), args.problem
    print(f"Problem {problem}")

    A, _ = read_matrix(problem_file(directory, MATRIX_STEM, problem))
    result = eigen.charpoly(A, exact=True)

    print(f"\tTook {_micros(result.timing, 'recurrence')}μs")
    write_polynomial(result.polynomial, problem_file(directory, POLYNOMIAL_STEM, problem))


COMMANDS = {
    'make_lu': (cmd_make_lu, 'LU-decompose Amat<n>.m into Lmat<n>.m and Umat<n>.m'),
    'lu_gauss': (cmd_lu_gauss, 'Solve A·x = b by LU into xvec<n>.m'),
    'make_qr': (cmd_make_qr, 'QR-decompose Amat<n>.m into Qmat<n>.m and Rmat<n>.m'),
    'qr_gauss': (cmd_qr_gauss, 'Solve A·x = b by QR into xvec<n>.m'),
    'find_poly': (cmd_find_poly, 'Characteristic polynomial of Amat<n>.m into cvec<n>.m'),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pylinalg',
        description='PyLinalg: decompositions of matrices stored as .m files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split('Examples:')[1],
    )
    subparsers = parser.add_subparsers(dest='command', help='Operation to run')

    for name, (_, help_text) in COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('directory', help='Directory holding the problem files')
        sub.add_argument('problem', type=int, help='Problem number n (files are named <stem><n>.m)')

    return parser


def main(argv: list[str] | None = None) -> int:
    """PyLinalg CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handler, _ = COMMANDS[args.command]
    try:
        handler(args)
    except (PyLinalgError, OSError) as e:
        print(f"Error: {e}")
        return 1

    print("Done!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
