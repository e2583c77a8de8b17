"""
Tests for the command line interface.
"""

import numpy as np
import pytest

from pylinalg.algebra.matrix import Matrix
from pylinalg.cli import build_parser, main
from pylinalg.io import format_matrix, read_matrix


A_TEXT = "A = ...\n[4 3;\n6 3];"
B_TEXT = "b = ...\n[7;\n9];"
TRIDIAGONAL_TEXT = "A = ...\n[2 1 0;\n1 2 1;\n0 1 2];"


@pytest.fixture
def problem_dir(tmp_path):
    (tmp_path / 'Amat1.m').write_text(A_TEXT, encoding='utf-8')
    (tmp_path / 'bvec1.m').write_text(B_TEXT, encoding='utf-8')
    return tmp_path


def read_vector(path):
    matrix, _ = read_matrix(path)
    return matrix.to_array().ravel()


class TestMakeLU:

    def test_writes_factors(self, problem_dir, capsys):
        assert main(['make_lu', str(problem_dir), '1']) == 0

        L, _ = read_matrix(problem_dir / 'Lmat1.m')
        U, _ = read_matrix(problem_dir / 'Umat1.m')
        np.testing.assert_array_equal(L.to_array(), [[1, 0], [1.5, 1]])
        np.testing.assert_array_equal(U.to_array(), [[4, 3], [0, -1.5]])

        out = capsys.readouterr().out
        assert out.startswith("Problem 1\n")
        assert "∥LU - A∥ = 0.0" in out
        assert out.rstrip().endswith("Done!")

    def test_singular_matrix(self, tmp_path, capsys):
        (tmp_path / 'Amat2.m').write_text("A = ...\n[0 1;\n1 0];", encoding='utf-8')
        assert main(['make_lu', str(tmp_path), '2']) == 1
        assert "Error:" in capsys.readouterr().out
        assert not (tmp_path / 'Lmat2.m').exists()

    def test_missing_matrix(self, tmp_path, capsys):
        assert main(['make_lu', str(tmp_path), '5']) == 1
        assert "Error:" in capsys.readouterr().out


class TestLUGauss:

    def test_without_stored_factors(self, problem_dir, capsys):
        assert main(['lu_gauss', str(problem_dir), '1']) == 0
        np.testing.assert_allclose(read_vector(problem_dir / 'xvec1.m'), [1.0, 1.0])
        assert "∥LUx - b∥" in capsys.readouterr().out

    def test_with_stored_factors(self, problem_dir):
        assert main(['make_lu', str(problem_dir), '1']) == 0
        assert main(['lu_gauss', str(problem_dir), '1']) == 0
        np.testing.assert_allclose(read_vector(problem_dir / 'xvec1.m'), [1.0, 1.0])

    def test_missing_rhs(self, tmp_path, capsys):
        (tmp_path / 'Amat1.m').write_text(A_TEXT, encoding='utf-8')
        assert main(['lu_gauss', str(tmp_path), '1']) == 1
        assert "Error:" in capsys.readouterr().out


class TestMakeQR:

    def test_defaults_to_gram_schmidt(self, problem_dir, capsys):
        assert main(['make_qr', str(problem_dir), '1']) == 0
        out = capsys.readouterr().out
        assert "No method given! Assuming Gram-Schmidt" in out
        assert "∥QR - A∥" in out

        Q, _ = read_matrix(problem_dir / 'Qmat1.m')
        R, _ = read_matrix(problem_dir / 'Rmat1.m')
        np.testing.assert_allclose(Q.to_array() @ R.to_array(), [[4, 3], [6, 3]], atol=1e-12)

    def test_method_header(self, tmp_path, capsys):
        (tmp_path / 'Amat3.m').write_text("Method=2\n" + A_TEXT, encoding='utf-8')
        assert main(['make_qr', str(tmp_path), '3']) == 0
        assert "No method given" not in capsys.readouterr().out

    def test_givens_on_complex_fails(self, tmp_path, capsys):
        (tmp_path / 'Amat4.m').write_text(
            "Method=2\nA = complex([1 2;\n3 4],[1 0;\n0 1]);", encoding='utf-8'
        )
        assert main(['make_qr', str(tmp_path), '4']) == 1
        assert "Error:" in capsys.readouterr().out


class TestQRGauss:

    def test_without_stored_factors(self, problem_dir, capsys):
        assert main(['qr_gauss', str(problem_dir), '1']) == 0
        np.testing.assert_allclose(read_vector(problem_dir / 'xvec1.m'), [1.0, 1.0], atol=1e-12)
        assert "∥QRx - b∥" in capsys.readouterr().out

    def test_with_stored_factors(self, problem_dir):
        assert main(['make_qr', str(problem_dir), '1']) == 0
        assert main(['qr_gauss', str(problem_dir), '1']) == 0
        np.testing.assert_allclose(read_vector(problem_dir / 'xvec1.m'), [1.0, 1.0], atol=1e-12)

    def test_complex_system(self, tmp_path, rng):
        A = rng.standard_normal((3, 3)) + 1j * rng.standard_normal((3, 3)) + 4 * np.eye(3)
        b = rng.standard_normal(3)
        (tmp_path / 'Amat1.m').write_text(format_matrix(Matrix.from_array(A)), encoding='utf-8')
        (tmp_path / 'bvec1.m').write_text(format_matrix(Matrix.from_array(b)), encoding='utf-8')

        assert main(['qr_gauss', str(tmp_path), '1']) == 0
        np.testing.assert_allclose(
            read_vector(tmp_path / 'xvec1.m'), np.linalg.solve(A, b), rtol=1e-9
        )

    def test_zero_matrix(self, tmp_path, capsys):
        (tmp_path / 'Amat2.m').write_text("A = ...\n[0 0;\n0 0];", encoding='utf-8')
        (tmp_path / 'bvec2.m').write_text(B_TEXT, encoding='utf-8')
        assert main(['qr_gauss', str(tmp_path), '2']) == 1
        assert "Error:" in capsys.readouterr().out
        assert not (tmp_path / 'xvec2.m').exists()


class TestFindPoly:

    def test_writes_coefficients(self, tmp_path, capsys):
        (tmp_path / 'Amat1.m').write_text(TRIDIAGONAL_TEXT, encoding='utf-8')
        assert main(['find_poly', str(tmp_path), '1']) == 0
        text = (tmp_path / 'cvec1.m').read_text(encoding='utf-8')
        assert text == "cvec = ...\n[-1; 6; -10; 4];"
        assert "Took" in capsys.readouterr().out

    def test_not_tridiagonal(self, tmp_path, capsys):
        (tmp_path / 'Amat2.m').write_text("A = ...\n[1 0 1;\n0 1 0;\n0 0 1];", encoding='utf-8')
        assert main(['find_poly', str(tmp_path), '2']) == 1
        assert "Error:" in capsys.readouterr().out


class TestParser:

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_problem_must_be_integer(self):
        with pytest.raises(SystemExit):
            main(['make_lu', '.', 'three'])

    def test_all_commands_registered(self):
        parser = build_parser()
        for command in ['make_lu', 'lu_gauss', 'make_qr', 'qr_gauss', 'find_poly']:
            args = parser.parse_args([command, 'dir', '1'])
            assert args.command == command
            assert args.problem == 1
