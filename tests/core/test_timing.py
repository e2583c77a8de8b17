"""
Tests for the section timer.
"""

import time

import pytest

from pylinalg.core.compute import Timer


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section('factorization'):
            time.sleep(0.001)
        timer.stop()

        result = timer.result()
        assert set(result) == {'total_seconds', 'factorization'}
        assert result['factorization'] > 0
        assert result['total_seconds'] >= result['factorization']

    def test_repeated_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('residual'):
                time.sleep(0.001)
        timer.stop()
        assert timer.result()['residual'] >= 0.003

    def test_section_recorded_on_error(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert 'failing' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()
