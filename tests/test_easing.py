import numpy as np
import pytest

from hexapod.animation import Easing, cubic_bezier, ease


@pytest.mark.parametrize('easing', list(Easing))
def test_easing_keeps_end_points(easing):
    assert ease(0.0, easing) == pytest.approx(0.0, abs=1e-9)
    assert ease(1.0, easing) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize('easing', list(Easing))
def test_easing_is_monotonic(easing):
    values = [ease(t, easing) for t in np.linspace(0.0, 1.0, 101)]

    assert all(b >= a - 1e-6 for a, b in zip(values, values[1:]))
    assert all(-1e-9 <= value <= 1 + 1e-9 for value in values)


def test_closed_forms():
    assert ease(0.5, 'linear') == 0.5
    assert ease(0.5, 'ease-in') == pytest.approx(0.25)
    assert ease(0.5, 'ease-out') == pytest.approx(0.75)
    assert ease(0.25, 'ease-in-out') == pytest.approx(0.125)
    assert ease(0.75, 'ease-in-out') == pytest.approx(0.875)
    assert ease(0.5, 'ease') == pytest.approx(0.75 * 0.5 - 0.75 * 0.25 + 0.125)


def test_unknown_easing():
    with pytest.raises(ValueError):
        ease(0.5, 'bounce')


def test_cubic_bezier_on_the_diagonal_is_linear():
    for t in (0.1, 0.33, 0.5, 0.9):
        assert cubic_bezier(t, 0.25, 0.25, 0.75, 0.75) == pytest.approx(t, abs=1e-5)


def test_cubic_bezier_clamps_time():
    assert cubic_bezier(-0.5, 0.17, 0.67, 0.83, 0.67) == pytest.approx(0.0)
    assert cubic_bezier(1.5, 0.17, 0.67, 0.83, 0.67) == pytest.approx(1.0)
