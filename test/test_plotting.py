''' Test the plotting grid and pdf/cdf line plots '''
import numpy as np
import pytest
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg

from vizprob import distributions, plotting


def test_grid():
    x = plotting.grid()
    assert len(x) == 1000
    assert x[0] == -10
    assert x[-1] == 10
    assert np.allclose(np.diff(x), 20/999)


def test_plot_lines():
    dist = distributions.get_distribution('Gamma')
    fig = Figure()
    ax = fig.add_subplot(1, 1, 1)
    plotting.plot_distribution(dist, ax)
    lines = ax.get_lines()
    assert [line.get_label() for line in lines] == ['pdf', 'cdf']
    for line in lines:
        assert len(line.get_xdata()) == 1000
        assert np.array_equal(line.get_xdata(), plotting.grid())
    assert np.allclose(lines[0].get_ydata(), dist.pdf(plotting.grid()))
    assert np.allclose(lines[1].get_ydata(), dist.cdf(plotting.grid()))
    assert ax.get_legend() is not None
    assert ax.get_xlim() == (-10, 10)


def test_replot():
    # Each call redraws from scratch with the current parameters
    dist = distributions.get_distribution('Gaussian')
    fig = Figure()
    ax = fig.add_subplot(1, 1, 1)
    plotting.plot_distribution(dist, ax)
    dist.set_param('sigma', 3)
    plotting.plot_distribution(dist, ax)
    lines = ax.get_lines()
    assert len(lines) == 2
    assert np.allclose(lines[0].get_ydata(), dist.pdf(plotting.grid()))


def test_plot_figure():
    fig = Figure()
    ax = plotting.plot_distribution(distributions.get_distribution('Uniform'), fig)
    assert ax.figure is fig
    assert len(ax.get_lines()) == 2

    with pytest.raises(ValueError):
        plotting.initplot('abc')


def test_degenerate_plot():
    # Zero variance gives nan curves that still draw
    fig = Figure()
    FigureCanvasAgg(fig)
    ax = plotting.plot_distribution(distributions.get_distribution('Gaussian', sigma=0), fig)
    fig.canvas.draw()
    assert len(ax.get_lines()) == 2
