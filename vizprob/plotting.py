''' Plotting grid and pdf/cdf line plots of a distribution '''

import numpy as np
import matplotlib.pyplot as plt


XMIN = -10
XMAX = 10
NPOINTS = 1000
ASPECT = 2.0  # Plot width/height


def grid(xmin=XMIN, xmax=XMAX, num=NPOINTS):
    ''' Evenly spaced x values (endpoints included) to evaluate on '''
    return np.linspace(xmin, xmax, num=num)


def initplot(plot=None):
    ''' Initialize a Figure and Axis to plot on.

        Args:
            plot: plt.Figure, plt.Axis, or None. If None, new figure and
                axis will be created. If Figure or Axis, the Figure AND Axis
                will be returned.

        Returns:
            fig: plt.Figure instance
            ax: plt.Axis instance
    '''
    if plot is None:
        fig = plt.gcf()
        ax = plt.gca()
    elif hasattr(plot, 'gca'):
        fig, ax = plot, plot.gca()
    elif hasattr(plot, 'figure'):
        fig, ax = plot.figure, plot
    else:
        raise ValueError('Undefined plot type')
    return fig, ax


def plot_distribution(dist, plot=None):
    ''' Plot the pdf and cdf of the distribution over the fixed grid.
        Recomputed on every call.

        Args:
            dist (Distribution): Distribution to plot
            plot: plt.Figure, plt.Axis, or None to plot on

        Returns:
            ax: plt.Axis instance with the two lines
    '''
    _, ax = initplot(plot)
    ax.cla()
    pdf, cdf = dist.evaluate(grid())
    ax.plot(pdf[:, 0], pdf[:, 1], label='pdf')
    ax.plot(cdf[:, 0], cdf[:, 1], label='cdf')
    ax.set_xlim(XMIN, XMAX)
    ax.set_box_aspect(1/ASPECT)
    ax.set_xlabel('x')
    ax.legend(loc='upper left')
    return ax
