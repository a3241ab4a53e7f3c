'''
VizProb - Probability Distribution Visualizer

Pick a distribution family, adjust its parameters, and view the
probability density and cumulative distribution functions.
'''

from .version import __version__, __date__

from . import distributions
from .distributions import get_distribution, from_config
from .project import ProjectState

__all__ = ['__version__', '__date__', 'distributions', 'get_distribution', 'from_config', 'ProjectState']
