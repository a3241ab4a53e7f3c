''' Probability Distributions

Each selectable distribution family is a small class holding two named
parameters and wrapping the matching frozen scipy.stats distribution,
so pdf() and cdf() behave the same way for every family.

Parameters always stay inside their legal range. Values set out of
range are clamped to the nearest legal value, never rejected.

Use get_distribution(), given a family name, to return a new instance,
or from_config() to rebuild one from a saved configuration dictionary.
'''

import math
import numpy as np
import scipy.stats as stats


class Distribution:
    ''' Base class for the selectable distribution families

        Subclasses define the family name, the parameter names (in display
        order), default values, field labels, and the frozen scipy
        distribution via frozen().

        Parameters
        ----------
        kwds: keyword arguments
            Parameter values. Missing parameters use the family default.
    '''
    name = ''
    argnames = []
    defaults = {}
    labels = {}
    limits = {}   # Static (low, high) range for constrained parameters

    def __init__(self, **kwds):
        self.params = dict(self.defaults)
        for name, value in kwds.items():
            if name not in self.argnames:
                raise KeyError(name)
            value = float(value)
            if not math.isnan(value):
                self.params[name] = value
        for name in self.argnames:
            self.set_param(name, self.params[name])

    def __getattr__(self, name):
        ''' Parameter values are available as attributes (e.g. dist.sigma) '''
        params = self.__dict__.get('params', {})
        if name in params:
            return params[name]
        raise AttributeError(name)

    def __eq__(self, other):
        if not isinstance(other, Distribution):
            return NotImplemented
        return self.name == other.name and self.params == other.params

    def __repr__(self):
        args = ', '.join(f'{k}={self.params[k]:g}' for k in self.argnames)
        return f'{self.name}({args})'

    def clamp_range(self, name):
        ''' Get the (low, high) range of legal values for the parameter '''
        if name not in self.argnames:
            raise KeyError(name)
        return self.limits.get(name, (-np.inf, np.inf))

    def set_param(self, name, value):
        ''' Set a parameter, clamping to its legal range.

            Parameters
            ----------
            name: string
                Name of parameter
            value: float
                New value. NaN is ignored.

            Returns
            -------
            value: float
                The value actually stored
        '''
        low, high = self.clamp_range(name)
        value = float(value)
        if not math.isnan(value):
            self.params[name] = min(max(value, low), high)
        return self.params[name]

    def frozen(self):
        ''' Get the frozen scipy.stats distribution. Subclass this. '''
        raise NotImplementedError

    def pdf(self, x):
        ''' Probability density at x '''
        return self.frozen().pdf(x)

    def cdf(self, x):
        ''' Cumulative probability at x '''
        return self.frozen().cdf(x)

    def evaluate(self, x):
        ''' Evaluate the pdf and cdf over the grid x

            Parameters
            ----------
            x: array
                Grid of x values

            Returns
            -------
            pdf: array
                (N, 2) array of (x, pdf(x)) rows
            cdf: array
                (N, 2) array of (x, cdf(x)) rows
        '''
        x = np.asarray(x, dtype=float)
        dist = self.frozen()
        return np.column_stack((x, dist.pdf(x))), np.column_stack((x, dist.cdf(x)))

    def summary(self):
        ''' Get mean and standard deviation of the distribution '''
        dist = self.frozen()
        return {'mean': float(dist.mean()), 'std': float(dist.std())}

    def get_config(self):
        ''' Get configuration dictionary (parameters plus distribution name) '''
        d = {'dist': self.name}
        d.update({k: float(self.params[k]) for k in self.argnames})
        return d


class Uniform(Distribution):
    ''' Uniform distribution between lower_bound and upper_bound '''
    name = 'Uniform'
    argnames = ['lower_bound', 'upper_bound']
    defaults = {'lower_bound': -1., 'upper_bound': 1.}
    labels = {'lower_bound': 'Lower bound: ', 'upper_bound': 'Upper bound: '}

    def clamp_range(self, name):
        ''' Bounds may not cross each other '''
        if name == 'lower_bound':
            return -np.inf, self.params['upper_bound']
        elif name == 'upper_bound':
            return self.params['lower_bound'], np.inf
        raise KeyError(name)

    def frozen(self):
        lower = self.params['lower_bound']
        return stats.uniform(loc=lower, scale=self.params['upper_bound'] - lower)


class Gaussian(Distribution):
    ''' Normal distribution with mean mu and standard deviation sigma '''
    name = 'Gaussian'
    argnames = ['mu', 'sigma']
    defaults = {'mu': 0., 'sigma': 1.}
    labels = {'mu': 'mu: ', 'sigma': 'sigma: '}
    limits = {'sigma': (0, np.inf)}

    def frozen(self):
        return stats.norm(loc=self.params['mu'], scale=self.params['sigma'])


class Gamma(Distribution):
    ''' Gamma distribution with shape k and scale theta '''
    name = 'Gamma'
    argnames = ['k', 'theta']
    defaults = {'k': 2., 'theta': 1.}
    labels = {'k': 'k: ', 'theta': 'theta: '}
    limits = {'k': (0, np.inf), 'theta': (0, np.inf)}

    def frozen(self):
        return stats.gamma(a=self.params['k'], scale=self.params['theta'])


class LogNormal(Distribution):
    ''' Log-normal distribution. The log of the variable is normal with mean mu and
        standard deviation sigma.
    '''
    name = 'LogNormal'
    argnames = ['mu', 'sigma']
    defaults = {'mu': 0., 'sigma': 1.}
    labels = {'mu': 'mu: ', 'sigma': 'sigma: '}
    limits = {'sigma': (0, np.inf)}

    def frozen(self):
        # scipy parameterizes lognorm by s=sigma and scale=exp(mu)
        with np.errstate(over='ignore'):
            scale = np.exp(self.params['mu'])  # inf for very large mu
        return stats.lognorm(s=self.params['sigma'], scale=scale)


_families = {d.name: d for d in [Uniform, Gaussian, Gamma, LogNormal]}
DISTRIBUTIONS = list(_families.keys())
DEFAULT = 'Uniform'


def get_distribution(name, **kwds):
    ''' Get an instance of the Distribution class.

        Parameters
        ----------
        name: string
            Name of the distribution family
        kwds: keyword arguments
            Parameter values. Missing ones use the family defaults.
    '''
    try:
        cls = _families[name]
    except KeyError:
        raise ValueError(f'Unknown distribution `{name}`') from None
    return cls(**kwds)


def from_config(config):
    ''' Load a Distribution instance from a config dictionary.

        The config is merged with defaults: an unknown or missing family
        name gives the default Uniform distribution, and missing or
        non-numeric parameters take the family default value.
    '''
    if not isinstance(config, dict) or config.get('dist') not in _families:
        return get_distribution(DEFAULT)

    cls = _families[config['dist']]
    kwds = {}
    for arg in cls.argnames:
        value = config.get(arg, cls.defaults[arg])
        try:
            value = float(value)
        except (TypeError, ValueError):
            value = cls.defaults[arg]
        if not math.isfinite(value):
            value = cls.defaults[arg]
        kwds[arg] = value
    return cls(**kwds)
