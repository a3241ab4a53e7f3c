''' Application state: the active distribution, saved and loaded as YAML '''

import logging
import yaml

from . import distributions


class ProjectState:
    ''' Application state holding exactly one active distribution

        Args:
            dist (Distribution): The active distribution. Defaults to
                Uniform(-1, 1).
    '''
    def __init__(self, dist=None):
        if dist is None:
            dist = distributions.get_distribution(distributions.DEFAULT)
        self.distribution = dist

    def __eq__(self, other):
        if not isinstance(other, ProjectState):
            return NotImplemented
        return self.distribution == other.distribution

    def __repr__(self):
        return f'ProjectState({self.distribution!r})'

    def select(self, name):
        ''' Switch to a new distribution family. Replaces the active
            distribution with one using the family default parameters.
        '''
        self.distribution = distributions.get_distribution(name)
        return self.distribution

    def set_param(self, name, value):
        ''' Edit a parameter of the active distribution. Returns the clamped value stored. '''
        return self.distribution.set_param(name, value)

    def get_config(self):
        ''' Get configuration dictionary '''
        return {'distribution': self.distribution.get_config()}

    def load_config(self, config):
        ''' Load config into this state. Missing or unknown fields take default values. '''
        if isinstance(config, list) and len(config) > 0:
            config = config[0]
        if not isinstance(config, dict):
            config = {}
        self.distribution = distributions.from_config(config.get('distribution'))

    @classmethod
    def from_config(cls, config):
        ''' Create new state from the config dictionary '''
        state = cls()
        state.load_config(config)
        return state

    def dumps(self):
        ''' Serialize the state to a YAML string '''
        return yaml.safe_dump(self.get_config(), default_flow_style=False)

    @classmethod
    def loads(cls, yml):
        ''' Create new state from a YAML string. Unreadable YAML gives the default state. '''
        try:
            config = yaml.safe_load(yml) if yml else None
        except yaml.YAMLError as exc:
            logging.warning(f'Could not read saved state, using defaults: {exc}')
            config = None
        return cls.from_config(config)
