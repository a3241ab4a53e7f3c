''' GUI page for selecting a distribution, editing its parameters, and plotting its pdf and cdf '''

from PyQt6 import QtWidgets, QtCore
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.backends.backend_qtagg import NavigationToolbar2QT as NavigationToolbar

from .. import distributions, plotting
from ..project import ProjectState
from . import widgets
from .gui_common import BlockedSignals


class ParameterPanel(QtWidgets.QWidget):
    ''' Side panel with the distribution selector and its parameter fields

        Parameters
        ----------
        state: ProjectState
            Application state. Edits are made to its distribution in place.
    '''
    changed = QtCore.pyqtSignal()

    def __init__(self, state, parent=None):
        super().__init__(parent=parent)
        self.state = state
        self.fields = []
        self.cmbDist = widgets.ComboLabel('Distribution', distributions.DISTRIBUTIONS)
        self.lblName = QtWidgets.QLabel()
        self.lblSummary = QtWidgets.QLabel()
        self.paramlayout = QtWidgets.QVBoxLayout()

        layout = QtWidgets.QVBoxLayout()
        layout.addWidget(self.cmbDist)
        layout.addWidget(self.lblName)
        layout.addLayout(self.paramlayout)
        layout.addWidget(self.lblSummary)
        layout.addStretch()
        self.setLayout(layout)

        with BlockedSignals(self.cmbDist._combo):
            self.cmbDist.setCurrentIndex(self.cmbDist.findText(self.state.distribution.name))
        self.cmbDist.currentIndexChanged.connect(self.change_dist)
        self.fill_params()

    def change_dist(self):
        ''' Distribution family was selected. Replace the distribution with its defaults. '''
        self.state.select(self.cmbDist.currentText())
        self.fill_params()
        self.changed.emit()

    def fill_params(self):
        ''' Build the parameter fields for the active distribution '''
        for field in self.fields:
            self.paramlayout.removeWidget(field)
            field.setParent(None)

        dist = self.state.distribution
        self.lblName.setText(dist.name)
        self.fields = []
        for name in dist.argnames:
            field = widgets.ParamSpinBox(name, dist.labels[name])
            field.valueChanged.connect(lambda value, f=field: self.edit_param(f, value))
            self.paramlayout.addWidget(field)
            self.fields.append(field)
        self.update_fields()

    def edit_param(self, field, value):
        ''' A parameter field was edited. Store the (clamped) value. '''
        self.state.set_param(field.name, value)
        self.update_fields()
        self.changed.emit()

    def update_fields(self):
        ''' Refresh ranges and values of the fields from the distribution '''
        dist = self.state.distribution
        for field in self.fields:
            with BlockedSignals(field):
                field.set_range(*dist.clamp_range(field.name))
                field.setValue(dist.params[field.name])
        summary = dist.summary()
        self.lblSummary.setText(f'Mean: {summary["mean"]:.4g}\nStd. Dev.: {summary["std"]:.4g}')


class DistributionWidget(QtWidgets.QWidget):
    ''' Page widget with parameter panel on the left and pdf/cdf plot on the right '''
    def __init__(self, state=None, parent=None):
        super().__init__(parent)
        if state is None:
            state = ProjectState()
        assert isinstance(state, ProjectState)
        self.state = state

        self.panel = ParameterPanel(self.state)
        self.fig = Figure()
        self.canvas = FigureCanvas(self.fig)
        self.canvas.setStyleSheet("background-color:transparent;")
        self.toolbar = NavigationToolbar(self.canvas, self, coordinates=True)

        rlayout = QtWidgets.QVBoxLayout()
        rlayout.addWidget(self.canvas, stretch=10)
        rlayout.addWidget(self.toolbar)
        self.rightwidget = QtWidgets.QWidget()
        self.rightwidget.setLayout(rlayout)
        self.splitter = QtWidgets.QSplitter()
        self.splitter.addWidget(self.panel)
        self.splitter.addWidget(self.rightwidget)
        self.splitter.setCollapsible(0, False)
        self.splitter.setCollapsible(1, False)
        self.splitter.setStretchFactor(1, 10)
        layout = QtWidgets.QHBoxLayout()
        layout.addWidget(self.splitter)
        self.setLayout(layout)

        self.panel.changed.connect(self.replot)
        self.replot()

    def replot(self):
        ''' Evaluate the distribution over the grid and redraw '''
        self.fig.clf()
        ax = self.fig.add_subplot(1, 1, 1)
        plotting.plot_distribution(self.state.distribution, ax)
        self.canvas.draw_idle()
