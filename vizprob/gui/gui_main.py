''' Main Window for VizProb GUI '''
from PyQt6 import QtWidgets, QtGui

from .. import version
from . import gui_common
from . import page_distribution
from .gui_settings import gui_settings


class MainGUI(QtWidgets.QMainWindow):
    ''' Main GUI holds the distribution page and menus. The application
        state is loaded from settings on startup and saved on close.
    '''
    def __init__(self, parent=None):
        super().__init__(parent)
        gui_common.centerWindow(self, 1200, 700)
        self.setWindowTitle(f'VizProb - v{version.__version__}')

        self.state = gui_settings.state
        self.page = page_distribution.DistributionWidget(self.state)
        self.setCentralWidget(self.page)

        self.menubar = QtWidgets.QMenuBar()
        actQuit = QtGui.QAction('&Quit', self)
        actQuit.triggered.connect(self.close)
        self.menuFile = QtWidgets.QMenu('&File')
        self.menuFile.addAction(actQuit)
        self.menubar.addMenu(self.menuFile)
        self.setMenuBar(self.menubar)

    def closeEvent(self, event):
        ''' Window is being closed. Save the state. '''
        gui_settings.state = self.state
        gui_settings.sync()
        event.accept()
