#!/usr/bin/env python
''' VizProb - User Interface Main '''
import sys
from PyQt6 import QtWidgets

from vizprob.gui import gui_common  # noqa: F401 Install exception hook
from vizprob.gui import gui_main


def main():
    app = QtWidgets.QApplication(sys.argv)
    app.setStyle('Fusion')  # Switches light/dark modes

    main = gui_main.MainGUI()
    main.show()
    app.exec()


if __name__ == '__main__':
    main()
