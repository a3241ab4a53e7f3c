''' Combination widgets, such as a ComboBox with Label, and
    the numeric parameter fields.
'''
from PyQt6 import QtWidgets


class ComboLabel(QtWidgets.QWidget):
    ''' ComboBox with a label '''
    def __init__(self, label: str, items: list[str] = None):
        super().__init__()
        self._label = QtWidgets.QLabel(label)
        self._combo = QtWidgets.QComboBox()
        if items:
            self._combo.addItems(items)
        layout = QtWidgets.QHBoxLayout()
        layout.addWidget(self._combo)
        layout.addWidget(self._label)
        layout.addStretch()
        layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(layout)

    def __getattr__(self, name):
        ''' Get all other attributes from the combo widget '''
        return getattr(self._combo, name)


class ParamSpinBox(QtWidgets.QDoubleSpinBox):
    ''' Spin box for one distribution parameter, with the parameter label as prefix

        Args:
            name (str): Parameter name
            label (str): Prefix shown in front of the value

        Entered values are rounded to DECIMALS places before being stored.
    '''
    LIMIT = 1E9  # Spin box range must be finite
    DECIMALS = 6

    def __init__(self, name: str, label: str = ''):
        super().__init__()
        self.name = name
        self.setPrefix(label)
        self.setDecimals(self.DECIMALS)
        self.setSingleStep(0.1)
        self.setKeyboardTracking(False)

    def set_range(self, low: float, high: float) -> None:
        ''' Set the allowed range, limiting infinite ends to LIMIT '''
        self.setRange(max(low, -self.LIMIT), min(high, self.LIMIT))
