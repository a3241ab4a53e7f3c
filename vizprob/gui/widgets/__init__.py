from .combo import ComboLabel, ParamSpinBox
