''' Configuration storage for the VizProb GUI

The application state is saved using the Qt QSettings interface in an INI file at:
    (Windows) -- $APPDATA$/VizProb/VizProb.ini
    (Mac/Unix) -- ~/.config/VizProb/VizProb.ini

It is read when the main window opens and written when it closes.
'''
from PyQt6 import QtCore

from ..project import ProjectState


class Settings:
    _settings = QtCore.QSettings(QtCore.QSettings.Format.IniFormat,
                                 QtCore.QSettings.Scope.UserScope,
                                 'VizProb', 'VizProb')

    def sync(self):
        ''' Sync the settings to disk. QSettings already does this periodically. '''
        self._settings.sync()

    @property
    def state(self) -> ProjectState:
        ''' Get the saved application state. Missing or corrupt state gives the default. '''
        return ProjectState.loads(self._settings.value('state/app', '', type=str))

    @state.setter
    def state(self, value: ProjectState) -> None:
        ''' Save the application state '''
        self._settings.setValue('state/app', value.dumps())

    def clear_state(self) -> None:
        ''' Remove the saved application state '''
        self._settings.remove('state/app')

    def set_defaults(self) -> None:
        ''' Restore all values to default '''
        self.state = ProjectState()
        self.sync()


gui_settings = Settings()
