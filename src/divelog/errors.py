class DiveLogError(Exception):
    pass


class ParseError(DiveLogError):
    def __init__(self, message, filename=None):
        super().__init__(message)
        self.filename = filename

    def __str__(self):
        message = super().__str__()
        if self.filename:
            return f"{self.filename}: {message}"
        return message


class DeviceImportError(DiveLogError):
    pass


class UnitError(DiveLogError):
    pass


class SettingsError(DiveLogError):
    pass
