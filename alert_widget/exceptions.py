"""
Exception hierarchy for the alert widget.
"""


class WidgetError(Exception):
    """Base class for all widget errors"""


class DataLoadError(WidgetError):
    """The data source could not be fetched or did not contain an Events array"""


class EventFormatError(WidgetError):
    """An event record is missing its raw field mapping or holds unsupported values"""

    def __init__(self, message: str, index: int = None):
        super().__init__(message)
        self.index = index


class UnknownCategoryError(WidgetError, KeyError):
    """The requested category is not present in the categorized data"""

    def __init__(self, category: str):
        super().__init__(category)
        self.category = category

    def __str__(self):
        return f"Unknown category: {self.category}"


class WidgetStateError(WidgetError):
    """Operation is not valid for the widget's current lifecycle state"""
