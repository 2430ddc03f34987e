class SolarCalcException(Exception):
    """Base class for all exceptions raised by the solarcalc package."""
    pass


class InvalidInputError(SolarCalcException, ValueError):
    """
    Exception raised when a location or time argument is malformed or out of range.

    Attributes
        message: Explanation of the error.
    """

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)
