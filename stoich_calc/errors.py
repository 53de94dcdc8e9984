# Exceptions raised by the stoichiometry core


class StoichiometryError(Exception):
    """
    Base class for every error raised by stoich_calc.
    """
    pass


class FormulaSyntaxError(StoichiometryError, ValueError):
    """
    A formula cannot be scanned, e.g. a ')' with no matching '('.
    """
    pass


class EquationSyntaxError(StoichiometryError, ValueError):
    """
    The reaction text does not have exactly one arrow with a non-empty
    side on each end.
    """
    pass


class UnknownElementError(StoichiometryError, KeyError):
    """
    An element symbol is missing from the element table during a mass
    calculation.
    """

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Unrecognized element: {symbol}")

    def __str__(self):
        # KeyError would quote the message
        return self.args[0]


class InvalidEquationError(StoichiometryError, ValueError):
    pass


class UnbalancedEquationError(StoichiometryError, ValueError):
    def __init__(self, message, balance=None):
        super().__init__(message)
        self.balance = balance
