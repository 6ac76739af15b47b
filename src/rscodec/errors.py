from __future__ import annotations


class RSDefect(ValueError):
    """
    Caller misuse: the arguments break the codec's contract.

    Not expected in a correct program; fix the call site rather than retrying.
    """


class InvalidSymbolCount(RSDefect):
    pass


class DataTooLong(RSDefect):
    pass


class DataTooShort(RSDefect):
    pass


class TooManyErasures(RSDefect):
    pass


class ErasureOutOfRange(RSDefect):
    pass


class RSError(ValueError):
    """
    The data is too damaged to be repaired with the available ECC bytes.

    Expected under real-world corruption (e.g. ask for a retransmission).
    """


class TooManyErrors(RSError):
    pass


class CouldNotLocateError(RSError):
    pass


class CouldNotCorrect(RSError):
    pass


class CouldNotFindMagnitude(RSError):
    pass
