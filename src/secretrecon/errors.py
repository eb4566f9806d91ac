"""Fault taxonomy for share decoding and secret reconstruction.

Value faults also subclass ValueError so callers that only care about
"bad input" can catch the builtin.
"""


class ReconstructionError(Exception):
    """Root of every fault raised by secretrecon."""


class DecodeError(ReconstructionError, ValueError):
    """A share value could not be decoded from its base."""


class InvalidDigitCharacter(DecodeError):
    def __init__(self, value: str, char: str, position: int):
        self.value = value
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid character {char!r} at position {position} in {value!r}")


class DigitExceedsBase(DecodeError):
    def __init__(self, value: str, char: str, base: int):
        self.value = value
        self.char = char
        self.base = base
        super().__init__(
            f"Digit {char!r} in {value!r} exceeds base {base}")


class UnsupportedBase(DecodeError):
    def __init__(self, base):
        self.base = base
        super().__init__(f"Base must be in [2, 16], got {base}")


class DuplicateXCoordinate(ReconstructionError, ZeroDivisionError):
    """Two chosen shares have the same x; the Lagrange basis is undefined."""

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Duplicate x-coordinate {x} among chosen shares")


class InsufficientShares(ReconstructionError, ValueError):
    pass


class NonIntegralSecret(ReconstructionError, ValueError):
    """Interpolated value at 0 is not an integer."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Reconstructed value {value} is not an integer; "
            "shares do not lie on an integer polynomial")


class InconsistentShares(ReconstructionError, ValueError):
    def __init__(self, xs: list):
        self.xs = list(xs)
        super().__init__(
            f"Shares at x={self.xs} disagree with the reconstructed polynomial")


class ShareFileError(ReconstructionError):
    """File-level fault: the share file could not be turned into a ShareSet."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class ShareFileNotFound(ShareFileError):
    pass


class ShareFileParseError(ShareFileError):
    pass


class MalformedShareFile(ShareFileError):
    pass


class ShareCountMismatch(ShareFileError):
    def __init__(self, path, declared: int, found: int):
        self.declared = declared
        self.found = found
        super().__init__(
            path, f"declared n={declared} but found {found} shares")
