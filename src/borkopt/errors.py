"""Typed failures of a single optimize call.

Every error carries a ``kind`` tag and a human readable ``message`` that the
front ends show as is.
"""


class OptimizationError(Exception):
    kind = "OptimizationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptySequenceError(OptimizationError):
    kind = "EmptySequence"

    def __init__(self):
        super().__init__("No sequence found.")


class LengthNotMultipleOfThreeError(OptimizationError):
    kind = "LengthNotMultipleOfThree"

    def __init__(self, length: int):
        super().__init__(f"Input length {length} not divisible by 3.")
        self.length = length


class InvalidCodonError(OptimizationError):
    kind = "InvalidCodon"

    def __init__(self, codon: str, index: int):
        super().__init__(f"Invalid DNA codon '{codon}' at codon {index}.")
        self.codon = codon
        self.index = index


class UnsupportedResidueError(OptimizationError):
    kind = "UnsupportedResidue"

    def __init__(self, residue: str, position: int):
        super().__init__(f"Unsupported amino acid at {position}: {residue}")
        self.residue = residue
        self.position = position
