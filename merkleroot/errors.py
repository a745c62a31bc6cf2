class MerkleRootError(Exception):
    """Base class for merkleroot-specific errors."""


# Input validation (CLI layer)
class ValidationError(MerkleRootError):
    pass


# Leaf extraction
class ReadError(MerkleRootError):
    def __init__(self, message: str, *, block_index: int = -1, expected: int = 0, actual: int = 0):
        super().__init__(message)
        self.block_index = block_index
        self.expected = expected
        self.actual = actual


# Hash primitive
class HashError(MerkleRootError):
    pass


# Reduction
class EmptyInputError(MerkleRootError):
    pass
