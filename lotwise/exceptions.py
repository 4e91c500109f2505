"""Custom exceptions for lotwise."""


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class DataValidationError(TaxComputationError):
    """Raised when input data fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class LotValidationError(DataValidationError):
    """Raised when a lot record cannot be turned into a valid TaxLot."""

    def __init__(self, lot_id: str, message: str):
        self.lot_id = lot_id
        super().__init__(f"lot {lot_id}", message)


class LotFileError(TaxComputationError):
    """Raised when a lot file cannot be read or has the wrong shape."""

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        super().__init__(f"Lot file error for {file_path}: {message}")
