class SpreadsheetError(Exception):
    """Base class for spreadsheet import/export failures."""


class WorkbookFormatError(SpreadsheetError):
    """The uploaded bytes could not be read as a workbook."""


class AcquisitionError(SpreadsheetError):
    """The workbook bytes could not be fetched."""


class ExportError(SpreadsheetError):
    """The workbook could not be written."""
