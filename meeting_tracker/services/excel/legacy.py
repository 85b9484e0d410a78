"""Reading of legacy BIFF (.xls) workbooks."""
import xlrd

# Compound document header shared by every BIFF8 workbook
OLE2_SIGNATURE = b'\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1'

EMPTY_CELL_TYPES = (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR)


def is_legacy_workbook(data):
    return data[:len(OLE2_SIGNATURE)] == OLE2_SIGNATURE


def cell_value(cell, datemode):
    """Converts an xlrd cell to the value openpyxl would give for it."""
    if cell.ctype in EMPTY_CELL_TYPES:
        return None
    if cell.ctype == xlrd.XL_CELL_DATE:
        converted = xlrd.xldate.xldate_as_datetime(cell.value, datemode)
        return converted.time() if 0 <= cell.value < 1 else converted
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype == xlrd.XL_CELL_NUMBER and float(cell.value).is_integer():
        return int(cell.value)
    return cell.value


def read_legacy_rows(data):
    """Returns the rows of the first sheet as tuples of cell values."""
    book = xlrd.open_workbook(file_contents=data)
    if book.nsheets == 0:
        return []
    sheet = book.sheet_by_index(0)
    return [
        tuple(cell_value(cell, book.datemode) for cell in sheet.row(index))
        for index in range(sheet.nrows)
    ]
