from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter


class ExportFormatter:
    """Handles Excel styling and worksheet-level formatting."""
    @staticmethod
    def apply_header_style(ws, row=1):
        for cell in ws[row]:
            cell.font = Font(bold=True)

    @staticmethod
    def apply_column_widths(ws, widths):
        for index, width in enumerate(widths, start=1):
            ws.column_dimensions[get_column_letter(index)].width = width

    @staticmethod
    def clean_value(value):
        """Strips control characters that openpyxl refuses to write."""
        if isinstance(value, str):
            return ILLEGAL_CHARACTERS_RE.sub('', value)
        return value

    @staticmethod
    def keep_as_text(row_cells):
        # Free text starting with '=' would otherwise be stored as a formula
        for cell in row_cells:
            if isinstance(cell.value, str) and cell.value.startswith('='):
                cell.data_type = 's'
