"""
Spreadsheet loader implementation (.xlsx, .xls).
Serialises every worksheet as a "Sheet: <name>" header followed by one
comma-joined line per row, so the workbook can be read like any other text.
"""
import logging

from ingestion.loaders.base_loader import BaseLoader, ExtractionError, LoaderException

logger = logging.getLogger(__name__)


class XlsxLoader(BaseLoader):
    """
    Loader for Excel workbooks.

    Output layout:
        Sheet: Budget
        Item, Cost
        Rent, 1200

        Sheet: Notes
        ...
    Empty rows are skipped; empty worksheets produce only their header.
    """

    def __init__(self, cell_separator: str = ", ", **kwargs):
        super().__init__(**kwargs)
        self.cell_separator = cell_separator
        try:
            import openpyxl
            self.openpyxl = openpyxl
        except ImportError:
            raise LoaderException(
                "openpyxl is not installed. Install with: pip install openpyxl"
            )

    def load(self, file_path: str) -> str:
        """
        Load a workbook and return its worksheets as text.

        Raises:
            ExtractionError: If the workbook cannot be parsed (including legacy binary .xls)
            FileNotFoundError: If file doesn't exist
        """
        path = self._validate_file(file_path)

        lines: list[str] = []
        try:
            # A file handle skips openpyxl's extension check, so OOXML
            # workbooks saved with an .xls name still load.
            with open(path, "rb") as handle:
                workbook = self.openpyxl.load_workbook(handle, data_only=True)
                try:
                    for worksheet in workbook.worksheets:
                        lines.append(f"Sheet: {worksheet.title}")
                        for row in worksheet.iter_rows(values_only=True):
                            if all(value is None for value in row):
                                continue
                            lines.append(self._format_row(row))
                        lines.append("")
                finally:
                    workbook.close()
        except Exception as e:
            logger.error("Failed to read workbook %s: %s", path.name, e)
            raise ExtractionError(f"Excel processing error: {e}") from e

        content = "\n".join(lines)
        logger.info("Loaded workbook: %s (%d chars)", path.name, len(content))
        return content

    def _format_row(self, row: tuple) -> str:
        return self.cell_separator.join("" if value is None else str(value) for value in row)
