"""Spreadsheet readers.

OpenpyxlSpreadsheetReader parses ``.xlsx`` workbooks.  Swapping in another
file-format library only requires a new ISpreadsheetReader implementation.
"""

from src.providers.spreadsheet.openpyxl_reader import OpenpyxlSpreadsheetReader

__all__ = ["OpenpyxlSpreadsheetReader"]
