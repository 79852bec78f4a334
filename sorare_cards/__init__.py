"""Export the cards of a list of Sorare users to an Excel workbook."""

__version__ = "1.0.0"
